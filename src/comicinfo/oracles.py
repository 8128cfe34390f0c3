"""Language-tag and URL syntax checks backed by third-party parsers."""

import re

import httpx
import langcodes

# Standard English tag, handy when filling LanguageISO.
LANGUAGE_ENGLISH = langcodes.standardize_tag("en")

_AUTHORITY = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.-]*:)?//(?P<authority>[^/?#]*)")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_PORT = re.compile(r"(?::[0-9]*)?")


def is_valid_language_tag(code: str) -> bool:
    """Return True if code is a well-formed, registered BCP 47 language tag."""
    return langcodes.tag_is_valid(code)


def parse_url(token: str) -> httpx.URL:
    """Parse a single URL token.

    httpx is lenient about a few RFC 3986 violations, so those are checked
    on the raw token first: a leading colon (missing scheme), malformed
    percent-escapes, unbalanced IPv6 brackets and non-numeric ports.

    Args:
        token: One URL, without surrounding whitespace

    Returns:
        The parsed httpx.URL

    Raises:
        httpx.InvalidURL: If the token is not a syntactically valid URL
    """
    _check_syntax(token)
    return httpx.URL(token)


def _check_syntax(token: str) -> None:
    if token.startswith(":"):
        raise httpx.InvalidURL(f"missing scheme in {token!r}")
    if _BAD_ESCAPE.search(token):
        raise httpx.InvalidURL(f"invalid percent-escape in {token!r}")

    match = _AUTHORITY.match(token)
    if match is None:
        return
    host_port = match["authority"].rpartition("@")[2]
    if host_port.startswith("["):
        end = host_port.find("]")
        if end == -1:
            raise httpx.InvalidURL(f"missing ']' in host of {token!r}")
        port = host_port[end + 1:]
    elif "[" in host_port or "]" in host_port:
        raise httpx.InvalidURL(f"unexpected bracket in host of {token!r}")
    else:
        port = host_port[host_port.find(":"):] if ":" in host_port else ""
    if not _PORT.fullmatch(port):
        raise httpx.InvalidURL(f"invalid port {port!r} in {token!r}")
