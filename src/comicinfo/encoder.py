"""ComicInfo XML encoder.

Writes a validated document as ComicInfo.xml: a fixed XML declaration line
followed by the <ComicInfo> element tree, with the XML Schema instance
namespace and the revision's schema location injected on the root element.

Encoding runs through three states:

    Unvalidated -> HeaderWritten -> Done

A document that fails validation never leaves Unvalidated and nothing is
written. A writer failure after the header leaves a partial document in the
sink; use to_bytes() or write() when the output must be all-or-nothing.
"""

import io
import logging
from dataclasses import fields
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from lxml import etree

from .exceptions import PreconditionError, SerializationError
from .schemas.pages import PageCollection
from .validators import to_decimal

logger = logging.getLogger(__name__)

COMIC_INFO_FILE_NAME = "ComicInfo.xml"
ROOT_ELEMENT = "ComicInfo"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
XML_HEADER = b'<?xml version="1.0" encoding="UTF-8"?>\n'


class ComicInfoEncoder:
    """Encode ComicInfo documents of any revision.

    The document class supplies everything revision-specific: SCHEMA_LOCATION
    for the root element and ELEMENTS, the ordered (attribute, element name)
    pairs to serialize.

    Config keys:
        indent: Indentation unit per nesting level (default: a tab)
    """

    def __init__(self, config: dict | None = None):
        self._config = config or {}

    @property
    def indent(self) -> str:
        return str(self._config.get("indent", "\t"))

    def encode(self, document, sink: BinaryIO) -> None:
        """Validate a document and write it to a binary sink.

        Args:
            document: ComicInfoV1, ComicInfoV2 or ComicInfoV21 instance
            sink: Writable binary file-like object

        Raises:
            PreconditionError: If sink is None
            ValidationError: If the document breaks one of its rules
            SerializationError: If the header or body cannot be written
        """
        if sink is None:
            raise PreconditionError("output cannot be None")

        revision = type(document).__name__
        document.validate()
        logger.debug(f"Validated {revision} document")

        self._write(sink, XML_HEADER, "failed to write XML header")

        try:
            root = self.build(document)
            body = etree.tostring(root, encoding="UTF-8", xml_declaration=False)
        except (ValueError, TypeError, etree.LxmlError) as e:
            raise SerializationError(f"failed to encode {revision} XML: {e}") from e
        self._write(sink, body, f"failed to encode {revision} XML")
        logger.debug(f"Encoded {revision} document")

    def _write(self, sink: BinaryIO, data: bytes, context: str) -> None:
        """Write all of data to sink, continuing after short writes.

        Raises:
            SerializationError: If the sink raises or stops accepting bytes
        """
        while data:
            try:
                written = sink.write(data)
            except Exception as e:
                raise SerializationError(f"{context}: {e}") from e
            # Sinks that do not report a count are taken to accept everything.
            if written is None or written >= len(data):
                return
            if written <= 0:
                raise SerializationError(
                    f"{context}: sink accepted no bytes, {len(data)} left"
                )
            data = data[written:]

    def to_bytes(self, document) -> bytes:
        """Encode a document in memory and return the complete XML bytes."""
        buffer = io.BytesIO()
        self.encode(document, buffer)
        return buffer.getvalue()

    def write(self, document, path: Path) -> Path:
        """Encode a document and write it to disk.

        The file is only written once encoding has fully succeeded.

        Args:
            document: Document to encode
            path: Target file, or a directory to hold ComicInfo.xml

        Returns:
            Path of the written file
        """
        path = Path(path)
        if path.is_dir():
            path = path / COMIC_INFO_FILE_NAME

        data = self.to_bytes(document)
        try:
            path.write_bytes(data)
        except OSError as e:
            raise SerializationError(f"failed to write {path}: {e}") from e
        logger.info(f"Wrote {COMIC_INFO_FILE_NAME} to {path}")
        return path

    def build(self, document) -> etree._Element:
        """Build the indented <ComicInfo> element tree for a document.

        Fields holding their empty value (0, "", unspecified, None, no pages)
        are omitted.
        """
        root = etree.Element(ROOT_ELEMENT, nsmap={"xsi": XSI_NS})
        root.set(f"{{{XSI_NS}}}schemaLocation", document.SCHEMA_LOCATION)

        # Fields defaulting to None hold ratings and are only omitted when None.
        nullable = {f.name for f in fields(document) if f.default is None}

        for attribute, element_name in document.ELEMENTS:
            value = getattr(document, attribute)
            if isinstance(value, PageCollection):
                if len(value):
                    self._append_pages(root, element_name, value)
                continue
            if attribute in nullable and value is not None:
                text = self._format_decimal(to_decimal(value))
            else:
                text = self._format_value(value)
            if text:
                etree.SubElement(root, element_name).text = text

        if len(root):
            etree.indent(root, space=self.indent)
        return root

    def _append_pages(
        self, root: etree._Element, element_name: str, pages: PageCollection
    ) -> None:
        """Append <Pages> with one <Page> per descriptor, in reading order."""
        pages_el = etree.SubElement(root, element_name)
        for page in pages:
            page_el = etree.SubElement(pages_el, "Page")
            for attribute, attribute_name in page.ATTRIBUTES:
                value = getattr(page, attribute)
                if isinstance(value, bool):
                    page_el.set(attribute_name, "true" if value else "false")
                    continue
                text = self._format_value(value, keep_zero=True)
                # Type has a schema default; Key and Bookmark may be empty.
                if text or attribute_name != "Type":
                    page_el.set(attribute_name, text)

    def _format_value(self, value, keep_zero: bool = False) -> str:
        """Render a field value as element text; "" means omit."""
        if value is None:
            return ""
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, int):
            return str(value) if value or keep_zero else ""
        if isinstance(value, (Decimal, float)):
            return self._format_decimal(to_decimal(value))
        return str(value)

    def _format_decimal(self, value: Decimal) -> str:
        """Plain notation without trailing zeros: 5.00 -> "5", 4.50 -> "4.5"."""
        text = format(value.normalize(), "f")
        return "0" if text in ("-0", "") else text
