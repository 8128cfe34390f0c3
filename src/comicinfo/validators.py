"""Field rules for ComicInfo documents.

Each rule returns None when the value is acceptable and raises
ValidationError otherwise. Rules are fail-fast: the first violation found is
the one reported.
"""

from decimal import Decimal, InvalidOperation

import httpx

from .exceptions import ValidationError
from .oracles import is_valid_language_tag, parse_url

RATING_MIN = Decimal(0)
RATING_MAX = Decimal(5)


def validate_web(web: str) -> None:
    """Validate the space-separated URLs of the Web field.

    Args:
        web: Free text holding zero or more URLs separated by single spaces

    Raises:
        ValidationError: For the first token that is not a valid URL, with
            its 0-based index as position
    """
    for index, token in enumerate(web.split(" ")):
        try:
            parse_url(token)
        except httpx.InvalidURL as e:
            raise ValidationError(
                "Web", token, f"invalid URL #{index} {token!r}: {e}", position=index
            ) from e


def validate_language(code: str) -> None:
    """Validate LanguageISO; the empty string means "not specified"."""
    if code and not is_valid_language_tag(code):
        raise ValidationError("LanguageISO", code, f"unknown language tag {code!r}")


def validate_choice(field: str, value: object, vocabulary) -> None:
    """Validate that value belongs to a closed vocabulary.

    Args:
        field: Wire name of the field, used in the error
        value: Enum member or raw token
        vocabulary: ComicInfoEnum subclass holding the allowed tokens
    """
    if not vocabulary.is_valid(value):
        raise ValidationError(field, value, f"unknown value {str(value)!r}")


def to_decimal(value: Decimal | float | int | str) -> Decimal:
    """Convert a rating to Decimal.

    Floats go through their shortest repr so that 4.57 stays 4.57 rather
    than its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def validate_rating(value: Decimal | float | None, decimals: int) -> None:
    """Validate CommunityRating.

    Args:
        value: Rating, or None when not set (always valid)
        decimals: Maximum number of decimal digits allowed

    Raises:
        ValidationError: If the rating is out of [0, 5] or too precise
    """
    if value is None:
        return
    try:
        rating = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValidationError("CommunityRating", value, f"not a number: {value!r}") from e

    if not rating.is_finite():
        raise ValidationError("CommunityRating", value, f"not a finite number: {value}")
    if not RATING_MIN <= rating <= RATING_MAX:
        raise ValidationError(
            "CommunityRating", value, f"{rating} is outside the range 0.0 to 5.0"
        )
    if rating != rating.quantize(Decimal(1).scaleb(-decimals)):
        raise ValidationError(
            "CommunityRating",
            value,
            f"{rating} has more than {decimals} decimal digit(s)",
        )
