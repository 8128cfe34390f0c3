"""Closed vocabularies used by ComicInfo fields.

Every vocabulary carries an UNSPECIFIED member whose token is the empty
string. Unspecified values are valid and are left out of the encoded document.
"""

from enum import Enum


class ComicInfoEnum(str, Enum):
    """Base class for ComicInfo string vocabularies."""

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Return True if value is a member or the token of a member."""
        if isinstance(value, cls):
            return True
        if not isinstance(value, str):
            return False
        return value in cls._value2member_map_

    def __str__(self) -> str:
        return self.value


class YesNo(ComicInfoEnum):
    """Tri-state flag, used by BlackAndWhite."""

    UNSPECIFIED = ""
    UNKNOWN = "Unknown"
    NO = "No"
    YES = "Yes"


class Manga(ComicInfoEnum):
    """Manga flag; YES_AND_RIGHT_TO_LEFT also sets the reading direction."""

    UNSPECIFIED = ""
    UNKNOWN = "Unknown"
    NO = "No"
    YES = "Yes"
    YES_AND_RIGHT_TO_LEFT = "YesAndRightToLeft"


class AgeRating(ComicInfoEnum):
    """Age rating of the book (Revision 2 onward)."""

    UNSPECIFIED = ""
    UNKNOWN = "Unknown"
    ADULTS_ONLY_18_PLUS = "Adults Only 18+"
    EARLY_CHILDHOOD = "Early Childhood"
    EVERYONE = "Everyone"
    EVERYONE_10_PLUS = "Everyone 10+"
    G = "G"
    KIDS_TO_ADULTS = "Kids to Adults"
    M = "M"
    MA15_PLUS = "MA15+"
    MATURE_17_PLUS = "Mature 17+"
    PG = "PG"
    R18_PLUS = "R18+"
    RATING_PENDING = "Rating Pending"
    TEEN = "Teen"
    X18_PLUS = "X18+"


class PageType(ComicInfoEnum):
    """Role of a page within the book."""

    UNSPECIFIED = ""
    FRONT_COVER = "FrontCover"
    INNER_COVER = "InnerCover"
    ROUNDUP = "Roundup"
    STORY = "Story"
    ADVERTISEMENT = "Advertisement"
    EDITORIAL = "Editorial"
    LETTERS = "Letters"
    PREVIEW = "Preview"
    BACK_COVER = "BackCover"
    OTHER = "Other"
    DELETED = "Deleted"
