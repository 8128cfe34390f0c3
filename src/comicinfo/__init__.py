"""ComicInfo.xml metadata documents for comic-book archives.

Build a ComicInfoV1, ComicInfoV2 or ComicInfoV21 document, then call
validate() or encode(sink) on it.
"""

from .encoder import COMIC_INFO_FILE_NAME, XSI_NS, ComicInfoEncoder
from .exceptions import (
    ComicInfoError,
    PreconditionError,
    SerializationError,
    ValidationError,
)
from .oracles import LANGUAGE_ENGLISH
from .schemas import (
    UNKNOWN_DIMENSION,
    AgeRating,
    Manga,
    PagesV1,
    PagesV2,
    PageType,
    PageV1,
    PageV2,
    YesNo,
)
from .v1 import ComicInfoV1
from .v2 import ComicInfoV2
from .v21 import ComicInfoV21

__all__ = [
    "AgeRating",
    "COMIC_INFO_FILE_NAME",
    "ComicInfoEncoder",
    "ComicInfoError",
    "ComicInfoV1",
    "ComicInfoV2",
    "ComicInfoV21",
    "LANGUAGE_ENGLISH",
    "Manga",
    "PageType",
    "PagesV1",
    "PagesV2",
    "PageV1",
    "PageV2",
    "PreconditionError",
    "SerializationError",
    "UNKNOWN_DIMENSION",
    "ValidationError",
    "XSI_NS",
    "YesNo",
]
