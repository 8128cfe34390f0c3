"""Value types shared by every ComicInfo revision."""

from .enums import AgeRating, ComicInfoEnum, Manga, PageType, YesNo
from .pages import UNKNOWN_DIMENSION, PageCollection, PagesV1, PagesV2, PageV1, PageV2

__all__ = [
    "AgeRating",
    "ComicInfoEnum",
    "Manga",
    "PageCollection",
    "PageType",
    "PagesV1",
    "PagesV2",
    "PageV1",
    "PageV2",
    "UNKNOWN_DIMENSION",
    "YesNo",
]
