"""ComicInfo Revision 2.1 (draft) document."""

from dataclasses import dataclass
from typing import ClassVar

from .v2 import ComicInfoV2

V21_SCHEMA_LOCATION = (
    "https://github.com/anansi-project/comicinfo/raw/refs/heads/main/drafts/v2.1/ComicInfo.xsd"
)


@dataclass
class ComicInfoV21(ComicInfoV2):
    """A Revision 2.1 draft ComicInfo.xml document.

    Extends Revision 2.0 with translators, tags, reading-order positions and
    trade item numbers. The binding format is written as format.

    CommunityRating precision follows RATING_DECIMALS. An earlier shape of
    the draft allowed a single decimal digit; subclass and set
    RATING_DECIMALS = 1 to produce documents for that shape.

    Attributes:
        translator: Translator(s), including fan translators, comma separated
        tags: Tags of the book or series (e.g. "ninja, school life")
        story_arc_number: Position of the book within each StoryArc, comma
            separated in the same order as StoryArc
        gtin: Global Trade Item Number (ISBN, ISSN, EAN, JAN...)
    """

    RATING_DECIMALS: ClassVar[int] = 2
    SCHEMA_LOCATION: ClassVar[str] = V21_SCHEMA_LOCATION
    ELEMENTS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("title", "Title"),
        ("series", "Series"),
        ("number", "Number"),
        ("count", "Count"),
        ("volume", "Volume"),
        ("alternate_series", "AlternateSeries"),
        ("alternate_number", "AlternateNumber"),
        ("alternate_count", "AlternateCount"),
        ("summary", "Summary"),
        ("notes", "Notes"),
        ("year", "Year"),
        ("month", "Month"),
        ("day", "Day"),
        ("writer", "Writer"),
        ("penciller", "Penciller"),
        ("inker", "Inker"),
        ("colorist", "Colorist"),
        ("letterer", "Letterer"),
        ("cover_artist", "CoverArtist"),
        ("editor", "Editor"),
        ("translator", "Translator"),
        ("publisher", "Publisher"),
        ("imprint", "Imprint"),
        ("genre", "Genre"),
        ("tags", "Tags"),
        ("web", "Web"),
        ("page_count", "PageCount"),
        ("language_iso", "LanguageISO"),
        ("format", "format"),
        ("black_and_white", "BlackAndWhite"),
        ("manga", "Manga"),
        ("characters", "Characters"),
        ("teams", "Teams"),
        ("locations", "Locations"),
        ("scan_information", "ScanInformation"),
        ("story_arc", "StoryArc"),
        ("story_arc_number", "StoryArcNumber"),
        ("series_group", "SeriesGroup"),
        ("age_rating", "AgeRating"),
        ("pages", "Pages"),
        ("community_rating", "CommunityRating"),
        ("main_character_or_team", "MainCharacterOrTeam"),
        ("review", "Review"),
        ("gtin", "GTIN"),
    )

    translator: str = ""
    tags: str = ""
    story_arc_number: str = ""
    gtin: str = ""
