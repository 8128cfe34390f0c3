"""ComicInfo Revision 2.0 document."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from .exceptions import ValidationError
from .schemas.enums import AgeRating
from .schemas.pages import PagesV1, PagesV2, PageV2
from .v1 import ComicInfoV1
from .validators import validate_choice, validate_rating

V2_SCHEMA_LOCATION = (
    "https://raw.githubusercontent.com/anansi-project/comicinfo/refs/heads/main/schema/v2.0/ComicInfo.xsd"
)


@dataclass
class ComicInfoV2(ComicInfoV1):
    """A Revision 2.0 ComicInfo.xml document.

    Extends Revision 1.0 with release day, cast and setting, story arcs, age
    and community ratings, and bookmarkable pages. The binding format is
    written as Format.

    Attributes:
        day: Release day of the month
        characters: Characters appearing in the book, comma separated
        teams: Teams appearing in the book, comma separated
        locations: Locations mentioned in the book, comma separated
        scan_information: Free text about who scanned the book
        story_arc: Story arc(s) the book belongs to
        series_group: Groups or collections the series belongs to
        age_rating: Age rating of the book
        pages: Page descriptors in reading order, with bookmarks
        community_rating: Rating from 0.0 to 5.0 with at most 2 decimals,
            or None when not rated
        main_character_or_team: The single main character or team
        review: Review of the book
    """

    RATING_DECIMALS: ClassVar[int] = 2
    SCHEMA_LOCATION: ClassVar[str] = V2_SCHEMA_LOCATION
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
        ("publisher", "Publisher"),
        ("imprint", "Imprint"),
        ("genre", "Genre"),
        ("web", "Web"),
        ("page_count", "PageCount"),
        ("language_iso", "LanguageISO"),
        ("format", "Format"),
        ("black_and_white", "BlackAndWhite"),
        ("manga", "Manga"),
        ("characters", "Characters"),
        ("teams", "Teams"),
        ("locations", "Locations"),
        ("scan_information", "ScanInformation"),
        ("story_arc", "StoryArc"),
        ("series_group", "SeriesGroup"),
        ("age_rating", "AgeRating"),
        ("pages", "Pages"),
        ("community_rating", "CommunityRating"),
        ("main_character_or_team", "MainCharacterOrTeam"),
        ("review", "Review"),
    )

    day: int = 0
    characters: str = ""
    teams: str = ""
    locations: str = ""
    scan_information: str = ""
    story_arc: str = ""
    series_group: str = ""
    age_rating: AgeRating = AgeRating.UNSPECIFIED
    pages: PagesV2 = field(default_factory=PagesV2)
    community_rating: Decimal | float | None = None
    main_character_or_team: str = ""
    review: str = ""

    def validate(self) -> None:
        """Check the inherited rules, then the Revision 2 additions.

        Raises:
            ValidationError: Describing the first rule that failed
        """
        super().validate()
        validate_rating(self.community_rating, self.RATING_DECIMALS)

    def _validate_fields(self) -> None:
        super()._validate_fields()
        validate_choice("AgeRating", self.age_rating, AgeRating)

    def _validate_pages(self) -> None:
        if isinstance(self.pages, PagesV1):
            if len(self.pages):
                raise ValidationError(
                    "Pages", self.pages, "legacy pages must not be set, use PagesV2"
                )
            return
        for position, page in enumerate(self.pages, start=1):
            if not isinstance(page, PageV2):
                raise ValidationError(
                    "Pages",
                    page,
                    f"legacy pages must not be set, page {position} is not a PageV2",
                    position=position,
                )
        self.pages.validate()
