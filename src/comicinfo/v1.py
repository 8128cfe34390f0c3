"""ComicInfo Revision 1.0 document."""

from dataclasses import dataclass, field
from typing import BinaryIO, ClassVar

from .encoder import ComicInfoEncoder
from .schemas.enums import Manga, YesNo
from .schemas.pages import PagesV1
from .validators import validate_choice, validate_language, validate_web

V1_SCHEMA_LOCATION = (
    "https://github.com/anansi-project/comicinfo/raw/refs/heads/main/schema/v1.0/ComicInfo.xsd"
)


@dataclass
class ComicInfoV1:
    """A Revision 1.0 ComicInfo.xml document.

    Creator fields hold one element per role; several creators sharing a role
    are comma separated. Genre is comma separated too, while Web holds URLs
    separated by single spaces.

    Attributes:
        title: Title of the book
        series: Series the book belongs to
        number: Number of the book within the series
        count: Total number of books in the series
        volume: Volume of the series, by number or by year
        alternate_series: Cross-over series the book is also part of
        alternate_number: Number of the book in the alternate series
        alternate_count: Number of books in the alternate series
        summary: Description of the book
        notes: Free text, usually about the tool that wrote the file
        year: Release year
        month: Release month
        writer: Author(s) of the scenario
        penciller: Pencil artist(s)
        inker: Inker(s)
        colorist: Colorist(s)
        letterer: Letterer(s)
        cover_artist: Cover artist(s)
        editor: Editor(s)
        publisher: Publishing organization
        imprint: Imprint of the publisher (e.g. Vertigo for DC Comics)
        genre: Genres of the book or series
        web: Reference URLs for the book
        page_count: Number of pages in the book
        language_iso: BCP 47 language tag, written as LanguageISO
        format: Binding or presentation format ("TPB", "HC", "Web", "Digital")
        black_and_white: Whether the book is black and white
        manga: Whether the book is a manga, and its reading direction
        pages: Page descriptors in reading order
    """

    SCHEMA_LOCATION: ClassVar[str] = V1_SCHEMA_LOCATION
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
        ("format", "format"),
        ("black_and_white", "BlackAndWhite"),
        ("manga", "Manga"),
        ("pages", "Pages"),
    )

    title: str = ""
    series: str = ""
    number: int = 0
    count: int = 0
    volume: int = 0
    alternate_series: str = ""
    alternate_number: int = 0
    alternate_count: int = 0
    summary: str = ""
    notes: str = ""
    year: int = 0
    month: int = 0
    writer: str = ""
    penciller: str = ""
    inker: str = ""
    colorist: str = ""
    letterer: str = ""
    cover_artist: str = ""
    editor: str = ""
    publisher: str = ""
    imprint: str = ""
    genre: str = ""
    web: str = ""
    page_count: int = 0
    language_iso: str = ""
    format: str = ""
    black_and_white: YesNo = YesNo.UNSPECIFIED
    manga: Manga = Manga.UNSPECIFIED
    pages: PagesV1 = field(default_factory=PagesV1)

    def validate(self) -> None:
        """Check every field rule, stopping at the first violation.

        Raises:
            ValidationError: Describing the first rule that failed
        """
        self._validate_fields()
        self._validate_pages()

    def _validate_fields(self) -> None:
        validate_web(self.web)
        validate_language(self.language_iso)
        validate_choice("BlackAndWhite", self.black_and_white, YesNo)
        validate_choice("Manga", self.manga, Manga)

    def _validate_pages(self) -> None:
        self.pages.validate()

    def encode(self, sink: BinaryIO) -> None:
        """Validate the document and write it as XML to sink.

        See ComicInfoEncoder.encode for the errors raised.
        """
        ComicInfoEncoder().encode(self, sink)

    def to_bytes(self) -> bytes:
        """Return the encoded document."""
        return ComicInfoEncoder().to_bytes(self)
