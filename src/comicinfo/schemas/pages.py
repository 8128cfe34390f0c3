"""Page descriptors and page collections.

A page collection lists the images of the archive in reading order. Each
descriptor is written as a <Page> element whose data lives in attributes:

    <Pages>
        <Page Image="0" Type="FrontCover" DoublePage="false" ImageSize="48213"
              Key="cover.jpg" ImageWidth="1200" ImageHeight="1800"/>
        ...
    </Pages>
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar

from ..exceptions import ValidationError
from .enums import PageType

# Width or height of an image whose dimensions are not known.
UNKNOWN_DIMENSION = -1


@dataclass
class PageV1:
    """A page of a Revision 1 document.

    Attributes:
        image: 0-based index of the image in reading order
        type: Role of the page (cover, story, advertisement...)
        double_page: Whether the image is a double-page spread
        image_size: Size of the image file in bytes
        key: Free-text key, unique within the collection
        image_width: Width in pixels, or -1 when unknown
        image_height: Height in pixels, or -1 when unknown
    """

    ATTRIBUTES: ClassVar[tuple[tuple[str, str], ...]] = (
        ("image", "Image"),
        ("type", "Type"),
        ("double_page", "DoublePage"),
        ("image_size", "ImageSize"),
        ("key", "Key"),
        ("image_width", "ImageWidth"),
        ("image_height", "ImageHeight"),
    )

    image: int = 0
    type: PageType = PageType.STORY
    double_page: bool = False
    image_size: int = 0
    key: str = ""
    image_width: int = UNKNOWN_DIMENSION
    image_height: int = UNKNOWN_DIMENSION

    def validate(self) -> None:
        """Check the page role and the width/height sentinel rule.

        Raises:
            ValidationError: On the first attribute that breaks its rule
        """
        if not PageType.is_valid(self.type):
            raise ValidationError("Type", self.type, f"invalid page type {str(self.type)!r}")
        if not (self.image_width > 0 or self.image_width == UNKNOWN_DIMENSION):
            raise ValidationError(
                "ImageWidth", self.image_width, "image width must be greater than 0 or -1"
            )
        if not (self.image_height > 0 or self.image_height == UNKNOWN_DIMENSION):
            raise ValidationError(
                "ImageHeight", self.image_height, "image height must be greater than 0 or -1"
            )


@dataclass
class PageV2(PageV1):
    """A page of a Revision 2 or 2.1 document.

    Adds a bookmark label to the Revision 1 descriptor.

    Attributes:
        bookmark: Label shown by readers in their bookmark list
    """

    ATTRIBUTES: ClassVar[tuple[tuple[str, str], ...]] = (
        ("image", "Image"),
        ("type", "Type"),
        ("double_page", "DoublePage"),
        ("image_size", "ImageSize"),
        ("key", "Key"),
        ("bookmark", "Bookmark"),
        ("image_width", "ImageWidth"),
        ("image_height", "ImageHeight"),
    )

    bookmark: str = ""


@dataclass
class PageCollection:
    """Ordered page descriptors.

    Nothing is checked when pages are added; duplicates are only rejected
    by validate().
    """

    pages: list = field(default_factory=list)

    def __iter__(self) -> Iterator:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def validate(self) -> None:
        """Check key uniqueness and every descriptor in one pass.

        Raises:
            ValidationError: For the first duplicated key or the first
                invalid descriptor, with its 1-based position
        """
        keys: set[str] = set()
        for position, page in enumerate(self.pages, start=1):
            if page.key in keys:
                raise ValidationError(
                    "Pages",
                    page.key,
                    f"duplicate key found for page {position}: {page.key!r}",
                    position=position,
                )
            keys.add(page.key)
            try:
                page.validate()
            except ValidationError as e:
                raise ValidationError(
                    "Pages",
                    e.value,
                    f"failed to validate page {position}: {e.reason}",
                    position=position,
                ) from e


@dataclass
class PagesV1(PageCollection):
    """Revision 1 page list."""

    pages: list[PageV1] = field(default_factory=list)


@dataclass
class PagesV2(PageCollection):
    """Revision 2 page list, with bookmarks."""

    pages: list[PageV2] = field(default_factory=list)
