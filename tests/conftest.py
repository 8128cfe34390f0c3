"""Pytest fixtures for comicinfo tests."""

import json
from decimal import Decimal

import pytest

from comicinfo import (
    AgeRating,
    ComicInfoV1,
    ComicInfoV2,
    ComicInfoV21,
    Manga,
    PagesV1,
    PagesV2,
    PageType,
    PageV1,
    PageV2,
    YesNo,
)


@pytest.fixture
def sample_pages_v1():
    """Three Revision 1 pages: cover, story, back cover."""
    return PagesV1(
        pages=[
            PageV1(image=0, type=PageType.FRONT_COVER, image_size=48213, key="cover.jpg",
                   image_width=1200, image_height=1800),
            PageV1(image=1, type=PageType.STORY, image_size=51002, key="p001.jpg",
                   image_width=1200, image_height=1800),
            PageV1(image=2, type=PageType.BACK_COVER, image_size=39877, key="back.jpg"),
        ]
    )


@pytest.fixture
def sample_pages_v2():
    """Three Revision 2 pages with a bookmark on the cover."""
    return PagesV2(
        pages=[
            PageV2(image=0, type=PageType.FRONT_COVER, image_size=48213, key="cover.jpg",
                   bookmark="Cover", image_width=1200, image_height=1800),
            PageV2(image=1, type=PageType.STORY, image_size=51002, key="p001.jpg",
                   image_width=1200, image_height=1800),
            PageV2(image=2, type=PageType.STORY, double_page=True, image_size=90121,
                   key="p002.jpg", image_width=2400, image_height=1800),
        ]
    )


@pytest.fixture
def sample_v1(sample_pages_v1):
    """A valid Revision 1 document."""
    return ComicInfoV1(
        title="The Long Night",
        series="Night Watch",
        number=3,
        count=12,
        year=2021,
        month=6,
        writer="Jane Smith",
        penciller="John Doe, Ann Lee",
        publisher="Example Comics",
        genre="Science-Fiction",
        web="https://example.com/night-watch/3",
        page_count=3,
        language_iso="en",
        format="Digital",
        black_and_white=YesNo.NO,
        manga=Manga.NO,
        pages=sample_pages_v1,
    )


@pytest.fixture
def sample_v2(sample_pages_v2):
    """A valid Revision 2 document."""
    return ComicInfoV2(
        title="The Long Night",
        series="Night Watch",
        number=3,
        count=12,
        year=2021,
        month=6,
        day=14,
        writer="Jane Smith",
        publisher="Example Comics",
        genre="Science-Fiction",
        web="https://example.com/night-watch/3 https://example.org/nw3",
        page_count=3,
        language_iso="en",
        format="Web",
        black_and_white=YesNo.NO,
        manga=Manga.YES_AND_RIGHT_TO_LEFT,
        characters="Mara, Tobin",
        story_arc="Destiny",
        age_rating=AgeRating.TEEN,
        pages=sample_pages_v2,
        community_rating=Decimal("4.5"),
    )


@pytest.fixture
def sample_v21(sample_pages_v2):
    """A valid Revision 2.1 draft document."""
    return ComicInfoV21(
        title="The Long Night",
        series="Night Watch",
        number=3,
        writer="Jane Smith",
        translator="Kenji Mori",
        tags="ninja, school life",
        story_arc="Destiny",
        story_arc_number="3",
        gtin="9781234567897",
        language_iso="ja",
        format="TPB",
        pages=sample_pages_v2,
        community_rating=4.25,
    )


@pytest.fixture
def sample_metadata():
    """JSON-ready metadata as accepted by the CLI."""
    return {
        "title": "The Long Night",
        "series": "Night Watch",
        "number": 3,
        "writer": "Jane Smith",
        "language_iso": "en",
        "black_and_white": "No",
        "age_rating": "Teen",
        "community_rating": 4.5,
        "pages": [
            {"image": 0, "type": "FrontCover", "key": "cover.jpg",
             "image_width": 1200, "image_height": 1800, "bookmark": "Cover"},
            {"image": 1, "type": "Story", "key": "p001.jpg"},
        ],
    }


@pytest.fixture
def sample_metadata_file(tmp_path, sample_metadata):
    """Write sample metadata to a JSON file."""
    metadata_path = tmp_path / "metadata.json"
    metadata_path.write_text(json.dumps(sample_metadata, indent=2))
    return metadata_path
