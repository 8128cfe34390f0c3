"""Tests for the CLI module."""

import json

import pytest
from lxml import etree

from comicinfo import COMIC_INFO_FILE_NAME
from comicinfo.cli import load_document, main
from comicinfo.v1 import ComicInfoV1
from comicinfo.v2 import ComicInfoV2, V2_SCHEMA_LOCATION
from comicinfo.v21 import ComicInfoV21


class TestLoadDocument:
    """Tests for loading JSON metadata into documents."""

    def test_loads_revision_2(self, sample_metadata_file):
        """Metadata loads into a ComicInfoV2 with typed values."""
        doc = load_document(sample_metadata_file, "2")

        assert isinstance(doc, ComicInfoV2)
        assert doc.title == "The Long Night"
        assert doc.age_rating.value == "Teen"
        assert len(doc.pages) == 2
        assert doc.pages.pages[0].bookmark == "Cover"
        assert doc.pages.pages[1].image_width == -1

    def test_loads_each_revision(self, tmp_path):
        """Each revision key selects its document class."""
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"title": "x"}))

        assert type(load_document(path, "1")) is ComicInfoV1
        assert type(load_document(path, "2")) is ComicInfoV2
        assert type(load_document(path, "2.1")) is ComicInfoV21

    def test_wrapped_pages(self, tmp_path):
        """Pages may be given as {"pages": [...]}."""
        path = tmp_path / "m.json"
        path.write_text(json.dumps({"pages": {"pages": [{"key": "a"}, {"key": "b"}]}}))

        doc = load_document(path, "2")

        assert [page.key for page in doc.pages] == ["a", "b"]

    def test_unknown_token_rejected(self, tmp_path):
        """Tokens outside a vocabulary are rejected at load time."""
        import pydantic

        path = tmp_path / "m.json"
        path.write_text(json.dumps({"manga": "Manhwa"}))

        with pytest.raises(pydantic.ValidationError):
            load_document(path, "2")


class TestCLIValidate:
    """Tests for the validate command."""

    def test_valid_metadata(self, sample_metadata_file):
        """validate succeeds for valid metadata."""
        result = main(["validate", "--metadata", str(sample_metadata_file)])

        assert result == 0

    def test_missing_file(self, tmp_path, caplog):
        """validate fails for a missing file."""
        result = main(["validate", "--metadata", str(tmp_path / "missing.json")])

        assert result == 1
        assert "Metadata file not found" in caplog.text

    def test_invalid_rating(self, tmp_path, sample_metadata, caplog):
        """validate reports the first violated rule."""
        sample_metadata["community_rating"] = 4.567
        path = tmp_path / "metadata.json"
        path.write_text(json.dumps(sample_metadata))

        result = main(["validate", "--metadata", str(path)])

        assert result == 1
        assert "failed to validate CommunityRating" in caplog.text

    def test_duplicate_keys_revision_1(self, tmp_path, caplog):
        """validate reports duplicate page keys for Revision 1."""
        path = tmp_path / "metadata.json"
        path.write_text(json.dumps({"pages": [{"key": "p001"}, {"key": "p001"}]}))

        result = main(["validate", "--metadata", str(path), "--revision", "1"])

        assert result == 1
        assert "duplicate key found for page 2" in caplog.text

    def test_malformed_json(self, tmp_path, caplog):
        """validate fails on malformed JSON."""
        path = tmp_path / "metadata.json"
        path.write_text("{not json")

        result = main(["validate", "--metadata", str(path)])

        assert result == 1
        assert "Failed to load" in caplog.text

    def test_unknown_revision(self, sample_metadata_file):
        """Unknown revisions are rejected by argparse."""
        with pytest.raises(SystemExit):
            main(["validate", "--metadata", str(sample_metadata_file), "--revision", "3"])


class TestCLIEncode:
    """Tests for the encode command."""

    def test_encode_to_directory(self, tmp_path, sample_metadata_file):
        """encode writes ComicInfo.xml into the output directory."""
        output_dir = tmp_path / "out"

        result = main([
            "encode",
            "--metadata", str(sample_metadata_file),
            "--output", str(output_dir),
        ])

        assert result == 0
        root = etree.parse(str(output_dir / COMIC_INFO_FILE_NAME)).getroot()
        assert root.tag == "ComicInfo"
        assert root.findtext("Title") == "The Long Night"
        assert root.findtext("CommunityRating") == "4.5"
        assert root.get("{http://www.w3.org/2001/XMLSchema-instance}schemaLocation") == (
            V2_SCHEMA_LOCATION
        )

    def test_encode_to_file(self, tmp_path, sample_metadata_file):
        """encode writes to an explicit file path."""
        target = tmp_path / "book.xml"

        result = main([
            "encode",
            "--metadata", str(sample_metadata_file),
            "--output", str(target),
            "--revision", "2.1",
        ])

        assert result == 0
        assert target.read_bytes().startswith(b'<?xml version="1.0" encoding="UTF-8"?>\n')

    def test_encode_invalid_writes_nothing(self, tmp_path, sample_metadata, caplog):
        """encode leaves no file behind when validation fails."""
        sample_metadata["web"] = "https://example.com:port"
        path = tmp_path / "metadata.json"
        path.write_text(json.dumps(sample_metadata))
        output_dir = tmp_path / "out"

        result = main(["encode", "--metadata", str(path), "--output", str(output_dir)])

        assert result == 1
        assert "failed to validate Web" in caplog.text
        assert not (output_dir / COMIC_INFO_FILE_NAME).exists()
        assert not output_dir.exists()

    def test_encode_malformed_metadata_creates_no_directory(self, tmp_path, caplog):
        """A metadata file that fails to load leaves no output directory."""
        path = tmp_path / "metadata.json"
        path.write_text("{not json")
        output_dir = tmp_path / "out"

        result = main(["encode", "--metadata", str(path), "--output", str(output_dir)])

        assert result == 1
        assert "Failed to load" in caplog.text
        assert not output_dir.exists()


class TestCLIMain:
    """Tests for the main entry point."""

    def test_no_command_prints_help(self, capsys):
        """main without a command prints help and succeeds."""
        result = main([])

        assert result == 0
        assert "usage: comicinfo" in capsys.readouterr().out
