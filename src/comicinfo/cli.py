"""Command-line interface for comicinfo."""

import argparse
import json
import logging
import sys
from pathlib import Path

import pydantic

from comicinfo.encoder import COMIC_INFO_FILE_NAME, ComicInfoEncoder
from comicinfo.exceptions import ComicInfoError
from comicinfo.v1 import ComicInfoV1
from comicinfo.v2 import ComicInfoV2
from comicinfo.v21 import ComicInfoV21

REVISIONS = {
    "1": ComicInfoV1,
    "2": ComicInfoV2,
    "2.1": ComicInfoV21,
}
DEFAULT_REVISION = "2"
DEFAULT_OUTPUT_DIR = Path(".")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def load_document(path: Path, revision: str):
    """Load a JSON metadata file into a document of the given revision.

    Keys are the document attribute names. "pages" may be given either as a
    list of page objects or as {"pages": [...]}.

    Args:
        path: Path to the JSON metadata file
        revision: One of the REVISIONS keys

    Returns:
        ComicInfoV1, ComicInfoV2 or ComicInfoV21 instance

    Raises:
        pydantic.ValidationError: If the file does not match the document shape
    """
    document_cls = REVISIONS[revision]
    data = json.loads(path.read_text())
    if isinstance(data, dict) and isinstance(data.get("pages"), list):
        data["pages"] = {"pages": data["pages"]}
    return pydantic.TypeAdapter(document_cls).validate_python(data)


def validate(args: argparse.Namespace) -> int:
    """Execute the validate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    metadata_path = args.metadata.resolve()
    if not metadata_path.exists():
        logger.error(f"Metadata file not found: {metadata_path}")
        return 1

    try:
        document = load_document(metadata_path, args.revision)
        document.validate()
    except (json.JSONDecodeError, pydantic.ValidationError) as e:
        logger.error(f"Failed to load {metadata_path}: {e}")
        return 1
    except ComicInfoError as e:
        logger.error(f"Invalid ComicInfo {args.revision} document: {e}")
        return 1

    logger.info(f"{metadata_path.name} is a valid ComicInfo {args.revision} document")
    return 0


def encode(args: argparse.Namespace) -> int:
    """Execute the encode command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    metadata_path = args.metadata.resolve()
    if not metadata_path.exists():
        logger.error(f"Metadata file not found: {metadata_path}")
        return 1

    output = args.output
    try:
        document = load_document(metadata_path, args.revision)
        document.validate()
        if output.suffix == "":
            output.mkdir(parents=True, exist_ok=True)
        written = ComicInfoEncoder().write(document, output)
    except (json.JSONDecodeError, pydantic.ValidationError) as e:
        logger.error(f"Failed to load {metadata_path}: {e}")
        return 1
    except ComicInfoError as e:
        logger.error(f"Failed to encode ComicInfo {args.revision}: {e}")
        return 1

    logger.info(f"Created {written}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="comicinfo",
        description="Validate and write ComicInfo.xml metadata for comic archives",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check a JSON metadata file against a ComicInfo revision",
        description="Load a JSON metadata file and check it against the field rules of a ComicInfo schema revision.",
    )
    validate_parser.add_argument(
        "--metadata",
        type=Path,
        required=True,
        help="Path to the JSON metadata file",
    )
    validate_parser.add_argument(
        "--revision",
        choices=sorted(REVISIONS),
        default=DEFAULT_REVISION,
        help=f"ComicInfo schema revision (default: {DEFAULT_REVISION})",
    )
    validate_parser.set_defaults(func=validate)

    encode_parser = subparsers.add_parser(
        "encode",
        help=f"Write {COMIC_INFO_FILE_NAME} from a JSON metadata file",
        description=f"Load a JSON metadata file, validate it and write {COMIC_INFO_FILE_NAME} for the chosen ComicInfo schema revision.",
    )
    encode_parser.add_argument(
        "--metadata",
        type=Path,
        required=True,
        help="Path to the JSON metadata file",
    )
    encode_parser.add_argument(
        "--revision",
        choices=sorted(REVISIONS),
        default=DEFAULT_REVISION,
        help=f"ComicInfo schema revision (default: {DEFAULT_REVISION})",
    )
    encode_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output file or directory (default: {DEFAULT_OUTPUT_DIR / COMIC_INFO_FILE_NAME})",
    )
    encode_parser.set_defaults(func=encode)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
