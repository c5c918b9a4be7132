"""Command-line interface for phrasebreak segmentation and model checks."""

import argparse
import importlib.metadata
import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from phrasebreak.core.errors import ConfigurationError, ModelFormatError
from phrasebreak.core.logging import StdLogger, get_logger
from phrasebreak.model.default import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, default_table
from phrasebreak.model.loader import load_model
from phrasebreak.segmenters.phrase import PhraseSegmenter


class OutputFormat(str, Enum):
    """How the phrase list is printed."""
    TEXT = "text"
    JSON = "json"


def render_phrases(phrases: List[str], fmt: OutputFormat) -> str:
    """Render phrases as one-per-line text or as a JSON array."""
    if fmt is OutputFormat.JSON:
        return json.dumps(phrases, ensure_ascii=False, indent=2)
    return "\n".join(phrases)


def segment_command(args):
    """Segment text and print the phrases."""
    if args.text is not None:
        text = args.text
    else:
        text = sys.stdin.read().rstrip("\n")

    try:
        if args.model:
            table = load_model(args.model)
        else:
            table = default_table(args.lang)
    except (ModelFormatError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger = StdLogger(get_logger("phrasebreak", logging.DEBUG)) if args.debug else None
    segmenter = PhraseSegmenter(table, logger=logger)
    phrases = segmenter.segment(text)

    print(render_phrases(phrases, OutputFormat(args.format)))
    return 0


def validate_model_command(args):
    """Validate a phrasebreak model file."""
    model_path = Path(args.model_file)
    if not model_path.exists():
        print(f"Error: Model file not found: {model_path}")
        return 1

    print(f"Validating model: {model_path}")
    try:
        table = load_model(model_path)
    except ModelFormatError as e:
        print(f"❌ Model validation failed: {e}")
        return 1

    print("✅ Model validation successful!")
    print(f"   Features: {len(table)}")
    print(f"   Bias: {table.bias()}")

    if args.verbose:
        print("\nFeature classes:")
        for tag in table.feature_classes():
            count = sum(1 for key in table if key.startswith(tag))
            print(f"   {tag}: {count} features")

    return 0


def info_command(args):
    """Display phrasebreak version and system information."""
    print("phrasebreak CLI")
    print("=" * 50)

    try:
        version = importlib.metadata.version("phrasebreak")
    except importlib.metadata.PackageNotFoundError:
        version = "development"
    print(f"Version: {version}")
    print(f"Python: {sys.version.split()[0]}")
    print(f"Languages: {', '.join(SUPPORTED_LANGUAGES)}")

    print("\nDependencies:")
    for dist in ("budoux", "pydantic", "PyYAML", "langchain-core"):
        try:
            print(f"   ✅ {dist}: {importlib.metadata.version(dist)}")
        except importlib.metadata.PackageNotFoundError:
            print(f"   ❌ {dist}: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="phrasebreak",
        description="Split text into phrases for line breaking"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Segment command
    segment_parser = subparsers.add_parser(
        "segment",
        help="Segment text into phrases"
    )
    segment_parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment (default: read from stdin)"
    )
    segment_parser.add_argument(
        "-f", "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format"
    )
    segment_parser.add_argument(
        "-m", "--model",
        help="Path to a JSON or YAML model file (default: pretrained model)"
    )
    segment_parser.add_argument(
        "-l", "--lang",
        choices=SUPPORTED_LANGUAGES,
        default=DEFAULT_LANGUAGE,
        help="Pretrained model language when --model is not given"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a model file"
    )
    validate_parser.add_argument(
        "model_file",
        help="Path to the JSON or YAML model file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show per-class feature counts"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "segment":
        return segment_command(args)
    elif args.command == "validate":
        return validate_model_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
