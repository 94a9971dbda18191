"""Main CLI entry point for the markdown transcoder."""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli.commands.convert import convert_command
from src.cli.commands.export import EXPORT_FORMATS, export_command
from src.cli.commands.preview import preview_command
from src.cli.commands.stats import stats_command
from src.cli.config import Config
from src.conversion import ConversionKind
from src.utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markdown-transcoder",
        description="Markdown Transcoder - convert between Markdown, HTML and structured JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert a document between formats")
    convert_parser.add_argument(
        "kind",
        help="Conversion type: " + ", ".join(f"{kind.value} ({kind.label})" for kind in ConversionKind),
    )
    convert_parser.add_argument("input", nargs="?", help="Input file (default: stdin)")
    convert_parser.add_argument("-o", "--output", help="Write result to this file instead of stdout")
    convert_parser.add_argument(
        "--frontmatter",
        action="store_true",
        help="Read YAML frontmatter into JSON metadata (md-to-json only)",
    )

    # Stats command
    stats_parser = subparsers.add_parser("stats", help="Show word, line and paragraph counts")
    stats_parser.add_argument("input", nargs="?", help="Input file (default: stdin)")
    stats_parser.add_argument("--json", action="store_true", help="Print statistics as JSON")

    # Export command
    export_parser = subparsers.add_parser("export", help="Export the document to a file")
    export_parser.add_argument("format", choices=EXPORT_FORMATS, help="Export format")
    export_parser.add_argument("input", nargs="?", help="Input file (default: stdin)")
    export_parser.add_argument("--filename", help="Output file name (default: document.<format>)")
    export_parser.add_argument("--export-dir", help="Directory to save into (default: EXPORT_DIR or ./exports)")

    # Preview command
    preview_parser = subparsers.add_parser("preview", help="Keep an HTML preview in sync with a markdown file")
    preview_parser.add_argument("input", help="Markdown file to watch")
    preview_parser.add_argument("-o", "--output", help="HTML file to write (default: input with .html suffix)")

    for subparser in (convert_parser, stats_parser, export_parser, preview_parser):
        subparser.add_argument("--config", help="Path to .env configuration file", default=None)
        subparser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show progress messages",
        )

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Preview is long-running, so it reports progress by default
    setup_logging(verbose=args.verbose or args.command == "preview")

    # Load configuration
    config = Config(args.config)

    # Execute command
    if args.command == "convert":
        return convert_command(
            config=config,
            kind=args.kind,
            input_path=args.input,
            output_path=args.output,
            extract_frontmatter=args.frontmatter,
        )
    elif args.command == "stats":
        return stats_command(config=config, input_path=args.input, as_json=args.json)
    elif args.command == "export":
        return export_command(
            config=config,
            export_format=args.format,
            input_path=args.input,
            filename=args.filename,
            export_dir=args.export_dir,
        )
    elif args.command == "preview":
        return preview_command(config=config, input_path=args.input, output_path=args.output)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
