"""
CLI interface for ChatLens
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from . import config
from .exceptions import ParseError, StageFailure
from .parser import WhatsAppParser, validate_format
from .pipeline import run_file_analysis
from .premium import custom_date_range_analysis
from .store import ResultStore, dumps

logger = logging.getLogger(__name__)


def _emit(payload: dict, output_file: Optional[str] = None):
    text = dumps(payload, indent=2)
    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"Report saved to {output_file}")
    else:
        print(text)


def analyze_file(filepath: str, output_file: Optional[str] = None, save: bool = False) -> dict:
    """
    Analyze WhatsApp export file.

    Args:
        filepath: Path to WhatsApp .txt export
        output_file: Optional output JSON file
        save: Also keep the result in the result store

    Returns:
        Analysis aggregate
    """
    logger.info(f"Analyzing file: {filepath}")
    analysis = run_file_analysis(Path(filepath))

    if save:
        ResultStore().save(analysis)

    _emit(analysis, output_file)
    return analysis


def validate_file(filepath: str) -> bool:
    """Print whether the file looks like a WhatsApp export."""
    with open(filepath, "r", encoding="utf-8", errors="replace") as f:
        valid, msg = validate_format(f.read())
    print(f"Valid: {valid} - {msg}")
    return valid


def analyze_range(filepath: str, start: str, end: str, output_file: Optional[str] = None) -> dict:
    """Reduced analysis of messages between two ISO dates (inclusive)."""
    df = WhatsAppParser().parse_file(filepath)
    result = custom_date_range_analysis(df, start, end)
    _emit(result, output_file)
    return result


def show_last() -> bool:
    """Print the most recently saved analysis."""
    analysis = ResultStore().load_last()
    if analysis is None:
        logger.warning("No saved analysis found")
        return False
    _emit(analysis)
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chatlens",
        description="ChatLens - WhatsApp Chat Analyzer"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Run the full analysis")
    analyze.add_argument("filepath", help="Path to WhatsApp export .txt file")
    analyze.add_argument("-o", "--output", dest="output_file", help="Output JSON file path")
    analyze.add_argument("--save", action="store_true", help="Keep the result for 'last'")

    validate = sub.add_parser("validate", help="Check the export format")
    validate.add_argument("filepath", help="Path to WhatsApp export .txt file")

    date_range = sub.add_parser("range", help="Analyze a date range (YYYY-MM-DD, inclusive)")
    date_range.add_argument("filepath", help="Path to WhatsApp export .txt file")
    date_range.add_argument("start", help="First day")
    date_range.add_argument("end", help="Last day")
    date_range.add_argument("-o", "--output", dest="output_file", help="Output JSON file path")

    sub.add_parser("last", help="Print the last saved analysis")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.command == "validate":
            return 0 if validate_file(args.filepath) else 1
        if args.command == "analyze":
            analyze_file(args.filepath, args.output_file, args.save)
            logger.info("Analysis complete")
            return 0
        if args.command == "range":
            analyze_range(args.filepath, args.start, args.end, args.output_file)
            return 0
        if args.command == "last":
            return 0 if show_last() else 1
    except ParseError as e:
        logger.error(f"Could not parse chat export: {e}")
        return 1
    except StageFailure as e:
        logger.error(f"Internal analysis error: {e}")
        return 1
    except OSError as e:
        logger.error(f"File error: {e}")
        return 1

    return 1


if __name__ == "__main__":
    sys.exit(main())
