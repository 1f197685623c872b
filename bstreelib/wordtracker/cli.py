"""Command line interface for the word tracker.

Usage:
    bstreelib-wordtracker notes.txt -pl
    bstreelib-wordtracker notes.txt -po -f report.txt
    python -m bstreelib notes.txt -pf --no-persist
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from .._common.config import (
    DEFAULT_REPOSITORY_FILENAME,
    InorderStrategy,
    ReportKind,
    TrackerConfig,
)
from .._common.logging import setup_logging
from .error_policies import ContinueOnErrorsPolicy, FailFastPolicy
from .repository import RepositoryError
from .tracker import ConfigurationError, WordTracker


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bstreelib-wordtracker",
        description="Index the words of a text file and print a sorted report. "
                    "The index is kept in a snapshot file between runs.",
    )
    parser.add_argument("input_file", type=Path, help="Text file to index.")

    reports = parser.add_mutually_exclusive_group(required=True)
    reports.add_argument(
        "-pf", dest="report_kind", action="store_const", const=ReportKind.FILES,
        help="Print each word with the files it appears in.",
    )
    reports.add_argument(
        "-pl", dest="report_kind", action="store_const", const=ReportKind.LINES,
        help="Print each word with files and line numbers.",
    )
    reports.add_argument(
        "-po", dest="report_kind", action="store_const", const=ReportKind.DETAILED,
        help="Print each word with its entry count, files and line numbers.",
    )

    parser.add_argument(
        "-f", dest="output_file", type=Path, default=None,
        help="Also write the report to this file.",
    )
    parser.add_argument(
        "--repository", type=Path, default=Path(DEFAULT_REPOSITORY_FILENAME),
        help=f"Snapshot file (default: {DEFAULT_REPOSITORY_FILENAME}).",
    )
    parser.add_argument(
        "--no-persist", action="store_true",
        help="Neither load nor save the snapshot.",
    )
    parser.add_argument(
        "--ignore-case", action="store_true",
        help="Fold words to lower case before indexing.",
    )
    parser.add_argument(
        "--encoding", default="utf-8",
        help="Encoding of the input file (default: utf-8).",
    )
    parser.add_argument(
        "--inorder",
        choices=[strategy.value for strategy in InorderStrategy],
        default=InorderStrategy.STACK.value,
        help="In-order walk used for reports (default: stack).",
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Fail instead of skipping an unreadable input file.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity on stderr (default: WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> TrackerConfig:
    """Translate parsed arguments into a TrackerConfig."""
    return TrackerConfig(
        repository_path=args.repository,
        persist=not args.no_persist,
        report_kind=args.report_kind,
        output_file=args.output_file,
        inorder_strategy=InorderStrategy(args.inorder),
        encoding=args.encoding,
        ignore_case=args.ignore_case,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the word tracker.

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    policy = FailFastPolicy() if args.strict else ContinueOnErrorsPolicy()
    try:
        tracker = WordTracker(config_from_args(args), error_policy=policy)
        tracker.load()
        tracker.process_file(args.input_file)
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1
    except RepositoryError as e:
        logger.error("Snapshot error: %s", e)
        return 1
    except OSError as e:
        logger.error("Cannot process %s: %s", args.input_file, e)
        return 1
    except UnicodeDecodeError as e:
        logger.error("Cannot decode %s: %s", args.input_file, e)
        return 1

    try:
        tracker.save()
    except OSError as e:
        logger.error("Cannot save snapshot %s: %s", tracker.config.repository_path, e)
        return 1

    report = tracker.get_report()
    if tracker.config.output_file is not None:
        try:
            tracker.write_report(report)
        except OSError as e:
            logger.error("Cannot write report %s: %s", tracker.config.output_file, e)
            return 1

    for line in report:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
