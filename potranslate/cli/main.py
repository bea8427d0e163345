"""Entry point for the command-line interface."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from potranslate import __version__
from potranslate.errors import ConfigurationError
from potranslate.log import configure_logging
from potranslate.runner import EXIT_ERROR, RunOptions, Runner, RunSummary
from potranslate.settings import AppSettings, load_app_settings
from potranslate.translation.backend import GoogleTranslator
from potranslate.util.cancellation import CancellationEvent, listen_for_interrupts

from .progress import tqdm_progress

logger = logging.getLogger(__name__)

EXAMPLES = """\
Examples:
  potranslate ./locales
  potranslate --fast ./locales
  potranslate --source-lang en ./locales
  potranslate --domain admin ./locales
  potranslate --rewrite ./locales
  potranslate --fast --source-lang en --domain admin ./locales
  potranslate --rewrite --fast ./locales
  potranslate --add-lang de ./locales
  potranslate --add-lang ja --fast ./locales
"""


def build_parser() -> argparse.ArgumentParser:
    """Construct the argument parser."""
    parser = argparse.ArgumentParser(
        prog="potranslate",
        description="Translate missing strings in PO files in a given directory",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("directory", type=Path, help="directory holding the POT and PO files")
    parser.add_argument(
        "--fast",
        action="store_true",
        help="use the short delay between translations (default: 0.1 seconds)",
    )
    parser.add_argument(
        "--rewrite",
        action="store_true",
        help="rewrite entire PO files from the POT, keeping existing translations "
        "but removing obsolete entries",
    )
    parser.add_argument(
        "--source-lang",
        help="source language code (required if not in POT metadata)",
    )
    parser.add_argument("--domain", help='translation domain name (default: "default")')
    parser.add_argument(
        "--add-lang",
        metavar="CODE",
        help="create a new PO file for the 2-letter language CODE from the POT and translate it",
    )
    parser.add_argument("--settings", help="path to JSON/TOML settings")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="only show warnings")
    parser.add_argument(
        "--version",
        action="version",
        version=f"potranslate version {__version__}",
    )
    return parser


def options_from_args(args: argparse.Namespace, settings: AppSettings) -> RunOptions:
    """Merge command-line ``args`` over ``settings``."""
    translation = settings.translation
    return RunOptions(
        directory=args.directory,
        domain=args.domain or settings.catalog.domain,
        source_language=args.source_lang or settings.catalog.source_language,
        rewrite=args.rewrite,
        add_language=args.add_lang,
        delay=translation.fast_delay if args.fast else translation.delay,
    )


def report(summary: RunSummary, options: RunOptions) -> None:
    """Print the end-of-run summary."""
    if summary.failed_files:
        names = ", ".join(path.name for path in summary.failed_files)
        print(f"Failed to process {len(summary.failed_files)} file(s): {names}")
    if summary.cancelled:
        print(f"\nPartially completed: {summary.translated} translation(s) saved")
    elif options.add_language is not None:
        print(f"\nComplete! Translated {summary.translated} string(s)")
    else:
        print(f"Complete! Translated {summary.translated} string(s) total")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = AppSettings()
    if args.settings:
        try:
            settings = load_app_settings(args.settings)
        except (OSError, ValueError) as exc:
            configure_logging()
            logger.error("Invalid settings file: %s", exc)
            return EXIT_ERROR

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    configure_logging(level, log_dir=settings.log_dir)

    options = options_from_args(args, settings)
    cancellation = CancellationEvent()
    try:
        with GoogleTranslator(settings.translation) as translator, listen_for_interrupts(
            cancellation
        ):
            runner = Runner(
                options,
                translator,
                cancellation=cancellation,
                progress=tqdm_progress,
            )
            summary = runner.run()
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR
    except OSError as exc:
        logger.error("I/O error: %s", exc)
        return EXIT_ERROR

    report(summary, options)
    return summary.exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
