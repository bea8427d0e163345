"""Batch driver running the per-file pipeline over a domain's catalogs."""

from __future__ import annotations

import contextlib
import logging
import time
from collections.abc import Callable, Sequence
from contextlib import AbstractContextManager
from dataclasses import dataclass, field
from pathlib import Path

from .catalog.model import Catalog
from .discovery import find_po_files, po_path, target_language, template_path
from .errors import ConfigurationError
from .settings import DEFAULT_DELAY, DEFAULT_DOMAIN
from .sync.bootstrap import clone_template, validate_language_code
from .sync.incremental import sync_file
from .sync.rewrite import rewrite_file
from .sync.template import load_template, resolve_source_language
from .sync.types import SyncResult, TranslateStep
from .telemetry import log_event
from .translation.backend import Translator
from .translation.orchestrator import ProgressCallback, TranslationOutcome, translate_keys
from .util.cancellation import CancellationEvent

__all__ = [
    "EXIT_ERROR",
    "EXIT_INTERRUPTED",
    "EXIT_OK",
    "ProgressFactory",
    "RunOptions",
    "RunSummary",
    "Runner",
]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

ProgressFactory = Callable[[Path, int], AbstractContextManager[ProgressCallback | None]]
"""Open a progress display for ``total`` keys of one file."""


def _no_progress(_path: Path, _total: int) -> AbstractContextManager[ProgressCallback | None]:
    return contextlib.nullcontext(None)


@dataclass(slots=True)
class RunOptions:
    """What a run should do, resolved from flags and settings."""

    directory: Path
    domain: str = DEFAULT_DOMAIN
    source_language: str | None = None
    rewrite: bool = False
    add_language: str | None = None
    delay: float = DEFAULT_DELAY


@dataclass(slots=True)
class RunSummary:
    """Outcome of a whole run."""

    source_language: str = ""
    results: list[SyncResult] = field(default_factory=list)
    failed_files: list[Path] = field(default_factory=list)
    skipped_files: list[Path] = field(default_factory=list)
    created: Path | None = None
    cancelled: bool = False

    @property
    def translated(self) -> int:
        return sum(result.translated for result in self.results)

    @property
    def exit_code(self) -> int:
        if self.cancelled:
            return EXIT_INTERRUPTED
        if self.failed_files:
            return EXIT_ERROR
        return EXIT_OK


class Runner:
    """Process every target catalog of a domain, one file at a time."""

    def __init__(
        self,
        options: RunOptions,
        translator: Translator,
        *,
        cancellation: CancellationEvent | None = None,
        progress: ProgressFactory | None = None,
    ) -> None:
        """Prepare a run; nothing touches the filesystem until :meth:`run`."""
        self.options = options
        self.translator = translator
        self.cancellation = cancellation or CancellationEvent()
        self._progress = progress or _no_progress

    def run(self) -> RunSummary:
        """Execute the run.

        Raises :class:`ConfigurationError` before any target file is touched
        when the inputs are unusable.
        """
        start = time.monotonic()
        directory = self.options.directory
        if not directory.is_dir():
            raise ConfigurationError(f"'{directory}' is not a valid directory")
        if self.options.add_language is not None:
            validate_language_code(self.options.add_language)

        pot_file = template_path(directory, self.options.domain)
        logger.info("Processing domain: %s", self.options.domain)
        logger.info("POT file: %s", pot_file)
        template = load_template(pot_file)
        source = resolve_source_language(template, pot_file, self.options.source_language)
        logger.info("Source language: %s", source)

        summary = RunSummary(source_language=source)
        if self.options.add_language is not None:
            self._add_language(summary, template, pot_file)
        else:
            self._process_batch(summary, template)

        summary.cancelled = self.cancellation.cancelled
        log_event(
            "RUN_FINISHED",
            {
                "domain": self.options.domain,
                "files": len(summary.results),
                "failed_files": len(summary.failed_files),
                "translated": summary.translated,
                "cancelled": summary.cancelled,
            },
            start_time=start,
        )
        return summary

    # ------------------------------------------------------------------
    def _add_language(self, summary: RunSummary, template: Catalog, pot_file: Path) -> None:
        language = validate_language_code(self.options.add_language or "")
        destination = po_path(self.options.directory, self.options.domain, language)
        logger.info("Creating new language file: %s", destination.name)
        try:
            clone_template(pot_file, destination, language)
        except OSError as exc:
            raise ConfigurationError(f"Cannot create PO file '{destination}': {exc}") from exc
        summary.created = destination
        step = self._translate_step(destination, summary.source_language, language)
        result = sync_file(destination, template, step)
        summary.results.append(result)

    def _process_batch(self, summary: RunSummary, template: Catalog) -> None:
        files = find_po_files(self.options.directory, self.options.domain)
        if not files:
            logger.info("No PO files found for domain '%s'", self.options.domain)
            return
        logger.info("Found %d PO file(s)", len(files))
        for path in files:
            if self.cancellation.cancelled:
                logger.info("Interrupted by user, skipping remaining files")
                break
            result = self._process_file(path, template, summary)
            if result is not None:
                summary.results.append(result)

    def _process_file(
        self, path: Path, template: Catalog, summary: RunSummary
    ) -> SyncResult | None:
        try:
            language = target_language(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error processing %s: %s", path.name, exc)
            summary.failed_files.append(path)
            return None
        if not language:
            logger.warning("Could not determine target language for %s", path.name)
            summary.skipped_files.append(path)
            return None

        logger.info("Processing: %s (target: %s)", path.name, language)
        mode = rewrite_file if self.options.rewrite else sync_file
        step = self._translate_step(path, summary.source_language, language)
        try:
            result = mode(path, template, step)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error processing %s: %s", path.name, exc)
            summary.failed_files.append(path)
            return None
        logger.info("Translated %d string(s) in %s", result.translated, path.name)
        return result

    def _translate_step(self, path: Path, source: str, target: str) -> TranslateStep:
        def translate(keys: Sequence[str]) -> TranslationOutcome:
            with self._progress(path, len(keys)) as report:
                return translate_keys(
                    keys,
                    self.translator,
                    source,
                    target,
                    delay=self.options.delay,
                    cancellation=self.cancellation,
                    progress=report,
                )

        return translate
