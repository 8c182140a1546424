"""Narration engine for Diffreel."""

import fnmatch
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Sequence

from diffreel.context.extractor import extract_change_contexts
from diffreel.core.config import Config
from diffreel.core.sources import SourceError, git_diff, load_github_json
from diffreel.core.types import BatchResult, FileReport, FileResult
from diffreel.core.grouping import group_related_changes
from diffreel.diff.parser import ParseError, process_changed_file
from diffreel.diff.split import split_diff_file
from diffreel.diff.types import ChangedFile
from diffreel.walkthrough.scheduler import schedule
from diffreel.walkthrough.types import WalkthroughStep

Script = dict[str, tuple[WalkthroughStep, ...]]


class EngineError(Exception):
    """Error during processing."""

    pass


class NarrationEngine:
    """Runs changed files through parsing, context extraction and scheduling."""

    def __init__(
        self,
        config: Config,
        verbose: bool = False,
        quiet: bool = False,
    ) -> None:
        """Initialize the narration engine.

        Args:
            config: Application configuration.
            verbose: Enable verbose output.
            quiet: Suppress progress output.
        """
        self.config = config
        self.verbose = verbose
        self.quiet = quiet
        self._scorer = config.scoring.build_scorer()

    def process_target(self, target: str, script: Optional[Script] = None) -> BatchResult:
        """Process a target (patch file, GitHub JSON payload or git directory).

        Args:
            target: Path to the target.
            script: Optional explicit walkthrough steps per file name.

        Returns:
            BatchResult with one FileResult per changed file.

        Raises:
            EngineError: If the target cannot be read.
        """
        target_path = Path(target)

        try:
            if target_path.is_dir():
                files = git_diff(target_path)
            elif target_path.is_file() and target_path.suffix.lower() == ".json":
                files = load_github_json(str(target_path))
            elif target_path.is_file():
                files = split_diff_file(str(target_path))
            else:
                raise EngineError(f"Target not found: {target}")
        except (ParseError, SourceError) as e:
            raise EngineError(f"Failed to read changes: {e}") from e
        except FileNotFoundError as e:
            raise EngineError(str(e)) from e

        return self.process_batch(files, script=script, target=target)

    def process_batch(
        self,
        files: Sequence[ChangedFile],
        script: Optional[Script] = None,
        target: str = "<batch>",
    ) -> BatchResult:
        """Process changed files independently.

        A file whose patch fails to parse is recorded as an error result;
        the other files are still processed.

        Args:
            files: Changed files as reported by the host.
            script: Optional explicit walkthrough steps per file name.
            target: Label for the batch.

        Returns:
            BatchResult with results in input order.
        """
        files = self._apply_ignore_rules(list(files))

        if not files:
            self._log("No changes to process")
            return BatchResult(target=target)

        if self.verbose:
            self._log(f"Found {len(files)} changed file(s)")

        script = script or {}

        def run(changed: ChangedFile) -> FileResult:
            return self._process_one(changed, script.get(changed.filename))

        if self.config.workers > 1 and len(files) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as pool:
                results = list(pool.map(run, files))
        else:
            results = [run(changed) for changed in files]

        errors = [f"{r.file_name}: {r.error}" for r in results if not r.ok]
        reports = [r.report for r in results if r.report is not None]

        return BatchResult(
            target=target,
            results=results,
            groups=group_related_changes([report.diff for report in reports]),
            errors=errors,
        )

    def process_file(
        self,
        changed: ChangedFile,
        explicit_steps: Optional[Sequence[WalkthroughStep]] = None,
    ) -> FileReport:
        """Process a single changed file.

        Raises:
            ParseError: If the file's patch is malformed.
        """
        diff = process_changed_file(changed, extra_extensions=self.config.extensions)
        contexts = extract_change_contexts(
            diff.lines,
            context_size=self.config.context_size,
            scorer=self._scorer,
        )
        steps = schedule(
            contexts,
            self.config.duration,
            explicit_steps=explicit_steps,
            line_count=diff.line_count,
        )
        return FileReport(diff=diff, contexts=contexts, steps=steps)

    def _process_one(
        self,
        changed: ChangedFile,
        explicit_steps: Optional[Sequence[WalkthroughStep]],
    ) -> FileResult:
        try:
            report = self.process_file(changed, explicit_steps)
        except ParseError as e:
            if self.verbose:
                self._log(f"  Skipping {changed.filename}: {e}")
            return FileResult.failure(changed.filename, str(e))

        if self.verbose:
            self._log(
                f"  {changed.filename}: {report.diff.line_count} line(s), "
                f"{len(report.contexts)} change block(s)"
            )
        return FileResult.success(report)

    def _apply_ignore_rules(self, files: list[ChangedFile]) -> list[ChangedFile]:
        """Drop files matching the configured ignore patterns."""
        if not self.config.ignore_paths:
            return files

        result = []
        for changed in files:
            if any(fnmatch.fnmatch(changed.filename, p) for p in self.config.ignore_paths):
                if self.verbose:
                    self._log(f"  Ignoring {changed.filename}")
                continue
            result.append(changed)
        return result

    def _log(self, message: str) -> None:
        """Log a message if not in quiet mode."""
        if not self.quiet:
            print(message, file=sys.stderr)
