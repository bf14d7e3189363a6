"""CSS bundler: scope-rewrite every .css file under a directory into one bundle."""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass
from typing import Callable

from cssscope.config import BundleConfig
from cssscope.environment.types import FileSystem, ProcessRunner
from cssscope.errors import BundleError, ParseError
from cssscope.scope import process

logger = logging.getLogger(__name__)

CSS_SUFFIX = ".css"


@dataclass(frozen=True)
class BundleResult:
    """Outcome of a bundling run."""

    css: str
    files: tuple[str, ...]
    output_file: str | None = None

    @property
    def empty(self) -> bool:
        return not self.files


class CSSBundler:
    """Collects, rewrites, joins and optionally minifies CSS files.

    All filesystem and process access goes through the injected *fs* and
    *runner*, so the bundler runs unchanged against the stub environment.
    """

    def __init__(self, fs: FileSystem, runner: ProcessRunner) -> None:
        self._fs = fs
        self._runner = runner

    def collect(self, config: BundleConfig) -> list[tuple[str, str]]:
        """Return ``(path, source)`` for every non-blank .css file, sorted by path."""
        found: list[tuple[str, str]] = []
        for path in self._fs.list_files(config.input_dir, recursive=config.recursive):
            if not path.endswith(CSS_SUFFIX):
                continue
            source = self._fs.read_file(path)
            if not source.strip():
                logger.debug("Skipping blank file %s", path)
                continue
            found.append((path, source))
        return found

    def bundle(
        self,
        config: BundleConfig,
        on_processed: Callable[[str], None] | None = None,
    ) -> BundleResult:
        """Run a full bundle as described by *config*.

        *on_processed* is called with each path as soon as it has been
        rewritten. Aborts on the first file that fails to parse. Nothing is
        written when no CSS files are found.
        """
        config.validate()
        if not self._fs.exists(config.input_dir):
            raise BundleError(f"directory does not exist: {config.input_dir}")
        if not self._fs.is_dir(config.input_dir):
            raise BundleError(f"path is not a directory: {config.input_dir}")

        parts: list[str] = []
        processed: list[str] = []
        for path, source in self.collect(config):
            try:
                parts.append(process(source))
            except ParseError as exc:
                logger.error("Error processing %s: %s", path, exc)
                raise BundleError(f"Error processing {path}: {exc}", path=path) from exc
            processed.append(path)
            logger.debug("Processed %s", path)
            if on_processed is not None:
                on_processed(path)

        if not processed:
            logger.info("No CSS files found in %s", config.input_dir)
            return BundleResult(css="", files=())

        css = "\n".join(parts)
        if config.minify:
            css = self.minify(css, config)

        output_file = None
        if not config.to_stdout:
            output_file = config.output_file
            self._fs.write_file(output_file, css)

        logger.info("Bundled %d files (%d chars)", len(processed), len(css))
        return BundleResult(css=css, files=tuple(processed), output_file=output_file)

    def minify(self, css: str, config: BundleConfig) -> str:
        """Minify *css* with the external minifier via a temporary file."""
        tmp = os.path.join(config.input_dir, f".css-tmp-{uuid.uuid4().hex[:10]}.css")
        args = [
            config.minifier,
            tmp,
            "--minify",
            "--allow-overwrite",
            "--outfile=" + tmp,
            "--log-level=silent",
        ]
        self._fs.write_file(tmp, css)
        try:
            result = self._runner.run(args, timeout_ms=config.minify_timeout_ms)
            if result.timed_out:
                raise BundleError(
                    f"Error minifying CSS: {config.minifier} timed out "
                    f"after {config.minify_timeout_ms}ms"
                )
            if result.exit_code != 0:
                detail = result.stderr.strip() or f"exit code {result.exit_code}"
                raise BundleError(f"Error minifying CSS: {detail}")
            return self._fs.read_file(tmp)
        finally:
            self._fs.remove_file(tmp)
