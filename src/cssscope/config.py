from __future__ import annotations

from dataclasses import dataclass

from cssscope.errors import BundleError


@dataclass(frozen=True)
class BundleConfig:
    input_dir: str = "."
    output_file: str | None = None
    minify: bool = False
    recursive: bool = True
    to_stdout: bool = False
    minifier: str = "esbuild"
    minify_timeout_ms: int = 30_000

    def validate(self) -> None:
        if not self.to_stdout and not self.output_file:
            raise BundleError("output file is required when not printing to stdout")
