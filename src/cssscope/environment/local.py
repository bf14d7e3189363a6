"""Local environment: real filesystem and real subprocesses."""

from __future__ import annotations

import os
import subprocess
import time
from pathlib import Path
from typing import Sequence

from cssscope.environment.types import ExecResult


class LocalFileSystem:
    """Filesystem access through pathlib. Text is read and written as UTF-8.

    Relative paths resolve against *working_dir* (the process cwd by default).
    """

    def __init__(self, working_dir: str | None = None) -> None:
        self._working_dir = working_dir or os.getcwd()

    def list_files(self, root: str, recursive: bool = True) -> list[str]:
        base = self._resolve(root)
        if not base.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")
        candidates = base.rglob("*") if recursive else base.iterdir()
        return sorted(str(p) for p in candidates if p.is_file())

    def read_file(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def write_file(self, path: str, content: str) -> None:
        resolved = self._resolve(path)
        resolved.parent.mkdir(parents=True, exist_ok=True)
        resolved.write_text(content, encoding="utf-8")

    def remove_file(self, path: str) -> None:
        self._resolve(path).unlink(missing_ok=True)

    def is_dir(self, path: str) -> bool:
        return self._resolve(path).is_dir()

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    @property
    def working_directory(self) -> str:
        return self._working_dir

    def _resolve(self, path: str) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return Path(self._working_dir) / p


class LocalProcessRunner:
    """Runs programs with subprocess, without a shell."""

    def __init__(self, working_dir: str | None = None) -> None:
        self._working_dir = working_dir or os.getcwd()

    def run(self, args: Sequence[str], timeout_ms: int = 30_000) -> ExecResult:
        start = time.monotonic()
        try:
            proc = subprocess.run(
                list(args),
                capture_output=True,
                text=True,
                cwd=self._working_dir,
                timeout=timeout_ms / 1000.0,
            )
        except FileNotFoundError as exc:
            return ExecResult(
                stderr=str(exc),
                exit_code=127,
                duration_ms=int((time.monotonic() - start) * 1000),
            )
        except subprocess.TimeoutExpired as exc:
            return ExecResult(
                stdout=_decode(exc.stdout),
                stderr=_decode(exc.stderr),
                exit_code=-1,
                timed_out=True,
                duration_ms=int((time.monotonic() - start) * 1000),
            )
        return ExecResult(
            stdout=proc.stdout,
            stderr=proc.stderr,
            exit_code=proc.returncode,
            duration_ms=int((time.monotonic() - start) * 1000),
        )


def _decode(data: bytes | str | None) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data
