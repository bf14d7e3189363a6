"""Environment types and capability protocols used by the bundler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence


@dataclass(frozen=True)
class ExecResult:
    """Result of running an external process."""

    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0
    timed_out: bool = False
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0 and not self.timed_out


class FileSystem(Protocol):
    """File enumeration, reading and writing."""

    def list_files(self, root: str, recursive: bool = True) -> list[str]: ...

    def read_file(self, path: str) -> str: ...

    def write_file(self, path: str, content: str) -> None: ...

    def remove_file(self, path: str) -> None: ...

    def is_dir(self, path: str) -> bool: ...

    def exists(self, path: str) -> bool: ...


class ProcessRunner(Protocol):
    """Runs an external program given as an argument vector."""

    def run(self, args: Sequence[str], timeout_ms: int = 30_000) -> ExecResult: ...
