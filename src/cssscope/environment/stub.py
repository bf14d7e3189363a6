"""Stub environment for testing."""

from __future__ import annotations

from typing import Callable, Sequence

from cssscope.environment.types import ExecResult


class StubFileSystem:
    """In-memory filesystem keyed by path string.

    Directories are implied by the file paths under them; *dirs* adds empty
    ones.
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        dirs: Sequence[str] | None = None,
    ) -> None:
        self._files: dict[str, str] = dict(files) if files else {}
        self._dirs = {d.rstrip("/") for d in dirs} if dirs else set()
        self._removed: list[str] = []

    def list_files(self, root: str, recursive: bool = True) -> list[str]:
        if not self.is_dir(root):
            raise NotADirectoryError(f"Not a directory: {root}")
        base = root.rstrip("/") + "/"
        found = []
        for path in sorted(self._files):
            if not path.startswith(base):
                continue
            if not recursive and "/" in path[len(base):]:
                continue
            found.append(path)
        return found

    def read_file(self, path: str) -> str:
        if path not in self._files:
            raise FileNotFoundError(f"Stub file not found: {path}")
        return self._files[path]

    def write_file(self, path: str, content: str) -> None:
        self._files[path] = content

    def remove_file(self, path: str) -> None:
        self._files.pop(path, None)
        self._removed.append(path)

    def is_dir(self, path: str) -> bool:
        base = path.rstrip("/")
        if base in self._dirs:
            return True
        return any(p.startswith(base + "/") for p in self._files)

    def exists(self, path: str) -> bool:
        return path in self._files or self.is_dir(path)

    # --- Test helpers ---

    @property
    def files(self) -> dict[str, str]:
        return dict(self._files)

    @property
    def removed(self) -> list[str]:
        """All paths passed to remove_file, in order."""
        return list(self._removed)


class StubProcessRunner:
    """Test stub that returns scripted results and records every call.

    *on_run* is invoked with the argument vector before the result is
    returned, so tests can simulate a program's side effects.
    """

    def __init__(
        self,
        results: list[ExecResult] | None = None,
        on_run: Callable[[list[str]], None] | None = None,
    ) -> None:
        self._results = list(results) if results else [ExecResult()]
        self._index = 0
        self._on_run = on_run
        self._calls: list[list[str]] = []

    def run(self, args: Sequence[str], timeout_ms: int = 30_000) -> ExecResult:
        argv = list(args)
        self._calls.append(argv)
        if self._on_run is not None:
            self._on_run(argv)
        if self._index < len(self._results):
            result = self._results[self._index]
            self._index += 1
        else:
            result = self._results[-1]
        return result

    @property
    def calls(self) -> list[list[str]]:
        return [list(c) for c in self._calls]
