"""Filesystem and process capabilities injected into the bundler."""

from cssscope.environment.local import LocalFileSystem, LocalProcessRunner
from cssscope.environment.stub import StubFileSystem, StubProcessRunner
from cssscope.environment.types import ExecResult, FileSystem, ProcessRunner

__all__ = [
    "ExecResult",
    "FileSystem",
    "LocalFileSystem",
    "LocalProcessRunner",
    "ProcessRunner",
    "StubFileSystem",
    "StubProcessRunner",
]
