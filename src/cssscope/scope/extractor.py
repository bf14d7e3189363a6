"""Block extraction: find SCOPE/END regions and rewrite their contents.

Syntax example::

    /* SCOPE button */
    root { color: red; }
    root:hover { color: blue; }
    /* END */

Everything outside a marked region is copied through unchanged.
"""

from __future__ import annotations

import re
from typing import Iterator

from cssscope.errors import ParseError
from cssscope.scope.model import ScopeBlock
from cssscope.scope.reassembler import apply_prefix

__all__ = ["find_blocks", "process"]

_OPEN_RE = re.compile(r"/\*\s*SCOPE\s+(?P<name>\S+)\s*\*/")
_CLOSE_RE = re.compile(r"/\*\s+END\s+\*/")


def _position(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of *offset* in *text*."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def find_blocks(text: str) -> Iterator[ScopeBlock]:
    """Yield every marked region of *text* in source order.

    Raises ParseError when a block has no END marker or when a second SCOPE
    marker opens before the current block is closed.
    """
    pos = 0
    while True:
        opened = _OPEN_RE.search(text, pos)
        if opened is None:
            return
        closed = _CLOSE_RE.search(text, opened.end())
        if closed is None:
            raise ParseError("unclosed block", *_position(text, opened.start()))
        nested = _OPEN_RE.search(text, opened.end(), closed.start())
        if nested is not None:
            raise ParseError("nested block", *_position(text, nested.start()))
        yield ScopeBlock(
            name=opened.group("name"),
            body=text[opened.end():closed.start()],
            start=opened.start(),
            end=closed.end(),
        )
        pos = closed.end()


def process(text: str) -> str:
    """Rewrite every SCOPE block of *text* and return the whole text.

    Blocks are all located before any output is built, so a ParseError
    leaves nothing half-written.
    """
    blocks = list(find_blocks(text))
    if not blocks:
        return text

    out: list[str] = []
    pos = 0
    for block in blocks:
        out.append(text[pos:block.start])
        out.append(apply_prefix(block.body, block.prefix))
        pos = block.end
    out.append(text[pos:])
    return "".join(out)
