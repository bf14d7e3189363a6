"""Rule reassembly: rewrite every rule of a fragment under a prefix."""

from __future__ import annotations

from cssscope.scope.selector import rewrite_selector
from cssscope.scope.tokenizer import tokenize

__all__ = ["apply_prefix"]


def apply_prefix(fragment: str, prefix: str) -> str:
    """Rewrite every selector in *fragment* and re-emit its rules.

    Each rule becomes ``<selectors joined by ",\\n"> <body>\\n\\n``, preceded by
    one line per comment written among its selectors.
    """
    out: list[str] = []
    for rule in tokenize(fragment, prefix):
        for comment in rule.comments:
            out.append(comment)
            out.append("\n")
        out.append(",\n".join(rewrite_selector(prefix, s) for s in rule.selectors))
        out.append(" ")
        out.append(rule.body)
        out.append("\n\n")
    return "".join(out)
