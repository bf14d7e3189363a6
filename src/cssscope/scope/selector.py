"""Selector rewriting: namespace one selector under a scope prefix."""

from __future__ import annotations

__all__ = ["parent_prefix", "rewrite_selector"]

ROOT = "root"
DIRECTORY = "directory"


def parent_prefix(prefix: str) -> str:
    """Drop the last hyphen-delimited segment: ``.nav-items`` -> ``.nav``."""
    parts = [p for p in prefix.split("-") if p]
    return "-".join(parts[:-1])


def rewrite_selector(prefix: str, selector: str) -> str:
    """Return *selector* rewritten so it only matches inside *prefix*.

    ``root`` stands for the scope's own element and ``directory`` for the
    scope one naming level up. Comments and at-rule headers pass through.
    Applying this twice nests the prefix twice.
    """
    if selector.startswith("/*"):
        return selector
    if selector.startswith("@"):
        return selector
    if selector == ROOT:
        return prefix
    if selector.startswith(("root.", "root:", "root ")):
        return prefix + selector[len(ROOT):]
    if selector.startswith(DIRECTORY):
        return parent_prefix(prefix) + selector[len(DIRECTORY):]
    return prefix + " " + selector
