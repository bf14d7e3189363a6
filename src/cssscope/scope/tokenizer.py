"""Hand-written scanner that splits a CSS fragment into rules.

The scanner walks the fragment once, switching between accumulating a
selector list and accumulating a braced body::

    h1, h2 { margin: 0; }
    @media (max-width: 600px) { root { display: none; } }

Bodies of ``@media`` rules are rewritten recursively with the same prefix.
"""

from __future__ import annotations

from cssscope.scope.model import Rule

__all__ = ["tokenize"]

_TRIM = " \t\r\n"

# Indent placed in front of a rewritten @media body.
MEDIA_INDENT = "\n    "


def _rewrite_media(chunks: list[str], prefix: str) -> str:
    from cssscope.scope.reassembler import apply_prefix

    rewritten = apply_prefix("".join(chunks), prefix)
    return MEDIA_INDENT + rewritten.removesuffix("\n")


def tokenize(fragment: str, prefix: str) -> list[Rule]:
    """Split *fragment* into rules in source order.

    Comments inside a body are copied verbatim. Comments met while reading a
    selector list are kept apart from the selectors and attached to the rule,
    so they never change how a selector is rewritten. A rule still open
    when the fragment ends is dropped, as is any selector text or comment
    after the last closed rule.
    """
    rules: list[Rule] = []
    selectors: list[str] = []
    buf: list[str] = []
    comments: list[str] = []
    in_body = False
    depth = 0
    media_start = -1

    i = 0
    n = len(fragment)
    while i < n:
        c = fragment[i]

        if c == "/" and fragment.startswith("/*", i):
            close = fragment.find("*/", i + 2)
            stop = n if close < 0 else close + 2
            if in_body:
                buf.append(fragment[i:stop])
            else:
                comments.append(fragment[i:stop])
            i = stop
            continue

        i += 1

        if c == ",":
            if in_body:
                buf.append(c)
            else:
                selectors.append("".join(buf).strip(_TRIM))
                buf = []
        elif c == "{":
            if in_body:
                depth += 1
                buf.append(c)
                continue
            selector = "".join(buf).strip(_TRIM)
            selectors.append(selector)
            buf = [c]
            in_body = True
            if selector.startswith("@media"):
                media_start = len(buf)
        elif c == "}":
            if not in_body:
                # stray closing brace outside any rule
                buf.append(c)
                continue
            if depth:
                depth -= 1
                buf.append(c)
                continue
            if media_start >= 0:
                media = _rewrite_media(buf[media_start:], prefix)
                buf = buf[:media_start]
                buf.append(media)
                media_start = -1
            buf.append(c)
            rules.append(
                Rule(
                    selectors=tuple(selectors),
                    body="".join(buf),
                    comments=tuple(comments),
                )
            )
            selectors = []
            comments = []
            buf = []
            in_body = False
        else:
            buf.append(c)

    return rules
