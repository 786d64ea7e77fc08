"""Character-level re-serializers: minify and prettify.

Both are single-pass text transforms that only track whether the scan is
inside a string literal.  They never build a value tree and never validate;
malformed input comes out equally malformed.  Use ``dumps(parse(text))`` when
a validated rewrite is wanted.
"""

from __future__ import annotations

__all__ = ["minify", "prettify"]


def minify(text: str) -> str:
    """Remove every whitespace character outside string literals.

    Backslash escapes inside strings are preserved, so ``"a\\"b"`` stays one
    string literal.

    Example::

        minify('{ "a" : [1, 2] }')   # '{"a":[1,2]}'
    """
    out: list[str] = []
    in_string = False
    escaped = False
    for ch in text:
        if escaped:
            escaped = False
            out.append(ch)
        elif in_string:
            if ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            out.append(ch)
        elif ch.isspace():
            continue
        else:
            if ch == '"':
                in_string = True
            out.append(ch)
    return "".join(out)


def prettify(text: str, indent: int = 2) -> str:
    """Re-indent JSON text, one member or element per line.

    Whitespace outside strings is discarded and regenerated: a newline and
    indentation after ``{``, ``[`` and ``,``; a newline before ``}`` and ``]``;
    ``": "`` after a colon.  Empty containers stay on one line.

    Args:
        text:   JSON text (not validated).
        indent: Spaces per nesting level.  Must be >= 0.

    Returns:
        The re-indented text.
    """
    if indent < 0:
        msg = f"indent must be >= 0, got {indent}"
        raise ValueError(msg)

    compact = minify(text)
    out: list[str] = []
    level = 0
    in_string = False
    escaped = False

    def newline() -> None:
        out.append("\n" + " " * (indent * level))

    for i, ch in enumerate(compact):
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
        elif ch in "{[":
            out.append(ch)
            nxt = compact[i + 1] if i + 1 < len(compact) else ""
            level += 1
            if nxt == "" or nxt not in "}]":
                newline()
        elif ch in "}]":
            level = max(level - 1, 0)
            prev = compact[i - 1] if i else ""
            if prev == "" or prev not in "{[":
                newline()
            out.append(ch)
        elif ch == ",":
            out.append(ch)
            newline()
        elif ch == ":":
            out.append(": ")
        else:
            out.append(ch)
    return "".join(out)
