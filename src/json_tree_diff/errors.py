"""ParseError hierarchy raised by the recursive-descent parser.

Every parse failure is a ``ParseError`` (itself a ``ValueError``), so callers
that only care about "did it parse" catch one type.  Each failure mode is a
tagged subclass carrying structured fields, so callers that need to react
programmatically never have to inspect message text.

Example::

    from json_tree_diff import parse
    from json_tree_diff.errors import UnexpectedCharacterError

    try:
        parse('{"a": }')
    except UnexpectedCharacterError as exc:
        print(exc.expected, exc.found, exc.position)  # a JSON value } 6
"""

from __future__ import annotations

__all__ = [
    "NestingTooDeepError",
    "NumberFormatError",
    "ParseError",
    "TrailingDataError",
    "UnexpectedCharacterError",
    "UnexpectedEndOfInputError",
    "UnterminatedStringError",
]


class ParseError(ValueError):
    """Base class for all JSON parse failures.

    Attributes:
        message:  Human-readable description of the failure.
        position: Character index in the input at which the failure was detected.
    """

    def __init__(self, message: str, position: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.position = position


class UnexpectedCharacterError(ParseError):
    """A character was found where the grammar expected something else."""

    def __init__(self, expected: str, found: str, position: int) -> None:
        self.expected = expected
        self.found = found
        msg = f"cannot parse JSON: expected {expected} but found {found!r} at position {position}"
        super().__init__(msg, position)


class UnexpectedEndOfInputError(ParseError):
    """The input ended before the construct being parsed was complete."""

    def __init__(self, context: str, position: int) -> None:
        self.context = context
        super().__init__(f"{context} (position {position})", position)


class UnterminatedStringError(UnexpectedEndOfInputError):
    """The input ended inside a string literal.

    ``partial`` holds the characters accumulated before the input ran out.
    """

    def __init__(self, partial: str, position: int) -> None:
        self.partial = partial
        super().__init__(
            f"reached end of input while parsing string, partial buffer {partial!r}",
            position,
        )


class NumberFormatError(ParseError):
    """A number literal was malformed or outside the signed 64-bit range."""

    def __init__(self, text: str, reason: str, position: int) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid number {text!r}: {reason} (position {position})", position)


class NestingTooDeepError(ParseError):
    """Arrays and objects were nested deeper than the configured limit."""

    def __init__(self, max_depth: int, position: int) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"nesting depth exceeds limit of {max_depth} at position {position}",
            position,
        )


class TrailingDataError(ParseError):
    """Non-whitespace input followed a complete root value."""

    def __init__(self, found: str, position: int) -> None:
        self.found = found
        super().__init__(
            f"extra data after root value: found {found!r} at position {position}",
            position,
        )
