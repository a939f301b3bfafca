"""Expands SLURM's nodelist shorthand, e.g. ``n[01,02],n03,n[05-07,09]``.

The pattern is scanned once, left to right. Letters outside of brackets build
the prefix, digits build the current number, and ``-``, ``,`` and ``]`` decide
when the current number becomes a hostname or closes a range. Results are
sorted as strings and deduplicated.
"""

from dataclasses import dataclass, field

from sexpand.errors import (
    InvalidNumberError,
    MismatchedWidthError,
    NestedBracketError,
    UnbalancedBracketError,
)


def pad_number(num: int, width: int) -> str:
    """Zero-pad ``num`` to at least ``width`` characters; never truncates."""
    return str(num).zfill(width)


def _parse_int(token: str) -> int:
    if not token.isdecimal():
        raise InvalidNumberError(token)
    return int(token)


def expand_range(prefix: str, start: str, end: str) -> list[str]:
    """Expand an inclusive range into hostnames padded to the width of ``start``.

    A descending range (``end < start``) yields no hostnames.

    Raises:
        MismatchedWidthError: if ``start`` and ``end`` differ in width.
        InvalidNumberError: if either boundary is not a decimal number.
    """
    if len(start) != len(end):
        raise MismatchedWidthError(start, end)
    first = _parse_int(start)
    last = _parse_int(end)
    return [prefix + pad_number(i, len(start)) for i in range(first, last + 1)]


@dataclass
class _ScanState:
    depth: int = 0
    prefix: list[str] = field(default_factory=list)
    numbers: list[str] = field(default_factory=list)
    # None means no "-" has been seen since the last reset
    range_start: str | None = None
    queue: list[str] = field(default_factory=list)
    hostnames: list[str] = field(default_factory=list)

    def close_range(self):
        if self.range_start is not None:
            self.queue.extend(
                expand_range(
                    "".join(self.prefix), self.range_start, "".join(self.numbers)
                )
            )
        self.range_start = None

    def end_item(self):
        self.close_range()
        self.queue.append("".join(self.prefix) + "".join(self.numbers))
        self.hostnames.extend(self.queue)
        self.queue.clear()
        self.numbers.clear()
        if self.depth == 0:
            self.prefix.clear()


def expand_hostnames(pattern: str) -> list[str]:
    """Expand a hostname pattern into a sorted list of unique hostnames.

    >>> expand_hostnames("n[01,02],n03,n[05-07,09]")
    ['n01', 'n02', 'n03', 'n05', 'n06', 'n07', 'n09']

    Raises:
        NestedBracketError: if a "[" is opened inside another bracket group.
        UnbalancedBracketError: if a "]" has no matching "[", or the pattern
            ends inside a bracket group.
        MismatchedWidthError, InvalidNumberError: from ``expand_range``.
    """
    state = _ScanState()
    last_index = len(pattern) - 1
    for i, c in enumerate(pattern):
        if c.isalpha() and state.depth == 0:
            state.prefix.append(c)
        if c.isdecimal():
            state.numbers.append(c)
        if c == "[":
            state.depth += 1
            if state.depth > 1:
                raise NestedBracketError()
        if c == "]":
            if state.depth == 0:
                raise UnbalancedBracketError(pattern)
            # The number is kept: it is still used by the literal at the item's end.
            state.close_range()
            state.depth -= 1
        if c == "-":
            state.range_start = "".join(state.numbers)
            state.numbers.clear()
        if c == "," or i == last_index:
            state.end_item()

    if state.depth != 0:
        raise UnbalancedBracketError(pattern)
    state.hostnames.extend(state.queue)
    return sorted(set(state.hostnames))
