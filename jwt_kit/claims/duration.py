"""Parser for Go-style duration strings such as ``1h30m`` or ``-1.5s``."""

import re
from datetime import timedelta

from jwt_kit.core.errors import DurationError

NANOSECONDS_PER_MICROSECOND = 1_000

_UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}
_NUMBER = re.compile(r"([0-9]*)(?:\.([0-9]*))?")
_NUMBER_CHARS = frozenset("0123456789.")
_MAX_NANOSECONDS = (1 << 63) - 1


def parse_nanoseconds(text: str) -> int:
    """Parse a duration string into a signed count of nanoseconds.

    A duration is an optionally signed sequence of decimal numbers, each
    with an optional fraction and a unit suffix. ``"0"`` is the only value
    accepted without a unit. The result must fit in a signed 64-bit integer.
    """
    rest = text
    negative = False
    if rest and rest[0] in "+-":
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise DurationError(f'invalid duration "{text}"')

    limit = _MAX_NANOSECONDS + 1 if negative else _MAX_NANOSECONDS
    total = 0
    while rest:
        if rest[0] not in _NUMBER_CHARS:
            raise DurationError(f'invalid duration "{text}"')
        match = _NUMBER.match(rest)
        if match is None:
            raise DurationError(f'invalid duration "{text}"')
        whole, fraction = match.group(1), match.group(2) or ""
        if not whole and not fraction:
            raise DurationError(f'invalid duration "{text}"')
        rest = rest[match.end() :]

        unit_end = 0
        while unit_end < len(rest) and rest[unit_end] not in _NUMBER_CHARS:
            unit_end += 1
        if unit_end == 0:
            raise DurationError(f'missing unit in duration "{text}"')
        unit_name, rest = rest[:unit_end], rest[unit_end:]
        unit = _UNITS.get(unit_name)
        if unit is None:
            raise DurationError(f'unknown unit "{unit_name}" in duration "{text}"')

        total += int(whole or "0") * unit
        if fraction:
            total += int(fraction) * unit // 10 ** len(fraction)
        if total > limit:
            raise DurationError(f'invalid duration "{text}"')

    return -total if negative else total


def parse_duration(text: str) -> timedelta:
    """Parse a duration string, flooring to microsecond precision."""
    nanoseconds = parse_nanoseconds(text)
    return timedelta(microseconds=nanoseconds // NANOSECONDS_PER_MICROSECOND)
