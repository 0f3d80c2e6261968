# SPDX-License-Identifier: MIT
"""Pattern-based rendering of versions.

Pattern tokens:

- ``x``, ``y``, ``z``: major, minor and patch numbers
- ``p``, ``b``: pre-release and build metadata (empty when absent)
- ``G``: full version, ``major.minor.patch[-prerelease][+build]``
- ``g``: ``major.minor.patch[-prerelease]``
- ``C``: ``major.minor.patch``
- ``T``: tick count of the reference time (100 ns intervals since 0001-01-01)
- runs of ``Y``, ``M``, ``m``, ``D``, ``d``, ``H``, ``h``, ``s``, ``f``:
  date and time fields of the reference time (see ``TIMESTAMP_TOKENS``)
- ``\\``: emit the next character literally

Every other character is copied to the output as is.

Example:
    >>> from datetime import datetime
    >>> from semverkit_version import Version
    >>> format_version(Version(1, 2, 3, "beta"), "x.y.z-p (YYYY-MM-dd)", datetime(2024, 3, 9))
    '1.2.3-beta (2024-03-09)'
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from .semver import Version

DEFAULT_PATTERN = "G"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Ticks between 0001-01-01 and the reference time
TICKS_PER_SECOND = 10_000_000
_EPOCH = datetime(1, 1, 1)
MAX_FRACTION_DIGITS = 7


def _padded(value: int, count: int) -> str:
    return f"{value:0{min(count, 2)}d}"


def _render_year(moment: datetime, count: int) -> str:
    if count <= 2:
        return f"{moment.year % 100:0{count}d}"
    return f"{moment.year:0{count}d}"


def _render_month(moment: datetime, count: int) -> str:
    if count == 3:
        return MONTH_NAMES[moment.month - 1][:3]
    if count > 3:
        return MONTH_NAMES[moment.month - 1]
    return _padded(moment.month, count)


def _render_day(moment: datetime, count: int) -> str:
    if count == 3:
        return DAY_NAMES[moment.weekday()][:3]
    if count > 3:
        return DAY_NAMES[moment.weekday()]
    return _padded(moment.day, count)


def _render_hour(moment: datetime, count: int) -> str:
    return _padded(moment.hour, count)


def _render_hour12(moment: datetime, count: int) -> str:
    return _padded(moment.hour % 12 or 12, count)


def _render_minute(moment: datetime, count: int) -> str:
    return _padded(moment.minute, count)


def _render_second(moment: datetime, count: int) -> str:
    return _padded(moment.second, count)


def _render_fraction(moment: datetime, count: int) -> str:
    # Microseconds carry six of the seven tick digits
    digits = f"{moment.microsecond:06d}0"
    return digits[: min(count, MAX_FRACTION_DIGITS)]


# Token character -> renderer taking (reference time, run length)
TIMESTAMP_TOKENS: dict[str, Callable[[datetime, int], str]] = {
    "Y": _render_year,
    "M": _render_month,
    "m": _render_minute,
    "D": _render_day,
    "d": _render_day,
    "H": _render_hour,
    "h": _render_hour12,
    "s": _render_second,
    "f": _render_fraction,
}


def to_ticks(moment: datetime) -> int:
    """Return the number of 100 ns ticks between 0001-01-01 and ``moment``."""
    delta = _as_utc(moment) - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * TICKS_PER_SECOND + delta.microseconds * 10


def _as_utc(moment: datetime) -> datetime:
    """Return ``moment`` as a naive UTC datetime; naive input is taken as UTC."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
    return moment


def _core(version: "Version") -> str:
    return f"{version.major}.{version.minor}.{version.patch}"


def _without_build(version: "Version") -> str:
    text = _core(version)
    if version.prerelease:
        text += f"-{version.prerelease}"
    return text


def _full(version: "Version") -> str:
    text = _without_build(version)
    if version.build:
        text += f"+{version.build}"
    return text


_VERSION_TOKENS: dict[str, Callable[["Version"], str]] = {
    "x": lambda v: str(v.major),
    "y": lambda v: str(v.minor),
    "z": lambda v: str(v.patch),
    "p": lambda v: v.prerelease or "",
    "b": lambda v: v.build or "",
    "G": _full,
    "g": _without_build,
    "C": _core,
}


def format_version(
    version: "Version",
    pattern: Optional[str] = None,
    reference_time: Optional[datetime] = None,
) -> str:
    """Render a version using a format pattern.

    Args:
        version: The version to render
        pattern: Format pattern; empty or None means ``"G"``
        reference_time: Instant used by the date and time tokens. Defaults to
            the current UTC time, read once per call.

    Returns:
        The rendered text

    Examples:
        >>> format_version(Version(1, 2, 3, "beta", "456"), "x.y.z_p")
        '1.2.3_beta'
        >>> format_version(Version(1, 2, 3, "beta", "456"), "\\\\x=x")
        'x=1'
    """
    if not pattern:
        pattern = DEFAULT_PATTERN

    moment: Optional[datetime] = None
    output: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        c = pattern[i]

        if c in _VERSION_TOKENS:
            output.append(_VERSION_TOKENS[c](version))
            i += 1
        elif c in TIMESTAMP_TOKENS or c == "T":
            if moment is None:
                moment = _as_utc(reference_time or datetime.now(timezone.utc))

            if c == "T":
                output.append(str(to_ticks(moment)))
                i += 1
                continue

            end = i
            while end < n and pattern[end] == c:
                end += 1
            output.append(TIMESTAMP_TOKENS[c](moment, end - i))
            i = end
        elif c == "\\":
            if i + 1 < n:
                output.append(pattern[i + 1])
                i += 2
            else:
                output.append(c)
                i += 1
        else:
            output.append(c)
            i += 1

    return "".join(output)
