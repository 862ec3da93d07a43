"""Message importance and its client-specific encodings.

Mail clients never agreed on a single way to flag urgent mail, so one
importance level is rendered three ways:

* ``Importance`` header: ``non-urgent``, ``low``, ``high``, ``urgent``
* ``Priority`` / ``X-MSMail-Priority`` (MAPI style): ``0`` or ``1``
* ``X-Priority`` (legacy): ``5`` or ``1``

``NORMAL`` renders as an empty string in all three encodings, which tells the
caller to omit the header. Integers outside the enum render the same way.
"""

from __future__ import annotations

from enum import IntEnum


class Importance(IntEnum):
    """Importance level of a message, from least to most urgent."""

    NON_URGENT = 0
    LOW = 1
    NORMAL = 2
    HIGH = 3
    URGENT = 4

    def __str__(self) -> str:
        return importance_string(self)

    def num_string(self) -> str:
        """Return the MAPI-style numeric priority."""
        return importance_num_string(self)

    def xprio_string(self) -> str:
        """Return the legacy X-Priority value."""
        return importance_xprio_string(self)


_DISPLAY: dict[int, str] = {
    Importance.NON_URGENT: "non-urgent",
    Importance.LOW: "low",
    Importance.HIGH: "high",
    Importance.URGENT: "urgent",
}

_NUMERIC: dict[int, str] = {
    Importance.NON_URGENT: "0",
    Importance.LOW: "0",
    Importance.HIGH: "1",
    Importance.URGENT: "1",
}

_XPRIO: dict[int, str] = {
    Importance.NON_URGENT: "5",
    Importance.LOW: "5",
    Importance.HIGH: "1",
    Importance.URGENT: "1",
}


def importance_string(level: Importance | int) -> str:
    """Return the value for the ``Importance`` header, or "" to omit it."""
    return _DISPLAY.get(int(level), "")


def importance_num_string(level: Importance | int) -> str:
    """Return the value for ``Priority``/``X-MSMail-Priority``, or ""."""
    return _NUMERIC.get(int(level), "")


def importance_xprio_string(level: Importance | int) -> str:
    """Return the value for ``X-Priority``, or ""."""
    return _XPRIO.get(int(level), "")


def parse_importance(value: str) -> Importance | int:
    """Resolve a level from its member name, display string or ordinal.

    Accepts ``"HIGH"``, ``"high"``, ``"non-urgent"``, ``"non_urgent"`` or
    ``"3"``. An ordinal outside the enum is returned as a plain ``int``; the
    encoders render it like ``NORMAL``.

    Raises:
        ValueError: If ``value`` is not a number and names no level.
    """
    text = value.strip()
    if text.lstrip("-").isdigit():
        ordinal = int(text)
        try:
            return Importance(ordinal)
        except ValueError:
            return ordinal

    key = text.upper().replace("-", "_")
    try:
        return Importance[key]
    except KeyError:
        raise ValueError(f"Unknown importance level: {value!r}") from None
