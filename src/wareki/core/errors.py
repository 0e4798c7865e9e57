# src/wareki/core/errors.py
from __future__ import annotations


class WarekiError(Exception):
    """Base class for all wareki conversion / arithmetic failures."""


class OutOfRangeError(WarekiError, ValueError):
    """
    The instant precedes the first supported lunisolar New Year (593),
    or a static table was indexed outside its bounds.
    """


class InvalidArgumentError(WarekiError, ValueError):
    """
    Caller supplied an era / year / month / day combination that cannot exist,
    including a leap month that did not occur in the target year.
    """


class UnsupportedOperationError(WarekiError):
    """
    The request needs data below civil year 593, or tries to add to a
    derived field (era, month name, stem / branch, weekday).
    """
