# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

"""Timekit custom exceptions."""

from typing import Any


class TimekitError(Exception):
    """Base class of all errors raised by timekit."""


class InvalidIndexTypeError(TimekitError, TypeError):
    """Input elements are not recognized timestamps."""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        self.message = message
        super().__init__(self.message)


class EmptyIndexError(TimekitError, ValueError):
    """An operation needs at least one timestamp."""


class InvalidPeriodError(TimekitError, ValueError):
    """A step or length descriptor could not be parsed."""

    def __init__(self, value: Any, message: str = None):
        self.value = value
        self.message = message or (
            f"Cannot parse period {value!r}, expected e.g. '1 month' or '1 year 6 months'"
        )
        super().__init__(self.message)


class UnderDeterminedSpecError(TimekitError, ValueError):
    """Not enough of start, end, length and step to build a sequence."""


class ContradictorySpecError(TimekitError, ValueError):
    """Sequence inputs conflict with each other."""


class UnknownCalendarError(TimekitError, KeyError):
    """Holiday lookup was given an unrecognized calendar identifier."""

    def __init__(self, calendar_id: str, message: str = None):
        self.calendar_id = calendar_id
        self.message = message or f"Unknown holiday calendar: {calendar_id!r}"
        super().__init__(self.message)

    def __str__(self):
        return self.message


class UnreachableTargetError(TimekitError, RuntimeError):
    """A future sequence could not retain the requested number of points."""

    def __init__(self, requested: int, retained: int, candidates: int):
        self.requested = requested
        self.retained = retained
        self.candidates = candidates
        self.message = (
            f"Retained only {retained} of {requested} requested points after "
            f"generating {candidates} candidates; the skip values and weekday "
            "filter exclude too many dates"
        )
        super().__init__(self.message)
