"""Validation utilities for Esports Scheduler.

This module provides reusable validation functions with consistent error handling.
Soft validators return a :class:`ValidationResult`; the ``*_strict`` variants
raise the matching exception instead.
"""

# Esports Scheduler
# Copyright (C) 2025  Esports Scheduler developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from datetime import date, datetime
from typing import Any, Optional

from dateutil import parser as date_parser

from esportscheduler.exceptions import (
    InvalidConfigurationException,
    InvalidDateException,
    InvalidNameException,
    InvalidRankingException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Name Validation ==========


def normalize_key(name: str) -> str:
    """Normalize a name for case-insensitive lookups: lower-case and trimmed."""
    return name.strip().lower()


def validate_name(
    name: Optional[str], field: str = "name", required: bool = True
) -> ValidationResult:
    """Validate a display name.

    Args:
        name: Name to validate
        field: Label used in the error message ("team name", "alias", ...)
        required: Whether the name is required (blank = invalid)

    Returns:
        ValidationResult carrying the trimmed name

    Example:
        >>> validate_name("  Fox ", "team name").sanitized_value
        'Fox'
    """
    if name is not None and not isinstance(name, str):
        return ValidationResult(
            is_valid=False,
            error_message=f"The {field} must be text, got {type(name).__name__}",
        )

    if not name or not name.strip():
        if required:
            return ValidationResult(
                is_valid=False,
                error_message=f"The {field} is required",
            )
        return ValidationResult(is_valid=True, sanitized_value=None)

    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_name_strict(name: Optional[str], field: str = "name") -> str:
    """Validate a required name and return it trimmed.

    Raises:
        InvalidNameException: If the name is missing or blank
    """
    result = validate_name(name, field, required=True)
    if not result.is_valid:
        raise InvalidNameException(result.error_message)
    return result.sanitized_value


# ========== Ranking Validation ==========


def check_ranking_bounds(minimum: int, maximum: int) -> None:
    """Reject a ranking range whose lower bound exceeds the upper bound.

    Raises:
        InvalidConfigurationException: If ``minimum > maximum``
    """
    if minimum > maximum:
        raise InvalidConfigurationException(
            f"Ranking minimum {minimum} is greater than maximum {maximum}"
        )


def validate_ranking(ranking: Any, minimum: int, maximum: int) -> ValidationResult:
    """Validate a player ranking against inclusive bounds.

    Args:
        ranking: Ranking value to validate
        minimum: Lowest accepted ranking
        maximum: Highest accepted ranking

    Returns:
        ValidationResult with validation status

    Raises:
        InvalidConfigurationException: If the bounds themselves are inverted
    """
    check_ranking_bounds(minimum, maximum)

    # bool is an int subclass but never a ranking
    if isinstance(ranking, bool) or not isinstance(ranking, int):
        return ValidationResult(
            is_valid=False,
            error_message=f"Ranking must be an integer, got {ranking!r}",
        )

    if ranking < minimum or ranking > maximum:
        return ValidationResult(
            is_valid=False,
            error_message=f"Ranking {ranking} must be between {minimum} and {maximum}",
        )

    return ValidationResult(is_valid=True, sanitized_value=ranking)


def validate_ranking_strict(ranking: Any, minimum: int, maximum: int) -> int:
    """Validate a ranking and raise if invalid.

    Raises:
        InvalidRankingException: If the ranking is invalid
    """
    result = validate_ranking(ranking, minimum, maximum)
    if not result.is_valid:
        raise InvalidRankingException(result.error_message)
    return result.sanitized_value


# ========== Date Validation ==========

# Two defaults sharing no date field, used to detect partial input
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def validate_date(value: Any) -> ValidationResult:
    """Validate a calendar date.

    Accepts a :class:`~datetime.date`, a :class:`~datetime.datetime` (reduced
    to its date) or a string understood by ``dateutil``, e.g. ``2025-10-01``.
    Strings must name a full date: partial input such as ``2025-10`` or
    ``October`` is rejected instead of being completed from today.

    Args:
        value: Date to validate

    Returns:
        ValidationResult carrying a ``date`` instance
    """
    if value is None:
        return ValidationResult(is_valid=False, error_message="A date is required")

    if isinstance(value, datetime):
        return ValidationResult(is_valid=True, sanitized_value=value.date())

    if isinstance(value, date):
        return ValidationResult(is_valid=True, sanitized_value=value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return ValidationResult(is_valid=False, error_message="A date is required")
        try:
            # Any field dateutil fills from a default differs between the two
            parsed = date_parser.parse(text, default=_DEFAULT_A)
            check = date_parser.parse(text, default=_DEFAULT_B)
        except (ValueError, OverflowError):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid date: {value!r}",
            )
        if parsed.date() != check.date():
            return ValidationResult(
                is_valid=False,
                error_message=f"Incomplete date: {value!r}, expected year, month and day",
            )
        return ValidationResult(is_valid=True, sanitized_value=parsed.date())

    return ValidationResult(
        is_valid=False,
        error_message=f"Invalid date type: {type(value).__name__}",
    )


def validate_date_strict(value: Any) -> date:
    """Validate a date and raise if invalid.

    Raises:
        InvalidDateException: If the value is missing or unparseable
    """
    result = validate_date(value)
    if not result.is_valid:
        raise InvalidDateException(result.error_message)
    return result.sanitized_value
