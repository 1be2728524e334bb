"""Referees and the record of matches they supervised."""

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

from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from esportscheduler.exceptions import InvalidArgumentException
from esportscheduler.utils import setup_logger
from esportscheduler.utils.validation import validate_name_strict

if TYPE_CHECKING:
    from esportscheduler.models.tournament.match import Match

logger = setup_logger(__name__)


class Referee:
    """A referee who can supervise many matches.

    The history is append-only: it records every match the referee was ever
    assigned, in assignment order. Reassigning or cancelling a match leaves
    its entry in place.
    """

    def __init__(self, first_name: str, last_name: str) -> None:
        self._first_name: str = validate_name_strict(first_name, "referee first name")
        self._last_name: str = validate_name_strict(last_name, "referee last name")
        self._history: List[Match] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def supervised_count(self) -> int:
        return len(self._history)

    def assign(self, match: Match) -> None:
        """Record a match in this referee's history.

        Called by :class:`Match` whenever it takes this referee; callers
        outside a match assignment should not use it.

        Raises:
            InvalidArgumentException: If match is None
        """
        if match is None:
            raise InvalidArgumentException(
                f"Cannot record a missing match for {self.full_name}"
            )
        self._history.append(match)
        logger.debug(f"{self.full_name} assigned to {match.id}")

    def history(self) -> Tuple[Match, ...]:
        """Supervised matches in assignment order."""
        return tuple(self._history)

    def __repr__(self) -> str:
        return f"Referee({self._first_name!r}, {self._last_name!r})"

    def __str__(self) -> str:
        return self.full_name
