"""A scheduled match between two teams of a tournament."""

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

from datetime import date
from typing import TYPE_CHECKING, Any, Dict, Optional

from esportscheduler.constants import DEFAULT_DATE_FORMAT, MATCH_ID_PREFIX
from esportscheduler.exceptions import InvalidArgumentException, SameTeamException
from esportscheduler.models.game import Game
from esportscheduler.models.referee import Referee
from esportscheduler.models.team import Team
from esportscheduler.type_hints import DateLike
from esportscheduler.utils import generate_id, setup_logger
from esportscheduler.utils.validation import validate_date_strict

if TYPE_CHECKING:
    from esportscheduler.models.tournament.tournament import Tournament

logger = setup_logger(__name__)


class Match:
    """A match played on a date between two distinct teams.

    The game always comes from the owning tournament. Everything except the
    referee is fixed once the match exists, and a match is never without a
    referee: each assignment, including the first, is recorded in the new
    referee's history.

    Use :meth:`create` (or :meth:`Tournament.schedule_match`, which also
    checks enrollment) to build one.

    Attributes:
        id: Generated identifier, e.g. ``Match-3``
        tournament: Owning tournament
        date: Day the match is played
        team1: First team
        team2: Second team
        game: The tournament's game
        referee: Currently assigned referee
    """

    def __init__(
        self,
        tournament: Tournament,
        match_date: DateLike,
        team1: Team,
        team2: Team,
        referee: Referee,
    ) -> None:
        if tournament is None:
            raise InvalidArgumentException("A match needs a tournament")
        parsed_date = validate_date_strict(match_date)
        if team1 is None or team2 is None:
            raise InvalidArgumentException("A match needs two teams")
        if referee is None:
            raise InvalidArgumentException("A match needs a referee")
        if team1 == team2:
            raise SameTeamException(f"A team cannot play against itself: {team1.name}")

        self._id: str = generate_id(MATCH_ID_PREFIX)
        self._tournament = tournament
        self._date: date = parsed_date
        self._team1 = team1
        self._team2 = team2
        self._game: Game = tournament.game
        self._referee: Referee = referee
        referee.assign(self)

    @classmethod
    def create(
        cls,
        tournament: Tournament,
        match_date: DateLike,
        team1: Team,
        team2: Team,
        referee: Referee,
    ) -> "Match":
        """Build a validated match and record it in the referee's history.

        Raises:
            InvalidArgumentException: If any argument is missing or invalid
            SameTeamException: If both teams are the same team
        """
        return cls(tournament, match_date, team1, team2, referee)

    # ========== Properties ==========

    @property
    def id(self) -> str:
        return self._id

    @property
    def tournament(self) -> Tournament:
        return self._tournament

    @property
    def date(self) -> date:
        return self._date

    @property
    def team1(self) -> Team:
        return self._team1

    @property
    def team2(self) -> Team:
        return self._team2

    @property
    def game(self) -> Game:
        return self._game

    @property
    def referee(self) -> Referee:
        return self._referee

    # ========== Referee ==========

    def reassign_referee(self, new_referee: Referee) -> None:
        """Hand the match to another referee.

        The new referee's history gains this match; the previous referee keeps
        its entry. Reassigning to the referee already in charge does nothing.

        Raises:
            InvalidArgumentException: If new_referee is None
        """
        if new_referee is None:
            raise InvalidArgumentException(f"Match {self._id} needs a referee")
        if new_referee is self._referee:
            return

        previous = self._referee
        self._referee = new_referee
        new_referee.assign(self)
        logger.info(
            f"Match {self._id} referee changed from {previous.full_name} "
            f"to {new_referee.full_name}"
        )

    # ========== Queries ==========

    def involves(self, team: Optional[Team]) -> bool:
        """Whether the team plays in this match."""
        return team is not None and (team == self._team1 or team == self._team2)

    def to_summary(self, date_format: str = DEFAULT_DATE_FORMAT) -> Dict[str, Any]:
        """Plain-data view of the match."""
        return {
            "id": self._id,
            "date": self._date.strftime(date_format),
            "team1": self._team1.name,
            "team2": self._team2.name,
            "game": self._game.name,
            "referee": self._referee.full_name,
        }

    def __repr__(self) -> str:
        return (
            f"Match(id={self._id!r}, {self._team1.name!r} vs {self._team2.name!r}, "
            f"date={self._date.isoformat()})"
        )

    def __str__(self) -> str:
        return (
            f"{self._team1.name} vs {self._team2.name} on {self._date.isoformat()} "
            f"({self._game.name}, referee {self._referee.full_name})"
        )
