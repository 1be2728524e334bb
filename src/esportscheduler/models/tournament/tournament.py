"""Tournament: one game, a set of enrolled teams and the matches it schedules.

A tournament owns its matches; teams are only associated with it. Every
operation validates its input before touching any state, so a rejected call
leaves the tournament, its teams and the referees unchanged.
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

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from esportscheduler.constants import DEFAULT_DATE_FORMAT
from esportscheduler.exceptions import (
    InvalidArgumentException,
    SameTeamException,
    TeamNotEnrolledException,
)
from esportscheduler.models.game import Game
from esportscheduler.models.referee import Referee
from esportscheduler.models.team import Team
from esportscheduler.models.tournament.match import Match
from esportscheduler.type_hints import DateLike
from esportscheduler.utils import setup_logger
from esportscheduler.utils.validation import (
    normalize_key,
    validate_date_strict,
    validate_name_strict,
)

logger = setup_logger(__name__)


class Tournament:
    """A tournament played on a single game.

    Attributes:
        name: Tournament name, unique across the league
        organizer: Who runs the tournament
        start_date: First day of the tournament
        game: The game every match is played on, fixed at creation
    """

    def __init__(
        self,
        name: str,
        organizer: str,
        start_date: DateLike,
        game: Game,
    ) -> None:
        self._name: str = validate_name_strict(name, "tournament name")
        self._organizer: str = validate_name_strict(organizer, "organizer")
        self._start_date: date = validate_date_strict(start_date)
        if game is None:
            raise InvalidArgumentException(f"Tournament '{self._name}' needs a game")
        self._game: Game = game

        # Enrolled teams keyed by normalized name, in enrollment order
        self._teams: Dict[str, Team] = {}
        self._matches: List[Match] = []

    # ========== Properties ==========

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        """Normalized name used for lookups."""
        return normalize_key(self._name)

    @property
    def organizer(self) -> str:
        return self._organizer

    @property
    def start_date(self) -> date:
        return self._start_date

    @property
    def game(self) -> Game:
        return self._game

    # ========== Enrollment ==========

    def enroll(self, team: Team) -> bool:
        """Enroll a team.

        Returns:
            True if newly enrolled, False if it already was

        Raises:
            InvalidArgumentException: If team is None
        """
        if team is None:
            raise InvalidArgumentException(f"Cannot enroll a missing team in {self._name}")
        if team.key in self._teams:
            return False

        self._teams[team.key] = team
        logger.info(f"Enrolled {team.name} in {self._name}")
        return True

    def withdraw(self, team: Team) -> bool:
        """Withdraw a team. Matches already scheduled for it are kept.

        Returns:
            True if the team was enrolled and is now withdrawn, False otherwise
        """
        if team is None or team.key not in self._teams:
            return False

        del self._teams[team.key]
        logger.info(f"Withdrew {team.name} from {self._name}")
        return True

    def is_enrolled(self, team: Optional[Team]) -> bool:
        return team is not None and team.key in self._teams

    def list_enrolled_teams(self) -> Tuple[Team, ...]:
        """Snapshot of enrolled teams in enrollment order."""
        return tuple(self._teams.values())

    # ========== Matches ==========

    def schedule_match(
        self,
        match_date: DateLike,
        team1: Team,
        team2: Team,
        referee: Referee,
    ) -> Match:
        """Schedule a match between two enrolled teams.

        The match is played on this tournament's game and is recorded in the
        referee's history.

        Args:
            match_date: Day of the match
            team1: First team
            team2: Second team
            referee: Referee in charge

        Returns:
            The scheduled match

        Raises:
            InvalidArgumentException: If an argument is missing or the date is invalid
            SameTeamException: If both teams are the same team
            TeamNotEnrolledException: If either team is not enrolled
        """
        match_date = validate_date_strict(match_date)
        if team1 is None or team2 is None:
            raise InvalidArgumentException("A match needs two teams")
        if referee is None:
            raise InvalidArgumentException("A match needs a referee")
        if team1 == team2:
            raise SameTeamException(f"A team cannot play against itself: {team1.name}")

        for team in (team1, team2):
            if not self.is_enrolled(team):
                logger.warning(
                    f"Rejected match in {self._name}: {team.name} is not enrolled"
                )
                raise TeamNotEnrolledException(
                    f"Team {team.name} is not enrolled in {self._name}"
                )

        match = Match.create(self, match_date, team1, team2, referee)
        self._matches.append(match)
        logger.info(f"Scheduled {match.id} in {self._name}: {match}")
        return match

    def cancel_match(self, match: Match) -> bool:
        """Remove a scheduled match. The referee's history keeps it.

        Returns:
            True if the match was removed, False if it was not scheduled here
        """
        if match is None:
            return False
        for index, scheduled in enumerate(self._matches):
            if scheduled is match:
                del self._matches[index]
                logger.info(f"Cancelled {match.id} in {self._name}")
                return True
        return False

    def find_match(self, match_id: str) -> Optional[Match]:
        for match in self._matches:
            if match.id == match_id:
                return match
        return None

    def matches_for_team(self, team: Team) -> Tuple[Match, ...]:
        return tuple(m for m in self._matches if m.involves(team))

    def list_matches(self) -> Tuple[Match, ...]:
        """Snapshot of scheduled matches in scheduling order."""
        return tuple(self._matches)

    # ========== Summary ==========

    def to_summary(self, date_format: str = DEFAULT_DATE_FORMAT) -> Dict[str, Any]:
        """Plain-data overview row for this tournament."""
        return {
            "name": self._name,
            "organizer": self._organizer,
            "start_date": self._start_date.strftime(date_format),
            "game": self._game.name,
            "teams": len(self._teams),
            "matches": len(self._matches),
        }

    def __repr__(self) -> str:
        return (
            f"Tournament(name={self._name!r}, game={self._game.name!r}, "
            f"teams={len(self._teams)}, matches={len(self._matches)})"
        )

    def __str__(self) -> str:
        return self._name
