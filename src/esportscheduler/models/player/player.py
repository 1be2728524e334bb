"""A player that can belong to at most one team."""

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

from typing import TYPE_CHECKING, Optional

from esportscheduler.constants import (
    DEFAULT_RANKING,
    DEFAULT_RANKING_MAX,
    DEFAULT_RANKING_MIN,
)
from esportscheduler.utils import setup_logger
from esportscheduler.utils.validation import (
    check_ranking_bounds,
    validate_name_strict,
    validate_ranking_strict,
)

if TYPE_CHECKING:
    from esportscheduler.models.team import Team

logger = setup_logger(__name__)


class Player:
    """Represents a player of a team.

    Name and alias are fixed at creation, the ranking may be updated at any
    time. The team back-reference is read-only here: it is only changed by
    :meth:`Team.add_player` and :meth:`Team.remove_player`, which keep the
    roster and this reference in agreement.

    Attributes:
        name: Player's legal name
        alias: Public handle
        ranking: Numeric ranking within ``[ranking_min, ranking_max]``
        team: Team the player currently belongs to, or None
    """

    def __init__(
        self,
        name: str,
        alias: str,
        ranking: int = DEFAULT_RANKING,
        ranking_min: int = DEFAULT_RANKING_MIN,
        ranking_max: int = DEFAULT_RANKING_MAX,
    ) -> None:
        check_ranking_bounds(ranking_min, ranking_max)
        self._name: str = validate_name_strict(name, "player name")
        self._alias: str = validate_name_strict(alias, "alias")
        self._ranking_min = ranking_min
        self._ranking_max = ranking_max
        self._ranking: int = validate_ranking_strict(ranking, ranking_min, ranking_max)
        self._team: Optional[Team] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def alias(self) -> str:
        return self._alias

    @property
    def ranking(self) -> int:
        return self._ranking

    @ranking.setter
    def ranking(self, value: int) -> None:
        self._ranking = validate_ranking_strict(
            value, self._ranking_min, self._ranking_max
        )
        logger.debug(f"Ranking of {self._alias} set to {self._ranking}")

    @property
    def team(self) -> Optional[Team]:
        """Team the player belongs to, None when unattached."""
        return self._team

    def _set_team(self, team: Optional[Team]) -> None:
        # Only the roster controller in Team calls this.
        self._team = team

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, alias={self._alias!r}, ranking={self._ranking})"

    def __str__(self) -> str:
        if self._team is not None:
            return f"{self._alias} ({self._name}, {self._team.name})"
        return f"{self._alias} ({self._name})"
