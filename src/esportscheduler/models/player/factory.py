"""Factory for creating Player objects with validation.

This module implements the Factory pattern for Player creation,
providing a single point of entry for creating players with the
league-wide ranking bounds applied.
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

from typing import Any, Dict

from esportscheduler.config import LeagueConfig
from esportscheduler.constants import DEFAULT_RANKING
from esportscheduler.exceptions import InvalidArgumentException
from esportscheduler.models.player.player import Player


class PlayerFactory:
    """Factory for creating Player instances.

    Example:
        >>> factory = PlayerFactory(LeagueConfig(ranking_max=3000))
        >>> player = factory.create_player(name="Ana Ruiz", alias="AnaX", ranking=1800)
    """

    def __init__(self, config: LeagueConfig = None):
        """Initialize the PlayerFactory.

        Args:
            config: League configuration providing ranking bounds
        """
        self.config = config or LeagueConfig()

    def create_player(
        self, name: str, alias: str, ranking: int = DEFAULT_RANKING
    ) -> Player:
        """Create a validated Player.

        Raises:
            InvalidNameException: If name or alias is blank
            InvalidRankingException: If the ranking is out of bounds
        """
        return Player(
            name=name,
            alias=alias,
            ranking=ranking,
            ranking_min=self.config.ranking_min,
            ranking_max=self.config.ranking_max,
        )

    def create_from_dict(self, data: Dict[str, Any]) -> Player:
        """Create a player from dictionary data.

        Args:
            data: Dictionary with ``name``, ``alias`` and optional ``ranking``

        Returns:
            Player instance

        Raises:
            InvalidArgumentException: If required fields are missing
        """
        missing = [key for key in ("name", "alias") if key not in data]
        if missing:
            raise InvalidArgumentException(
                f"Player data is missing: {', '.join(missing)}"
            )

        return self.create_player(
            name=data["name"],
            alias=data["alias"],
            ranking=data.get("ranking", DEFAULT_RANKING),
        )
