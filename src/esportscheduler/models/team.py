"""Teams and their rosters.

The roster and each player's team reference form a two-way link. Team is
the only place that changes either side, so both always agree.
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

from typing import List, Optional, Tuple

from esportscheduler.exceptions import (
    InvalidArgumentException,
    PlayerAlreadyOnTeamException,
)
from esportscheduler.models.player import Player
from esportscheduler.utils import setup_logger
from esportscheduler.utils.validation import normalize_key, validate_name_strict

logger = setup_logger(__name__)


class Team:
    """A team made of an ordered roster of players.

    Two teams are equal when their names match case-insensitively, which is
    how the league keys them. A team does not own its players' lifetime:
    dropping a team leaves its players free to join another one.
    """

    def __init__(self, name: str) -> None:
        self._name: str = validate_name_strict(name, "team name")
        self._players: List[Player] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        """Normalized name used for identity and lookups."""
        return normalize_key(self._name)

    # ========== Roster ==========

    def add_player(self, player: Player) -> None:
        """Add a player to the roster and point the player at this team.

        Adding a player already on this roster does nothing.

        Args:
            player: Player to add

        Raises:
            InvalidArgumentException: If player is None
            PlayerAlreadyOnTeamException: If the player belongs to another team
        """
        if player is None:
            raise InvalidArgumentException(f"Cannot add a missing player to {self._name}")

        if self._holds(player):
            return

        if player.team is not None:
            logger.warning(
                f"Rejected {player.alias}: already on {player.team.name}, not {self._name}"
            )
            raise PlayerAlreadyOnTeamException(
                f"Player {player.alias} already belongs to team {player.team.name}"
            )

        self._players.append(player)
        player._set_team(self)
        logger.info(f"Added player {player.alias} to {self._name}")

    def remove_player(self, player: Player) -> bool:
        """Remove a player from the roster and clear its team reference.

        Returns:
            True if removed, False if the player was not on this roster
        """
        if player is None or not self._holds(player):
            return False

        self._players = [p for p in self._players if p is not player]
        player._set_team(None)
        logger.info(f"Removed player {player.alias} from {self._name}")
        return True

    def list_players(self) -> Tuple[Player, ...]:
        """Snapshot of the roster in joining order."""
        return tuple(self._players)

    def find_player(self, alias: str) -> Optional[Player]:
        """Find a rostered player by alias, ignoring case and padding."""
        if not alias or not alias.strip():
            return None
        wanted = normalize_key(alias)
        for player in self._players:
            if normalize_key(player.alias) == wanted:
                return player
        return None

    def _holds(self, player: Player) -> bool:
        return any(p is player for p in self._players)

    # ========== Dunder ==========

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, player: object) -> bool:
        return any(p is player for p in self._players)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Team):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Team(name={self._name!r}, players={len(self._players)})"

    def __str__(self) -> str:
        return self._name
