"""League controller - the flat API the console layer talks to.

This is the primary interface of the scheduler. It keeps the in-memory stores
of teams, tournaments and games (keyed by normalized name), resolves names to
entities and delegates to the entity controllers.
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

from typing import Any, Dict, Optional, Tuple

from esportscheduler.config import LeagueConfig
from esportscheduler.constants import DEFAULT_RANKING
from esportscheduler.exceptions import (
    DuplicateNameException,
    GameNotFoundException,
    InvalidArgumentException,
    MatchNotFoundException,
    PlayerNotFoundException,
    TeamNotFoundException,
    TournamentNotFoundException,
)
from esportscheduler.models import (
    Category,
    Game,
    Match,
    Player,
    PlayerFactory,
    Referee,
    Team,
    Tournament,
)
from esportscheduler.repository import NameKeyedStore
from esportscheduler.type_hints import DateLike, SummaryRows
from esportscheduler.utils import configure_logging, setup_logger
from esportscheduler.utils.validation import validate_date_strict, validate_name_strict

logger = setup_logger(__name__)


class LeagueController:
    """Orchestrates teams, games, tournaments, matches and referees.

    Error kinds raised by every operation:

    - ``InvalidArgumentException``: malformed input (blank names, equal teams)
    - ``InvalidStateException``: a business rule rejects the operation
    - ``NotFoundException``: a name denotes no known entity

    Referees are not stored; the caller keeps the instances it creates.
    Not safe for concurrent use.
    """

    def __init__(
        self, config: Optional[LeagueConfig] = None, configure_logs: bool = False
    ) -> None:
        """Initialize an empty league.

        Args:
            config: League configuration, defaults to :class:`LeagueConfig`
            configure_logs: Attach a stream handler at ``config.log_level``
        """
        self.config = config or LeagueConfig()
        if configure_logs:
            configure_logging(self.config.log_level)

        self.player_factory = PlayerFactory(self.config)
        self.teams: NameKeyedStore[Team] = NameKeyedStore(
            "team", lambda team: team.name, TeamNotFoundException
        )
        self.tournaments: NameKeyedStore[Tournament] = NameKeyedStore(
            "tournament", lambda tournament: tournament.name, TournamentNotFoundException
        )
        self.games: NameKeyedStore[Game] = NameKeyedStore(
            "game", lambda game: game.name, GameNotFoundException
        )

    # ========== Creation ==========

    def create_category(self, name: str, description: Optional[str] = None) -> Category:
        """Create a category. Categories are not stored; games hold them."""
        return Category(name, description)

    def create_game(self, name: str, category: Category) -> Game:
        """Register a game, or return the existing one with that name.

        An existing game keeps its original category.

        Raises:
            InvalidNameException: If the name is blank
            InvalidArgumentException: If category is None
        """
        validate_name_strict(name, "game name")
        if category is None:
            raise InvalidArgumentException(f"Game '{name.strip()}' needs a category")

        existing = self.games.get(name)
        if existing is not None:
            logger.debug(f"Game {existing.name} already registered")
            return existing

        game = self.games.add(Game(name, category))
        logger.info(f"Registered game {game}")
        return game

    def create_team(self, name: str) -> Team:
        """Create a team with a unique name.

        Raises:
            InvalidNameException: If the name is blank
            DuplicateNameException: If a team already uses the name, ignoring case
        """
        team = Team(name)
        if team.name in self.teams:
            logger.warning(f"Rejected team {team.name!r}: name already used")
            raise DuplicateNameException(f"A team named '{team.name}' already exists")
        self.teams.add(team)
        logger.info(f"Created team {team.name}")
        return team

    def create_tournament(
        self,
        name: str,
        organizer: str,
        start_date: DateLike,
        game_name: str,
    ) -> Tournament:
        """Create a tournament on a registered game.

        Raises:
            InvalidArgumentException: If a field is blank or the date invalid
            GameNotFoundException: If the game is not registered
            DuplicateNameException: If a tournament already uses the name
        """
        validate_name_strict(name, "tournament name")
        validate_name_strict(organizer, "organizer")
        start = validate_date_strict(start_date)
        game = self.games.require(game_name)
        if name in self.tournaments:
            logger.warning(f"Rejected tournament {name!r}: name already used")
            raise DuplicateNameException(f"A tournament named '{name.strip()}' already exists")

        tournament = self.tournaments.add(Tournament(name, organizer, start, game))
        logger.info(f"Created tournament {tournament.name} on {game.name}")
        return tournament

    def create_referee(self, first_name: str, last_name: str) -> Referee:
        return Referee(first_name, last_name)

    # ========== Rosters ==========

    def add_player_to_team(
        self,
        team_name: str,
        name: str,
        alias: str,
        ranking: int = DEFAULT_RANKING,
    ) -> Player:
        """Create a player and add it to a team's roster.

        Raises:
            TeamNotFoundException: If the team does not exist
            InvalidArgumentException: If player data is invalid or the alias
                is already used on that roster
        """
        team = self.teams.require(team_name)
        player = self.player_factory.create_player(name, alias, ranking)
        self._check_alias_free(team, player.alias)
        team.add_player(player)
        return player

    def add_player_to_team_from_dict(self, team_name: str, data: Dict[str, Any]) -> Player:
        """Same as :meth:`add_player_to_team` with ``name``/``alias``/``ranking`` keys."""
        team = self.teams.require(team_name)
        player = self.player_factory.create_from_dict(data)
        self._check_alias_free(team, player.alias)
        team.add_player(player)
        return player

    def remove_player_from_team(self, team_name: str, alias: str) -> Player:
        """Remove a player, found by alias, from a team.

        Returns:
            The removed player, now without a team

        Raises:
            TeamNotFoundException: If the team does not exist
            PlayerNotFoundException: If no rostered player has that alias
        """
        team = self.teams.require(team_name)
        player = self._require_player(team, alias)
        team.remove_player(player)
        return player

    def transfer_player(self, from_team_name: str, to_team_name: str, alias: str) -> Player:
        """Move a player between teams through the roster controller.

        Everything is checked before the player leaves its current team.

        Raises:
            TeamNotFoundException: If either team does not exist
            PlayerNotFoundException: If the alias is not on the source roster
            DuplicateNameException: If the target roster already uses the alias
        """
        source = self.teams.require(from_team_name)
        target = self.teams.require(to_team_name)
        player = self._require_player(source, alias)
        if source == target:
            return player
        self._check_alias_free(target, player.alias)

        source.remove_player(player)
        target.add_player(player)
        logger.info(f"Transferred {player.alias} from {source.name} to {target.name}")
        return player

    def list_roster(self, team_name: str) -> Tuple[Player, ...]:
        return self.teams.require(team_name).list_players()

    # ========== Tournaments ==========

    def enroll_team(self, tournament_name: str, team_name: str) -> bool:
        """Enroll a team in a tournament.

        Returns:
            True if newly enrolled, False if it already was
        """
        tournament = self.tournaments.require(tournament_name)
        team = self.teams.require(team_name)
        return tournament.enroll(team)

    def withdraw_team(self, tournament_name: str, team_name: str) -> bool:
        """Withdraw a team from a tournament; its scheduled matches stay."""
        tournament = self.tournaments.require(tournament_name)
        team = self.teams.require(team_name)
        return tournament.withdraw(team)

    def schedule_match(
        self,
        tournament_name: str,
        match_date: DateLike,
        team1_name: str,
        team2_name: str,
        referee: Referee,
    ) -> Match:
        """Schedule a match between two enrolled teams of a tournament.

        Raises:
            TournamentNotFoundException: If the tournament does not exist
            TeamNotFoundException: If either team does not exist
            InvalidArgumentException: If the date or referee is missing, or
                both names denote the same team
            TeamNotEnrolledException: If either team is not enrolled
        """
        tournament = self.tournaments.require(tournament_name)
        team1 = self.teams.require(team1_name)
        team2 = self.teams.require(team2_name)
        return tournament.schedule_match(match_date, team1, team2, referee)

    def cancel_match(self, tournament_name: str, match_id: str) -> bool:
        """Cancel a scheduled match.

        Returns:
            True if the match was removed, False if no such match was scheduled
        """
        tournament = self.tournaments.require(tournament_name)
        match = tournament.find_match(match_id)
        if match is None:
            return False
        return tournament.cancel_match(match)

    def reassign_referee(
        self, tournament_name: str, match_id: str, referee: Referee
    ) -> Match:
        """Hand a scheduled match to another referee.

        Raises:
            TournamentNotFoundException: If the tournament does not exist
            MatchNotFoundException: If the match is not scheduled there
            InvalidArgumentException: If referee is None
        """
        tournament = self.tournaments.require(tournament_name)
        match = tournament.find_match(match_id)
        if match is None:
            raise MatchNotFoundException(
                f"No match {match_id!r} in tournament {tournament.name}"
            )
        match.reassign_referee(referee)
        return match

    def list_enrolled_teams(self, tournament_name: str) -> Tuple[Team, ...]:
        return self.tournaments.require(tournament_name).list_enrolled_teams()

    def list_matches(self, tournament_name: str) -> Tuple[Match, ...]:
        return self.tournaments.require(tournament_name).list_matches()

    def referee_history(self, referee: Referee) -> Tuple[Match, ...]:
        if referee is None:
            raise InvalidArgumentException("A referee is required")
        return referee.history()

    # ========== Lookups ==========

    def get_team(self, name: str) -> Team:
        return self.teams.require(name)

    def get_tournament(self, name: str) -> Tournament:
        return self.tournaments.require(name)

    def get_game(self, name: str) -> Game:
        return self.games.require(name)

    def list_teams(self) -> Tuple[Team, ...]:
        return self.teams.values()

    def list_tournaments(self) -> Tuple[Tournament, ...]:
        return self.tournaments.values()

    def list_games(self) -> Tuple[Game, ...]:
        return self.games.values()

    def summary(self) -> Dict[str, SummaryRows]:
        """Overview of the league as plain rows, ready for a table renderer."""
        return {
            "games": [
                {"name": game.name, "category": str(game.category)}
                for game in self.games.values()
            ],
            "teams": [
                {"name": team.name, "players": len(team)}
                for team in self.teams.values()
            ],
            "tournaments": [
                tournament.to_summary(self.config.date_format)
                for tournament in self.tournaments.values()
            ],
        }

    # ========== Helpers ==========

    def _require_player(self, team: Team, alias: str) -> Player:
        player = team.find_player(alias)
        if player is None:
            raise PlayerNotFoundException(f"No player '{alias}' on team {team.name}")
        return player

    def _check_alias_free(self, team: Team, alias: str) -> None:
        if team.find_player(alias) is not None:
            raise DuplicateNameException(
                f"Team {team.name} already has a player called '{alias}'"
            )
