from datetime import date

import pytest

from esportscheduler import Category, Game, LeagueController, Referee, Team, Tournament


@pytest.fixture
def strategy():
    return Category("Strategy", "Turn-based and board games")


@pytest.fixture
def chess(strategy):
    return Game("Chess", strategy)


@pytest.fixture
def cup(chess):
    return Tournament("Cup", "FIA", date(2025, 10, 1), chess)


@pytest.fixture
def fox():
    return Team("Fox")


@pytest.fixture
def raptors():
    return Team("Raptors")


@pytest.fixture
def ana():
    return Referee("Ana", "Lopez")


@pytest.fixture
def league():
    """League with game Chess, tournament Cup and teams Fox and Raptors enrolled."""
    league = LeagueController()
    league.create_game("Chess", league.create_category("Strategy"))
    league.create_tournament("Cup", "FIA", "2025-10-01", "Chess")
    league.create_team("Fox")
    league.create_team("Raptors")
    league.enroll_team("Cup", "Fox")
    league.enroll_team("Cup", "Raptors")
    return league
