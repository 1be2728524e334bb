from datetime import date

import pytest

from esportscheduler import (
    InvalidArgumentException,
    InvalidStateException,
    LeagueConfig,
    LeagueController,
    NotFoundException,
)
from esportscheduler.exceptions import (
    DuplicateNameException,
    GameNotFoundException,
    InvalidDateException,
    InvalidRankingException,
    MatchNotFoundException,
    PlayerAlreadyOnTeamException,
    PlayerNotFoundException,
    TeamNotFoundException,
    TournamentNotFoundException,
)


@pytest.mark.parametrize(
    "first, second",
    [("Fox", "fox "), ("Fox", "FOX"), ("  Fox", "fOx\t"), ("Red Team", " red team ")],
)
def test_team_names_are_unique_ignoring_case(first, second):
    league = LeagueController()
    league.create_team(first)

    with pytest.raises(InvalidArgumentException, match="already exists"):
        league.create_team(second)
    assert len(league.list_teams()) == 1


def test_team_name_required():
    league = LeagueController()
    with pytest.raises(InvalidArgumentException):
        league.create_team("  ")


def test_create_game_is_idempotent():
    league = LeagueController()
    strategy = league.create_category("Strategy")
    moba = league.create_category("MOBA")

    chess = league.create_game("Chess", strategy)
    again = league.create_game(" chess", moba)

    assert again is chess
    assert again.category is strategy
    assert league.list_games() == (chess,)


def test_create_game_requires_category():
    league = LeagueController()
    with pytest.raises(InvalidArgumentException):
        league.create_game("Chess", None)


def test_create_tournament_unknown_game():
    league = LeagueController()
    with pytest.raises(GameNotFoundException):
        league.create_tournament("Cup", "FIA", "2025-10-01", "Chess")


def test_create_tournament_duplicate_name(league):
    with pytest.raises(DuplicateNameException):
        league.create_tournament(" CUP", "Other", "2025-11-01", "chess")
    assert len(league.list_tournaments()) == 1


def test_create_tournament_parses_start_date(league):
    assert league.get_tournament("cup").start_date == date(2025, 10, 1)


def test_lookups_raise_not_found(league):
    with pytest.raises(TeamNotFoundException):
        league.get_team("Ghosts")
    with pytest.raises(TournamentNotFoundException):
        league.get_tournament("Open")
    with pytest.raises(GameNotFoundException):
        league.get_game("Go")


def test_lookups_normalize_names(league):
    assert league.get_team("  FOX ") is league.get_team("fox")
    assert league.get_game("CHESS").name == "Chess"


def test_scenario_schedule_match(league):
    ana = league.create_referee("Ana", "Lopez")

    match = league.schedule_match("Cup", "2025-10-02", "Fox", "Raptors", ana)

    assert match.team1.name == "Fox"
    assert match.team2.name == "Raptors"
    assert match.game.name == "Chess"
    assert match.referee.full_name == "Ana Lopez"
    assert len(league.list_matches("Cup")) == 1
    assert len(league.referee_history(ana)) == 1


def test_scenario_unenrolled_team(league):
    league.create_team("Ghosts")
    ana = league.create_referee("Ana", "Lopez")

    with pytest.raises(InvalidStateException):
        league.schedule_match("Cup", "2025-10-02", "Fox", "Ghosts", ana)
    assert len(league.list_matches("Cup")) == 0


def test_schedule_match_same_name_twice(league):
    ana = league.create_referee("Ana", "Lopez")
    with pytest.raises(InvalidArgumentException):
        league.schedule_match("Cup", "2025-10-02", "Fox", " fox", ana)


def test_schedule_match_unknown_team(league):
    ana = league.create_referee("Ana", "Lopez")
    with pytest.raises(NotFoundException):
        league.schedule_match("Cup", "2025-10-02", "Fox", "Nobody", ana)


def test_enroll_and_withdraw(league):
    league.create_team("Owls")

    assert league.enroll_team("cup", "owls") is True
    assert league.enroll_team("Cup", "Owls") is False
    assert [t.name for t in league.list_enrolled_teams("Cup")] == ["Fox", "Raptors", "Owls"]

    assert league.withdraw_team("Cup", "Owls") is True
    assert league.withdraw_team("Cup", "Owls") is False


def test_cancel_match(league):
    ana = league.create_referee("Ana", "Lopez")
    match = league.schedule_match("Cup", "2025-10-02", "Fox", "Raptors", ana)

    assert league.cancel_match("Cup", match.id) is True
    assert league.list_matches("Cup") == ()
    assert league.cancel_match("Cup", match.id) is False
    assert league.referee_history(ana) == (match,)


def test_reassign_referee(league):
    ana = league.create_referee("Ana", "Lopez")
    carlos = league.create_referee("Carlos", "Mena")
    match = league.schedule_match("Cup", "2025-10-02", "Fox", "Raptors", ana)

    assert league.reassign_referee("Cup", match.id, carlos) is match
    assert match.referee is carlos
    assert league.referee_history(carlos) == (match,)
    assert league.referee_history(ana) == (match,)


def test_reassign_referee_unknown_match(league):
    carlos = league.create_referee("Carlos", "Mena")
    with pytest.raises(MatchNotFoundException):
        league.reassign_referee("Cup", "Match-0", carlos)


def test_referee_history_requires_referee(league):
    with pytest.raises(InvalidArgumentException):
        league.referee_history(None)


def test_add_player_to_team(league):
    player = league.add_player_to_team("fox", "Ana Ruiz", "AnaX", 1800)

    assert player.team is league.get_team("Fox")
    assert league.list_roster("Fox") == (player,)


def test_add_player_unknown_team(league):
    with pytest.raises(TeamNotFoundException):
        league.add_player_to_team("Ghosts", "Ana Ruiz", "AnaX", 1800)


def test_add_player_ranking_bounds():
    league = LeagueController(LeagueConfig(ranking_min=0, ranking_max=3000))
    league.create_team("Fox")

    with pytest.raises(InvalidRankingException):
        league.add_player_to_team("Fox", "Ana Ruiz", "AnaX", 3500)
    assert league.list_roster("Fox") == ()


def test_add_player_duplicate_alias(league):
    league.add_player_to_team("Fox", "Ana Ruiz", "AnaX", 1800)
    with pytest.raises(DuplicateNameException):
        league.add_player_to_team("Fox", "Ana Other", "anax", 1200)
    assert len(league.list_roster("Fox")) == 1


def test_add_player_from_dict(league):
    player = league.add_player_to_team_from_dict(
        "Raptors", {"name": "Sofia Paz", "alias": "Sofi", "ranking": 1820}
    )
    assert player.ranking == 1820
    assert player.team.name == "Raptors"

    with pytest.raises(InvalidArgumentException, match="alias"):
        league.add_player_to_team_from_dict("Raptors", {"name": "No Alias"})


def test_remove_player_from_team(league):
    player = league.add_player_to_team("Fox", "Ana Ruiz", "AnaX", 1800)

    assert league.remove_player_from_team("Fox", "anax") is player
    assert player.team is None
    with pytest.raises(PlayerNotFoundException):
        league.remove_player_from_team("Fox", "AnaX")


def test_transfer_player(league):
    player = league.add_player_to_team("Fox", "Ana Ruiz", "AnaX", 1800)

    league.transfer_player("Fox", "Raptors", "AnaX")

    assert player.team is league.get_team("Raptors")
    assert league.list_roster("Fox") == ()
    assert league.list_roster("Raptors") == (player,)


def test_transfer_player_alias_clash_changes_nothing(league):
    player = league.add_player_to_team("Fox", "Ana Ruiz", "AnaX", 1800)
    league.add_player_to_team("Raptors", "Ana Other", "AnaX", 1500)

    with pytest.raises(DuplicateNameException):
        league.transfer_player("Fox", "Raptors", "AnaX")

    assert player.team is league.get_team("Fox")
    assert league.list_roster("Fox") == (player,)
    assert len(league.list_roster("Raptors")) == 1


def test_player_cannot_join_second_team_directly(league):
    player = league.add_player_to_team("Fox", "Ana Ruiz", "AnaX", 1800)
    with pytest.raises(PlayerAlreadyOnTeamException):
        league.get_team("Raptors").add_player(player)
    assert player.team is league.get_team("Fox")


def test_list_views_are_snapshots(league):
    teams = league.list_teams()
    league.create_team("Owls")

    assert len(teams) == 2
    assert len(league.list_teams()) == 3
    assert isinstance(teams, tuple)


def test_summary(league):
    ana = league.create_referee("Ana", "Lopez")
    league.add_player_to_team("Fox", "Ana Ruiz", "AnaX", 1800)
    league.schedule_match("Cup", "2025-10-02", "Fox", "Raptors", ana)

    summary = league.summary()

    assert summary["games"] == [{"name": "Chess", "category": "Strategy"}]
    assert summary["teams"] == [
        {"name": "Fox", "players": 1},
        {"name": "Raptors", "players": 0},
    ]
    assert summary["tournaments"][0]["teams"] == 2
    assert summary["tournaments"][0]["matches"] == 1
    assert summary["tournaments"][0]["start_date"] == "2025-10-01"


@pytest.mark.parametrize("start", ["October", "2025-10", "7"])
def test_create_tournament_rejects_partial_start_date(league, start):
    with pytest.raises(InvalidDateException):
        league.create_tournament("Open", "FIA", start, "Chess")
    assert len(league.list_tournaments()) == 1


def test_create_tournament_unknown_game_wins_over_duplicate_name(league):
    with pytest.raises(GameNotFoundException):
        league.create_tournament("Cup", "FIA", "2025-10-01", "Go")
    assert len(league.list_tournaments()) == 1
