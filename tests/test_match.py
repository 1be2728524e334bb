from datetime import date, datetime

import pytest

from esportscheduler import InvalidArgumentException, Match, Referee, Team
from esportscheduler.exceptions import InvalidNameException, SameTeamException

MATCH_DAY = date(2025, 10, 2)


def test_create_registers_in_referee_history(cup, fox, raptors, ana):
    match = Match.create(cup, MATCH_DAY, fox, raptors, ana)

    assert match.referee is ana
    assert match.game is cup.game
    assert ana.history() == (match,)
    # creating a match does not schedule it
    assert cup.list_matches() == ()


def test_create_accepts_datetime(cup, fox, raptors, ana):
    match = Match.create(cup, datetime(2025, 10, 2, 18, 30), fox, raptors, ana)
    assert match.date == MATCH_DAY


@pytest.mark.parametrize("missing", ["tournament", "match_date", "team1", "team2", "referee"])
def test_create_rejects_missing_argument(cup, fox, raptors, ana, missing):
    kwargs = {
        "tournament": cup,
        "match_date": MATCH_DAY,
        "team1": fox,
        "team2": raptors,
        "referee": ana,
    }
    kwargs[missing] = None

    with pytest.raises(InvalidArgumentException):
        Match.create(**kwargs)
    assert ana.history() == ()


def test_create_rejects_same_team(cup, fox, ana):
    with pytest.raises(SameTeamException):
        Match.create(cup, MATCH_DAY, fox, Team("FOX "), ana)
    assert ana.history() == ()


def test_match_ids_are_unique(cup, fox, raptors, ana):
    first = Match.create(cup, MATCH_DAY, fox, raptors, ana)
    second = Match.create(cup, MATCH_DAY, fox, raptors, ana)
    assert first.id != second.id
    assert first.id.startswith("Match-")


def test_reassign_referee_appends_to_new_history(cup, fox, raptors, ana):
    carlos = Referee("Carlos", "Mena")
    match = Match.create(cup, MATCH_DAY, fox, raptors, ana)

    match.reassign_referee(carlos)

    assert match.referee is carlos
    assert carlos.history() == (match,)
    # history is append-only: the previous referee keeps the entry
    assert ana.history() == (match,)


def test_reassign_to_current_referee_is_noop(cup, fox, raptors, ana):
    match = Match.create(cup, MATCH_DAY, fox, raptors, ana)
    match.reassign_referee(ana)
    assert ana.history() == (match,)


def test_reassign_none_keeps_referee(cup, fox, raptors, ana):
    match = Match.create(cup, MATCH_DAY, fox, raptors, ana)

    with pytest.raises(InvalidArgumentException):
        match.reassign_referee(None)
    assert match.referee is ana


def test_match_fields_are_read_only(cup, fox, raptors, ana):
    match = Match.create(cup, MATCH_DAY, fox, raptors, ana)
    for field in ("date", "team1", "team2", "game", "referee", "tournament", "id"):
        with pytest.raises(AttributeError):
            setattr(match, field, None)


def test_involves(cup, fox, raptors, ana):
    match = Match.create(cup, MATCH_DAY, fox, raptors, ana)
    assert match.involves(Team("fox"))
    assert not match.involves(Team("Owls"))
    assert not match.involves(None)


def test_match_summary(cup, fox, raptors, ana):
    match = Match.create(cup, MATCH_DAY, fox, raptors, ana)
    assert match.to_summary("%d/%m/%Y") == {
        "id": match.id,
        "date": "02/10/2025",
        "team1": "Fox",
        "team2": "Raptors",
        "game": "Chess",
        "referee": "Ana Lopez",
    }


def test_referee_history_in_assignment_order(cup, fox, raptors, ana):
    matches = [Match.create(cup, MATCH_DAY, fox, raptors, ana) for _ in range(3)]
    assert ana.history() == tuple(matches)
    assert ana.supervised_count == 3


def test_referee_history_is_a_snapshot(cup, fox, raptors, ana):
    view = ana.history()
    Match.create(cup, MATCH_DAY, fox, raptors, ana)
    assert view == ()


def test_referee_requires_names():
    with pytest.raises(InvalidNameException):
        Referee("", "Lopez")
    with pytest.raises(InvalidNameException):
        Referee("Ana", None)


def test_referee_assign_none(ana):
    with pytest.raises(InvalidArgumentException):
        ana.assign(None)


def test_referee_full_name(ana):
    assert ana.full_name == "Ana Lopez"
    assert str(ana) == "Ana Lopez"
