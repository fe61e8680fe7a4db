import pytest

from socialdoubles.controllers.tournament import ResultRecorder, StatisticsLedger
from socialdoubles.exceptions import InvalidInputException, InvalidScoreException
from socialdoubles.models import Match, RoundData, Team


@pytest.fixture
def ledger():
    return StatisticsLedger(range(6))


@pytest.fixture
def recorder(ledger):
    return ResultRecorder(ledger)


@pytest.fixture
def round_data():
    return RoundData(
        index=0,
        matches=(Match(Team(0, 1), Team(2, 3)),),
        paused=(4,),
        inactive=(5,),
    )


def test_commit_round_updates_ledger(recorder, ledger, round_data):
    rounds = []
    index = recorder.commit_round(round_data, rounds)

    assert index == 0
    assert rounds == [round_data]
    for player in (0, 1, 2, 3):
        assert ledger.match_count(player) == 1
        assert ledger.pause_count(player) == 0
    assert ledger.partner_count(0, 1) == ledger.partner_count(1, 0) == 1
    assert ledger.partner_count(2, 3) == 1
    assert dict(ledger.stats(0).opponents) == {2: 1, 3: 1}
    assert dict(ledger.stats(3).opponents) == {0: 1, 1: 1}
    assert ledger.pause_count(4) == 1
    assert ledger.stats(5).to_dict() == StatisticsLedger([5]).stats(5).to_dict()


def test_commit_round_index_follows_sequence(recorder, round_data):
    rounds = [round_data]
    second = RoundData(index=1, matches=round_data.matches)
    assert recorder.commit_round(second, rounds) == 1


def test_scores_applied_from_each_team_view(recorder, ledger, round_data):
    recorder.commit_round(round_data, [])
    accepted = recorder.record_round_scores(round_data, [[11, 5]])

    assert accepted == ((11, 5),)
    for player in (0, 1):
        stats = ledger.stats(player)
        assert (stats.wins, stats.losses, stats.plus, stats.minus) == (1, 0, 11, 5)
    for player in (2, 3):
        stats = ledger.stats(player)
        assert (stats.wins, stats.losses, stats.plus, stats.minus) == (0, 1, 5, 11)


def test_draw(recorder, ledger, round_data):
    recorder.record_round_scores(round_data, [(7, 7)])
    assert all(ledger.stats(p).draws == 1 for p in (0, 1, 2, 3))


def test_resubmission_replaces_previous(recorder, ledger, round_data):
    first = recorder.record_round_scores(round_data, [(11, 5)])
    recorder.record_round_scores(round_data, [(3, 11)], previous=first)

    stats = ledger.stats(0)
    assert (stats.wins, stats.losses, stats.draws) == (0, 1, 0)
    assert (stats.plus, stats.minus) == (3, 11)
    stats = ledger.stats(2)
    assert (stats.wins, stats.losses) == (1, 0)
    assert (stats.plus, stats.minus) == (11, 3)


@pytest.mark.parametrize(
    "scores",
    [
        [],
        [(11, 5), (11, 2)],
        [(11, -1)],
        [(11,)],
        [(11, 5.5)],
        [(True, 3)],
        "11-5",
    ],
)
def test_invalid_scores_leave_ledger_untouched(recorder, ledger, round_data, scores):
    before = [s.to_dict() for s in ledger.all_stats()]

    with pytest.raises(InvalidScoreException):
        recorder.record_round_scores(round_data, scores)

    assert [s.to_dict() for s in ledger.all_stats()] == before


def test_invalid_score_is_invalid_input(recorder, round_data):
    with pytest.raises(InvalidInputException):
        recorder.record_round_scores(round_data, [])
