import threading
from dataclasses import FrozenInstanceError

import pytest

from socialdoubles.exceptions import (
    InvalidInputException,
    InvalidMatchCountException,
    InvalidScoreException,
    NoMatchingFoundException,
    PlayerNotFoundException,
    RoundNotFoundException,
)
from socialdoubles.models import RoundInfo, TournamentConfig
from socialdoubles.tournament import Tournament

TEN_PLAYER_SCORES = [
    [[11, 3], [8, 11]],
    [[11, 7], [11, 2]],
    [[8, 8], [1, 11]],
    [[11, 0], [6, 6]],
    [[11, 9], [11, 4]],
]


def _snapshot(tournament):
    return [s.to_dict() for s in tournament.all_stats()]


def _play_ten_player_rounds(tournament):
    for scores in TEN_PLAYER_SCORES:
        index = tournament.create_round(2)
        tournament.submit_scores(index, scores)


def _check_ten_player_outcome(tournament):
    for stats in tournament.all_stats():
        assert stats.matches == 4
        assert stats.pauses == 1
        assert sum(stats.partners.values()) == 4
        assert sum(stats.opponents.values()) == 8

    all_stats = tournament.all_stats()
    total_points = sum(a + b for scores in TEN_PLAYER_SCORES for a, b in scores)
    assert sum(s.plus for s in all_stats) == sum(s.minus for s in all_stats)
    assert sum(s.plus for s in all_stats) == 2 * total_points == 300
    assert sum(s.wins + s.losses for s in all_stats) == 4 * 8
    assert sum(s.draws for s in all_stats) == 4 * 2


def test_ten_player_rotation(make_tournament):
    tournament = make_tournament(10)
    _play_ten_player_rounds(tournament)

    assert [r.paused for r in tournament.rounds] == [
        (8, 9),
        (6, 7),
        (4, 5),
        (2, 3),
        (0, 1),
    ]
    _check_ten_player_outcome(tournament)


def test_ten_player_rotation_with_cp_sat():
    tournament = Tournament([f"P{i}" for i in range(10)])
    _play_ten_player_rounds(tournament)
    _check_ten_player_outcome(tournament)


def test_create_round_uses_configured_match_count(make_tournament):
    tournament = make_tournament(12, config=TournamentConfig(matches_per_round=3))
    index = tournament.create_round()

    assert index == 0
    assert tournament.get_round(0).match_count == 3
    assert tournament.get_round(0).paused == ()


def test_round_composition_conserves_roster(make_tournament):
    tournament = make_tournament(11)
    tournament.set_active(3, False)

    for _ in range(4):
        round_data = tournament.get_round(tournament.create_round(2))
        everyone = round_data.competing + round_data.paused + round_data.inactive
        assert sorted(everyone) == list(range(11))
        assert len(round_data.competing) % 4 == 0
        assert round_data.inactive == (3,)

    stats = tournament.get_stats(3)
    assert (stats.matches, stats.pauses) == (0, 0)


def test_partner_and_opponent_totals_grow_per_round(make_tournament):
    tournament = make_tournament(10)

    for _ in range(3):
        before = {s.player_id: s for s in tournament.all_stats()}
        round_data = tournament.get_round(tournament.create_round(2))
        for player_id in round_data.competing:
            old, new = before[player_id], tournament.get_stats(player_id)
            assert new.matches == old.matches + 1
            assert sum(new.partners.values()) == sum(old.partners.values()) + 1
            assert sum(new.opponents.values()) == sum(old.opponents.values()) + 2
        for player_id in round_data.paused:
            pauses = tournament.get_stats(player_id).pauses
            assert pauses == before[player_id].pauses + 1


@pytest.mark.parametrize("player_count, rounds", [(4, 3), (8, 4)])
def test_no_repeat_partner_while_new_ones_remain(make_tournament, player_count, rounds):
    tournament = make_tournament(player_count)
    for _ in range(rounds):
        tournament.create_round(player_count // 4)

    for stats in tournament.all_stats():
        assert max(stats.partners.values()) == 1
        assert len(stats.partners) == rounds


def test_get_round_is_repeatable(make_tournament):
    tournament = make_tournament(8)
    tournament.create_round(2)

    first = tournament.get_round(0)
    assert tournament.get_round(0) == first
    assert tournament.get_round(0).to_dict() == first.to_dict()
    assert tournament.rounds == (first,)


@pytest.mark.parametrize("index", [1, -1, "0", None])
def test_unknown_round(make_tournament, index):
    tournament = make_tournament(8)
    tournament.create_round(2)

    with pytest.raises(RoundNotFoundException):
        tournament.get_round(index)
    with pytest.raises(RoundNotFoundException):
        tournament.get_scores(index)
    with pytest.raises(RoundNotFoundException):
        tournament.submit_scores(index, [(11, 0), (11, 0)])


@pytest.mark.parametrize("match_count", [0, -2, 1.5, "2", True])
def test_invalid_match_count(make_tournament, match_count):
    tournament = make_tournament(8)

    with pytest.raises(InvalidMatchCountException):
        tournament.create_round(match_count)
    assert tournament.round_count == 0


def test_failed_construction_records_nothing(empty_solver):
    tournament = Tournament([f"P{i}" for i in range(8)], solver=empty_solver)
    before = _snapshot(tournament)

    with pytest.raises(NoMatchingFoundException):
        tournament.create_round(2)

    assert tournament.round_count == 0
    assert _snapshot(tournament) == before


def test_scores_pending_until_submitted(make_tournament):
    tournament = make_tournament(8)
    assert tournament.has_all_scores_submitted

    tournament.create_round(2)
    assert tournament.get_scores(0) is None
    assert not tournament.has_all_scores_submitted

    tournament.submit_scores(0, [[11, 4], [9, 11]])
    assert tournament.get_scores(0) == ((11, 4), (9, 11))
    assert tournament.has_all_scores_submitted


def test_rejected_scores_change_nothing(make_tournament):
    tournament = make_tournament(8)
    tournament.create_round(2)
    before = _snapshot(tournament)

    with pytest.raises(InvalidScoreException):
        tournament.submit_scores(0, [[11, 4]])
    with pytest.raises(InvalidInputException):
        tournament.submit_scores(0, [[11, 4], [-1, 11]])

    assert _snapshot(tournament) == before
    assert tournament.get_scores(0) is None


def test_resubmitted_scores_replace_earlier_ones(make_tournament):
    first = make_tournament(8)
    first.create_round(2)
    first.submit_scores(0, [[11, 4], [9, 11]])
    first.submit_scores(0, [[2, 11], [11, 11]])

    second = make_tournament(8)
    second.create_round(2)
    second.submit_scores(0, [[2, 11], [11, 11]])

    assert first.get_scores(0) == ((2, 11), (11, 11))
    assert _snapshot(first) == _snapshot(second)


def test_fewer_than_four_active_players(make_tournament):
    tournament = make_tournament(3)
    round_data = tournament.get_round(tournament.create_round(1))

    assert round_data.matches == ()
    assert round_data.paused == (0, 1, 2)
    tournament.submit_scores(0, [])
    assert tournament.get_scores(0) == ()


def test_next_round_info(make_tournament):
    tournament = make_tournament(10)
    assert tournament.get_next_round_info() == RoundInfo(
        match_count=2,
        active_player_count=10,
        competing_player_count=8,
        paused_player_count=2,
        inactive_player_count=0,
    )

    tournament.set_active(0, False)
    info = tournament.get_next_round_info(3)
    assert info.match_count == 2
    assert info.paused_player_count == 1
    assert info.inactive_player_count == 1
    assert tournament.round_count == 0


def test_roster_management(make_tournament):
    tournament = make_tournament(4)
    player = tournament.add_player("Newcomer")

    assert player.id == 4
    assert tournament.players[4].name == "Newcomer"
    assert tournament.get_stats(4).matches == 0

    with pytest.raises(InvalidInputException):
        tournament.add_player("Newcomer")
    with pytest.raises(InvalidInputException):
        tournament.add_player("   ")
    with pytest.raises(PlayerNotFoundException):
        tournament.set_active(17, False)
    with pytest.raises(PlayerNotFoundException):
        tournament.get_stats(-1)


def test_player_added_mid_tournament_is_preferred(make_tournament):
    tournament = make_tournament(8)
    tournament.create_round(2)
    tournament.add_player("Late")

    round_data = tournament.get_round(tournament.create_round(1))
    assert 8 in round_data.competing


def test_standings_follow_results(make_tournament):
    tournament = make_tournament(4)
    assert tournament.standings() == []

    round_data = tournament.get_round(tournament.create_round(1))
    tournament.submit_scores(0, [[11, 6]])

    standings = tournament.standings()
    winners = set(round_data.matches[0].team_a.players)
    assert [s.rank for s in standings] == [1, 1, 3, 3]
    assert {s.player.id for s in standings[:2]} == winners


def test_roster_entries_cannot_be_mutated(make_tournament):
    tournament = make_tournament(8)

    with pytest.raises(FrozenInstanceError):
        tournament.players[0].id = 5
    with pytest.raises(FrozenInstanceError):
        tournament.get_player(1).active = False

    round_data = tournament.get_round(tournament.create_round(2))
    assert sorted(round_data.competing) == list(range(8))
    assert all(s.matches == 1 for s in tournament.all_stats())


def test_set_active_replaces_roster_entry(make_tournament):
    tournament = make_tournament(4)
    before = tournament.players[0]

    tournament.set_active(0, False)

    assert tournament.players[0].active is False
    assert tournament.players[0].name == before.name
    assert before.active is True


def test_concurrent_duplicate_names_admit_one_player(make_tournament):
    tournament = make_tournament(4)
    barrier = threading.Barrier(8)
    added, rejected = [], []

    def add():
        barrier.wait()
        try:
            added.append(tournament.add_player("Twin"))
        except InvalidInputException:
            rejected.append(True)

    threads = [threading.Thread(target=add) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(added) == 1
    assert len(rejected) == 7
    assert [p.name for p in tournament.players].count("Twin") == 1
    assert len(tournament.all_stats()) == 5


@pytest.mark.parametrize("read", ["all_stats", "standings", "get_stats"])
def test_readers_wait_for_running_operation(make_tournament, read):
    tournament = make_tournament(8)
    tournament.create_round(2)
    results = []
    call = getattr(tournament, read)
    args = (0,) if read == "get_stats" else ()

    with tournament._lock:
        reader = threading.Thread(target=lambda: results.append(call(*args)))
        reader.start()
        reader.join(timeout=0.2)
        assert reader.is_alive()
        assert results == []

    reader.join(timeout=5)
    assert not reader.is_alive()
    assert len(results) == 1


def test_stats_snapshots_stay_balanced_during_submissions(make_tournament):
    tournament = make_tournament(8)
    tournament.create_round(2)

    def submit():
        for i in range(200):
            tournament.submit_scores(0, [[11, i % 11], [i % 11, 11]])

    writer = threading.Thread(target=submit)
    writer.start()
    while writer.is_alive():
        snapshot = tournament.all_stats()
        assert sum(s.plus for s in snapshot) == sum(s.minus for s in snapshot)
    writer.join()
