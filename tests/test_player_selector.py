import pytest

from socialdoubles.controllers.pairing import competitor_count, select_players
from socialdoubles.controllers.tournament import StatisticsLedger
from socialdoubles.models import Player


def _roster(count, inactive=()):
    return [Player(id=i, name=f"P{i}", active=i not in inactive) for i in range(count)]


@pytest.mark.parametrize(
    "match_count, active_count, expected",
    [(2, 10, 8), (3, 10, 8), (2, 8, 8), (1, 3, 0), (1, 0, 0), (5, 13, 12)],
)
def test_competitor_count(match_count, active_count, expected):
    assert competitor_count(match_count, active_count) == expected


def test_fresh_roster_prefers_roster_order():
    ledger = StatisticsLedger(range(6))
    selection = select_players(_roster(6), 1, ledger.view())

    assert selection.competing == (0, 1, 2, 3)
    assert selection.paused == (4, 5)
    assert selection.inactive == ()


def test_fewest_matches_play_first():
    ledger = StatisticsLedger(range(6))
    for player, partner in [(0, 1), (1, 0), (2, 3), (3, 2)]:
        ledger.record_match_participation(player, partner)

    selection = select_players(_roster(6), 1, ledger.view())

    assert selection.competing == (4, 5, 0, 1)
    assert selection.paused == (2, 3)


def test_pause_count_is_not_a_tie_breaker():
    ledger = StatisticsLedger(range(5))
    ledger.record_pause(0)
    ledger.record_pause(0)

    selection = select_players(_roster(5), 1, ledger.view())

    assert selection.competing == (0, 1, 2, 3)
    assert selection.paused == (4,)


def test_inactive_players_never_compete():
    ledger = StatisticsLedger(range(6))
    selection = select_players(_roster(6, inactive={0, 3}), 1, ledger.view())

    assert selection.inactive == (0, 3)
    assert selection.competing == (1, 2, 4, 5)
    assert selection.paused == ()


def test_every_active_player_needed_means_no_pause():
    ledger = StatisticsLedger(range(8))
    ledger.record_match_participation(7, 6)

    selection = select_players(_roster(8), 2, ledger.view())

    assert selection.competing == tuple(range(8))
    assert selection.paused == ()


def test_too_few_players_reduces_matches():
    ledger = StatisticsLedger(range(6))
    selection = select_players(_roster(6), 2, ledger.view())

    assert len(selection.competing) == 4
    assert selection.paused == (4, 5)


def test_fewer_than_four_active_gives_empty_round():
    ledger = StatisticsLedger(range(3))
    selection = select_players(_roster(3), 1, ledger.view())

    assert selection.competing == ()
    assert selection.paused == (0, 1, 2)


def test_selection_partitions_roster():
    ledger = StatisticsLedger(range(11))
    roster = _roster(11, inactive={2, 9})
    selection = select_players(roster, 2, ledger.view())

    everyone = selection.competing + selection.paused + selection.inactive
    assert sorted(everyone) == list(range(11))
    assert len(set(everyone)) == 11
    assert len(selection.competing) % 4 == 0
