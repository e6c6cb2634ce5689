import pytest

from chesspairing import Tournament
from chesspairing.exceptions import InvalidSortKeyException


def _played_tournament():
    tournament = Tournament(
        players=[("Dana", 1700), ("bob", 1900), ("Alice", 1800), ("Carl", 1900), ("Eve", 1500)]
    )
    tournament.generate_pairings("swiss")
    # round 1 by rating: bob-Carl, Alice-Dana, bye Eve
    tournament.record_round_result(1, "bob", "Carl", "0.5-0.5")
    tournament.record_round_result(1, "Alice", "Dana", "0-1")
    tournament.record_round_result(1, "Eve", None, None)
    return tournament


def test_score_order_breaks_ties_by_rating():
    standings = _played_tournament().standings()

    assert [s.player_id for s in standings] == ["Dana", "Eve", "bob", "Carl", "Alice"]
    assert [s.score for s in standings] == [1, 1, 0.5, 0.5, 0]


def test_ranks_are_one_to_n_and_cover_every_player():
    tournament = _played_tournament()

    for sort_by in ("score", "rating", "name"):
        standings = tournament.standings(sort_by)
        assert [s.rank for s in standings] == list(range(1, len(tournament.players) + 1))
        assert sorted(s.player_id for s in standings) == sorted(
            p.id for p in tournament.players
        )


def test_rating_order_is_stable():
    standings = _played_tournament().standings("rating")

    assert [s.player_id for s in standings] == ["bob", "Carl", "Alice", "Dana", "Eve"]


def test_name_order_is_by_code_point():
    standings = _played_tournament().standings("name")

    ids = [s.player_id for s in standings]
    assert ids == ["Alice", "Carl", "Dana", "Eve", "bob"]
    assert ids == sorted(ids)


def test_entries_are_snapshots():
    tournament = _played_tournament()
    entry = tournament.standings()[0]

    with pytest.raises(AttributeError):
        entry.score = 10

    tournament.generate_pairings("swiss")
    tournament.record_round_result(2, "Dana", "Eve", "0-1")
    assert entry.score == 1
    assert entry.opponents == ("Alice",)


def test_entry_fields():
    entry = next(s for s in _played_tournament().standings() if s.player_id == "Eve")

    assert entry.wins == 1
    assert entry.games_played == 1
    assert entry.has_received_bye
    assert not entry.is_eliminated
    assert entry.last_result == "bye"
    assert entry.to_dict()["id"] == "Eve"


def test_unknown_sort_key():
    with pytest.raises(InvalidSortKeyException):
        _played_tournament().standings("buchholz")


def test_empty_tournament_has_no_standings():
    assert Tournament().standings() == []
