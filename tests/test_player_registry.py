import math

import pytest

from chesspairing import BareCandidate, RatedCandidate, Tournament
from chesspairing.constants import DEFAULT_RATING
from chesspairing.exceptions import InvalidPlayerDataException
from chesspairing.models.player import normalize_candidate, to_candidate


def test_bare_ids_get_default_rating():
    tournament = Tournament()

    assert tournament.register(["A", "B", "C"]) == 3
    assert [p.id for p in tournament.players] == ["A", "B", "C"]
    assert all(p.rating == DEFAULT_RATING for p in tournament.players)


def test_blank_and_duplicate_ids_are_dropped():
    tournament = Tournament()

    added = tournament.register(["Alice", "  ", "", ("Alice", 2000), " Bob "])

    assert added == 2
    assert [p.id for p in tournament.players] == ["Alice", "Bob"]
    # first registration wins
    assert tournament.get_player("Alice").rating == DEFAULT_RATING


def test_registering_again_only_counts_new_players():
    tournament = Tournament(players=["A", "B"])

    assert tournament.register(["B", "C"]) == 1
    assert len(tournament.players) == 3


def test_structured_candidates():
    tournament = Tournament()
    tournament.register(
        [
            RatedCandidate("Magnus", 2830),
            BareCandidate("Hikaru"),
            {"id": "Fabiano", "rating": 2800},
            {"id": "Ding"},
            ("Alireza", 2760.5),
        ]
    )

    ratings = {p.id: p.rating for p in tournament.players}
    assert ratings == {
        "Magnus": 2830,
        "Hikaru": DEFAULT_RATING,
        "Fabiano": 2800,
        "Ding": DEFAULT_RATING,
        "Alireza": 2760.5,
    }


@pytest.mark.parametrize(
    "rating", [-1, math.nan, math.inf, True, "1800", None, [1800]]
)
def test_invalid_ratings_fall_back_to_default(rating):
    assert normalize_candidate(RatedCandidate("X", rating)) == ("X", DEFAULT_RATING)


def test_zero_rating_is_kept():
    assert normalize_candidate(RatedCandidate("X", 0)) == ("X", 0)


def test_blank_candidate_normalizes_to_none():
    assert normalize_candidate(BareCandidate("   ")) is None


def test_unsupported_candidate_raises():
    with pytest.raises(InvalidPlayerDataException):
        to_candidate(42)


def test_new_players_start_with_zeroed_state():
    tournament = Tournament(players=[("A", 1900)])
    player = tournament.get_player("A")

    assert player.score == 0
    assert player.half_points == 0
    assert (player.wins, player.losses, player.draws) == (0, 0, 0)
    assert player.opponents == []
    assert not player.has_received_bye
    assert not player.is_eliminated
    assert player.last_result is None


def test_clear_removes_players_and_rounds():
    tournament = Tournament(players=["A", "B", "C"])
    tournament.generate_pairings("swiss")

    tournament.clear()

    assert tournament.players == []
    assert tournament.rounds == []
    assert tournament.current_round == 0
    assert tournament.active_players == []


def test_reset_keeps_players_and_ratings():
    tournament = Tournament(players=[("A", 2000), ("B", 1800), ("C", 1600)])
    tournament.generate_pairings("swiss")
    tournament.record_round_result(1, "A", "B", "1-0")
    tournament.record_round_result(1, "C", None, None)

    tournament.reset()

    assert [(p.id, p.rating) for p in tournament.players] == [
        ("A", 2000),
        ("B", 1800),
        ("C", 1600),
    ]
    for player in tournament.players:
        assert player.score == 0
        assert player.wins == 0
        assert player.opponents == []
        assert not player.has_received_bye
        assert player.last_result is None
    assert tournament.current_round == 0
    assert [p.id for p in tournament.active_players] == ["A", "B", "C"]
    assert tournament.eliminated_players == []


def test_list_and_tuple_pairs_are_rated_candidates():
    assert to_candidate(["X", 1600]) == RatedCandidate("X", 1600)
    assert to_candidate(("Y", 1700)) == RatedCandidate("Y", 1700)


def test_batch_with_unsupported_candidate_adds_nothing():
    tournament = Tournament(players=["A"])

    with pytest.raises(InvalidPlayerDataException):
        tournament.register(["B", ("C", 1800), None])

    assert [p.id for p in tournament.players] == ["A"]
