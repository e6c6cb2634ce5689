import dataclasses

import pytest

from chesspairing import Tournament
from chesspairing.exceptions import (
    InsufficientPlayersException,
    UnknownPairingSystemException,
)
from chesspairing.models.player import Player
from chesspairing.pairing import select_bye_player


def _pairs(pairings):
    return [(p.player1_id, p.player2_id) for p in pairings if not p.is_bye]


def _bye(pairings):
    byes = [p.player1_id for p in pairings if p.is_bye]
    return byes[0] if byes else None


def _four_players():
    return Tournament(
        players=[("P2000", 2000), ("P1800", 1800), ("P1600", 1600), ("P1400", 1400)]
    )


def test_first_round_pairs_by_rating():
    tournament = _four_players()

    pairings = tournament.generate_pairings("swiss")

    assert _pairs(pairings) == [("P2000", "P1800"), ("P1600", "P1400")]
    assert _bye(pairings) is None


def test_second_round_pairs_within_score_groups():
    tournament = _four_players()
    tournament.generate_pairings("swiss")
    assert tournament.record_round_result(1, "P2000", "P1800", "1-0")
    assert tournament.record_round_result(1, "P1600", "P1400", "1-0")

    pairings = tournament.generate_pairings("swiss")

    assert _pairs(pairings) == [("P2000", "P1600"), ("P1800", "P1400")]


def test_three_players_bye_and_unrecorded_round():
    tournament = Tournament(players=["A", "B", "C"])

    first = tournament.generate_pairings("swiss")

    assert _pairs(first) == [("A", "B")]
    assert _bye(first) == "C"
    assert first[-1].is_bye
    assert tournament.get_player("C").has_received_bye

    assert tournament.record_round_result(1, "C", None, None)
    assert tournament.get_player("C").score == 1
    assert tournament.get_player("C").wins == 1

    # round 1's game is still unreported; Swiss does not wait for it
    second = tournament.generate_pairings("swiss")

    assert tournament.current_round == 2
    assert _bye(second) == "B"
    assert _pairs(second) == [("A", "C")]


def test_odd_score_group_floats_lowest_member_down():
    tournament = Tournament(
        players=[("A", 2000), ("B", 1900), ("C", 1800), ("D", 1700), ("E", 1600), ("F", 1500)]
    )
    tournament.generate_pairings("swiss")
    tournament.record_round_result(1, "A", "B", "1-0")
    tournament.record_round_result(1, "C", "D", "1-0")
    tournament.record_round_result(1, "E", "F", "1-0")

    pairings = tournament.generate_pairings("swiss")

    # {A, C, E} on 1 point: A-C, E floats into {B, D, F}
    assert _pairs(pairings) == [("A", "C"), ("B", "D"), ("E", "F")]


def test_floaters_cascade_through_score_groups():
    tournament = _four_players()
    tournament.generate_pairings("swiss")
    tournament.record_round_result(1, "P2000", "P1800", "0.5-0.5")
    tournament.record_round_result(1, "P1600", "P1400", "0-1")

    pairings = tournament.generate_pairings("swiss")

    # P1400 floats into the half-point group, whose lowest member floats again
    assert _pairs(pairings) == [("P2000", "P1800"), ("P1600", "P1400")]


def test_bye_goes_to_lowest_player_without_one():
    players = [Player("A", 2000), Player("B", 1900), Player("C", 1800)]
    players[2].has_received_bye = True

    assert select_bye_player(players).id == "B"


def test_repeat_bye_when_everyone_had_one():
    players = [Player("A", 2000), Player("B", 1900), Player("C", 1800)]
    for player in players:
        player.has_received_bye = True

    assert select_bye_player(players).id == "C"


def test_each_player_gets_at_most_one_bye_while_possible():
    tournament = Tournament(players=[(f"P{i}", 2000 - i * 50) for i in range(5)])
    bye_recipients = []

    for round_number in range(1, 6):
        pairings = tournament.generate_pairings("swiss")
        bye_recipients.append(_bye(pairings))
        for player1, player2 in _pairs(pairings):
            tournament.record_round_result(round_number, player1, player2, "1-0")
        tournament.record_round_result(round_number, _bye(pairings), None, None)

    assert sorted(bye_recipients) == sorted(p.id for p in tournament.players)


def test_opponents_match_recorded_games():
    tournament = Tournament(players=[(f"P{i}", 1500 + i * 37) for i in range(7)])
    expected = {p.id: set() for p in tournament.players}

    for round_number in range(1, 5):
        pairings = tournament.generate_pairings("swiss")
        for index, (player1, player2) in enumerate(_pairs(pairings)):
            result = ("1-0", "0-1", "0.5-0.5")[index % 3]
            assert tournament.record_round_result(round_number, player1, player2, result)
            expected[player1].add(player2)
            expected[player2].add(player1)

        for player in tournament.players:
            assert set(player.opponents) == expected[player.id]
            assert len(player.opponents) == len(set(player.opponents))


def test_every_player_is_seated_exactly_once_per_round():
    tournament = Tournament(players=[f"P{i}" for i in range(11)])

    for round_number in range(1, 4):
        pairings = tournament.generate_pairings("swiss")
        seated = [p.player1_id for p in pairings] + [
            p.player2_id for p in pairings if not p.is_bye
        ]
        assert sorted(seated) == sorted(p.id for p in tournament.players)
        for player1, player2 in _pairs(pairings):
            tournament.record_round_result(round_number, player1, player2, "1-0")


def test_returned_pairings_are_copies():
    tournament = _four_players()
    pairings = tournament.generate_pairings("swiss")

    pairings[0].result_recorded = True

    assert not tournament.get_round(1).pairings[0].result_recorded
    assert dataclasses.asdict(pairings[1]) == dataclasses.asdict(
        tournament.get_round(1).pairings[1]
    )


def test_default_system_is_used_when_none_given():
    tournament = Tournament(pairing_system="swiss", players=["A", "B"])

    tournament.generate_pairings()

    assert tournament.get_round(1).pairing_system == "swiss"


@pytest.mark.parametrize("players", [[], ["Solo"]])
def test_needs_two_players(players):
    tournament = Tournament(players=players)

    with pytest.raises(InsufficientPlayersException):
        tournament.generate_pairings("swiss")
    assert tournament.current_round == 0


def test_unknown_system_is_rejected():
    tournament = Tournament(players=["A", "B"])

    with pytest.raises(UnknownPairingSystemException):
        tournament.generate_pairings("scheveningen")
    assert tournament.current_round == 0
