from collections import Counter
from itertools import combinations

import pytest

from chesspairing import Tournament
from chesspairing.exceptions import (
    InsufficientPlayersException,
    TournamentCompleteException,
)
from chesspairing.models.player import Player
from chesspairing.pairing import RoundRobin


def _play_full_schedule(tournament):
    rounds = []
    while True:
        try:
            rounds.append(tournament.generate_pairings("round-robin"))
        except TournamentCompleteException:
            return rounds


def _pair_key(pairing):
    return frozenset((pairing.player1_id, pairing.player2_id))


def test_four_players_play_three_rounds_without_byes():
    tournament = Tournament(players=["A", "B", "C", "D"])

    rounds = _play_full_schedule(tournament)

    assert len(rounds) == 3
    for pairings in rounds:
        assert len(pairings) == 2
        assert not any(p.is_bye for p in pairings)


def test_five_players_play_five_rounds_with_one_bye_each():
    tournament = Tournament(players=["A", "B", "C", "D", "E"])

    rounds = _play_full_schedule(tournament)

    assert len(rounds) == 5
    games = []
    byes = []
    for pairings in rounds:
        assert len([p for p in pairings if not p.is_bye]) == 2
        assert pairings[-1].is_bye
        byes.append(pairings[-1].player1_id)
        games.extend(_pair_key(p) for p in pairings if not p.is_bye)

    assert len(set(games)) == len(games)
    assert sorted(byes) == ["A", "B", "C", "D", "E"]
    assert all(tournament.get_player(pid).has_received_bye for pid in byes)


@pytest.mark.parametrize("size", range(2, 13))
def test_every_pair_meets_exactly_once(size):
    players = [Player(f"P{i}") for i in range(size)]
    schedule = RoundRobin(players)
    expected_rounds = size if size % 2 else size - 1
    assert schedule.number_of_rounds == expected_rounds

    meetings = Counter()
    byes = Counter()
    for round_index in range(schedule.number_of_rounds):
        result = schedule.get_round_pairings(round_index)
        seated = result.seated_ids
        assert sorted(seated) == sorted(p.id for p in players)
        meetings.update(frozenset(pair) for pair in result.pairing_ids)
        if result.bye_player is not None:
            byes[result.bye_player.id] += 1

    all_pairs = {frozenset(pair) for pair in combinations([p.id for p in players], 2)}
    assert set(meetings) == all_pairs
    assert set(meetings.values()) == {1}
    if size % 2:
        assert byes == Counter({p.id: 1 for p in players})
    else:
        assert not byes


def test_schedule_is_exhausted_after_last_round():
    tournament = Tournament(players=["A", "B", "C", "D"])
    for _ in range(3):
        tournament.generate_pairings("round-robin")

    with pytest.raises(TournamentCompleteException):
        tournament.generate_pairings("round-robin")
    assert tournament.current_round == 3


def test_results_are_recorded_like_swiss():
    tournament = Tournament(players=["A", "B", "C"])
    pairings = tournament.generate_pairings("round-robin")
    game = next(p for p in pairings if not p.is_bye)
    bye = next(p for p in pairings if p.is_bye)

    assert tournament.record_round_result(1, game.player1_id, game.player2_id, "0-1")
    assert tournament.record_round_result(1, bye.player1_id, None, None)

    assert tournament.get_player(game.player2_id).score == 1
    assert tournament.get_player(game.player1_id).losses == 1
    assert tournament.get_player(bye.player1_id).score == 1


def test_round_robin_needs_two_players():
    with pytest.raises(InsufficientPlayersException):
        RoundRobin([Player("Solo")])
