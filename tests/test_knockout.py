import pytest

from chesspairing import Tournament
from chesspairing.controllers.tournament import ResultRecorder, RoundManager
from chesspairing.exceptions import (
    ChampionDecidedException,
    EmptyBracketException,
    IncompleteRoundException,
    InvalidPlayerDataException,
    TournamentStateException,
)
from chesspairing.models.tournament import (
    KnockoutBracket,
    PlayerRegistry,
    RoundData,
    RoundLedger,
)


def _five_players():
    return Tournament(
        pairing_system="knockout",
        players=[("A", 2200), ("B", 2000), ("C", 1800), ("D", 1600), ("E", 1400)],
    )


def _pairs(pairings):
    return [(p.player1_id, p.player2_id) for p in pairings if not p.is_bye]


def _assert_partition(tournament):
    active = {p.id for p in tournament.active_players}
    eliminated = {p.id for p in tournament.eliminated_players}
    assert not active & eliminated
    assert active | eliminated == {p.id for p in tournament.players}
    assert len(active) + len(eliminated) == len(tournament.players)


def test_first_round_seeds_by_rating_with_bye_to_lowest():
    tournament = _five_players()

    pairings = tournament.generate_pairings()

    assert _pairs(pairings) == [("A", "B"), ("C", "D")]
    assert pairings[-1].is_bye
    assert pairings[-1].player1_id == "E"
    assert all(p.is_knockout for p in pairings)
    _assert_partition(tournament)


def test_next_round_requires_all_results():
    tournament = _five_players()
    tournament.generate_pairings()
    tournament.record_knockout_result(1, "A", "B", "A")

    with pytest.raises(IncompleteRoundException):
        tournament.generate_pairings()

    assert tournament.current_round == 1
    assert tournament.get_player("E").score == 0
    assert [p.id for p in tournament.active_players] == ["A", "C", "D", "E"]


def test_knockout_runs_to_a_champion():
    tournament = _five_players()
    tournament.generate_pairings()
    assert tournament.record_knockout_result(1, "A", "B", "A")
    assert tournament.record_knockout_result(1, "C", "D", "C")
    _assert_partition(tournament)

    second = tournament.generate_pairings()

    # the round 1 bye is credited before round 2 is drawn
    assert tournament.get_player("E").score == 1
    assert tournament.get_player("E").last_result == "bye"
    assert _pairs(second) == [("A", "C")]
    assert second[-1].player1_id == "E"

    assert tournament.record_knockout_result(2, "A", "C", "A")
    third = tournament.generate_pairings()
    assert _pairs(third) == [("A", "E")]
    assert not any(p.is_bye for p in third)

    assert tournament.record_knockout_result(3, "A", "E", "E")
    _assert_partition(tournament)

    with pytest.raises(ChampionDecidedException) as excinfo:
        tournament.generate_pairings()
    assert excinfo.value.winner_id == "E"
    assert [p.id for p in tournament.eliminated_players] == ["B", "D", "C", "A"]


def test_loser_is_eliminated_and_opponents_are_symmetric():
    tournament = _five_players()
    tournament.generate_pairings()

    assert tournament.record_knockout_result(1, "A", "B", "B")

    winner = tournament.get_player("B")
    loser = tournament.get_player("A")
    assert (winner.wins, winner.score, winner.last_result) == (1, 1, "win")
    assert (loser.losses, loser.score, loser.last_result) == (1, 0, "loss")
    assert loser.is_eliminated
    assert winner.opponents == ["A"]
    assert loser.opponents == ["B"]
    assert [p.id for p in tournament.eliminated_players] == ["A"]


def test_bye_can_be_resolved_explicitly():
    tournament = _five_players()
    tournament.generate_pairings()

    assert tournament.record_knockout_result(1, "E", None, "E")
    assert tournament.get_player("E").score == 1
    assert not tournament.record_knockout_result(1, "E", None, "E")


def test_invalid_knockout_reports_are_rejected():
    tournament = _five_players()
    tournament.generate_pairings()

    assert not tournament.record_knockout_result(1, "A", "B", "C")
    assert not tournament.record_knockout_result(1, "B", "A", "A")
    assert not tournament.record_knockout_result(2, "A", "B", "A")
    assert not tournament.record_round_result(1, "A", "B", "1-0")

    assert tournament.record_knockout_result(1, "A", "B", "A")
    assert not tournament.record_knockout_result(1, "A", "B", "B")
    assert tournament.get_player("A").wins == 1
    assert tournament.get_player("B").losses == 1


def test_knockout_winner_cannot_be_reported_on_swiss_round():
    tournament = Tournament(players=["A", "B"])
    tournament.generate_pairings("swiss")

    assert not tournament.record_knockout_result(1, "A", "B", "A")
    assert tournament.get_player("A").score == 0


def test_knockout_cannot_follow_a_swiss_round():
    tournament = Tournament(players=["A", "B", "C", "D"])
    tournament.generate_pairings("swiss")

    with pytest.raises(TournamentStateException):
        tournament.generate_pairings("knockout")
    assert tournament.current_round == 1


def test_two_players_final():
    tournament = Tournament(pairing_system="knockout", players=["A", "B"])
    tournament.generate_pairings()
    tournament.record_knockout_result(1, "A", "B", "A")

    with pytest.raises(ChampionDecidedException) as excinfo:
        tournament.generate_pairings()
    assert excinfo.value.winner_id == "A"


def test_late_registrant_is_dropped_at_next_round():
    tournament = Tournament(pairing_system="knockout", players=["A", "B", "C", "D"])
    tournament.generate_pairings()
    tournament.register(["Late"])

    assert "Late" in {p.id for p in tournament.active_players}
    _assert_partition(tournament)

    tournament.record_knockout_result(1, "A", "B", "A")
    tournament.record_knockout_result(1, "C", "D", "C")
    pairings = tournament.generate_pairings()

    assert _pairs(pairings) == [("A", "C")]
    assert tournament.get_player("Late").is_eliminated
    _assert_partition(tournament)


def test_reset_reseeds_the_bracket():
    tournament = _five_players()
    tournament.generate_pairings()
    tournament.record_knockout_result(1, "A", "B", "A")

    tournament.reset()

    assert len(tournament.active_players) == 5
    assert tournament.eliminated_players == []
    assert not tournament.get_player("B").is_eliminated
    assert _pairs(tournament.generate_pairings()) == [("A", "B"), ("C", "D")]


def test_round_without_winners_raises_empty_bracket():
    registry = PlayerRegistry()
    registry.register(["A", "B"])
    ledger = RoundLedger()
    bracket = KnockoutBracket()
    bracket.seed(["A", "B"])
    ledger.append(RoundData(round_number=1, pairing_system="knockout"))
    recorder = ResultRecorder(registry, ledger, bracket)
    manager = RoundManager(registry, ledger, bracket, recorder)

    with pytest.raises(EmptyBracketException):
        manager.create_next_round("knockout")
    assert len(ledger) == 1
    assert bracket.active_ids == ["A", "B"]


def test_unsupported_candidate_mid_knockout_registers_nobody():
    tournament = Tournament(pairing_system="knockout", players=["A", "B", "C", "D"])
    tournament.generate_pairings()

    with pytest.raises(InvalidPlayerDataException):
        tournament.register(["Late", 42])

    assert [p.id for p in tournament.players] == ["A", "B", "C", "D"]
    _assert_partition(tournament)


def test_list_pair_registered_mid_knockout_joins_active_side():
    tournament = Tournament(pairing_system="knockout", players=["A", "B", "C", "D"])
    tournament.generate_pairings()

    assert tournament.register(["Late", ["X", 1600]]) == 2

    assert tournament.get_player("X").rating == 1600
    _assert_partition(tournament)
