import pytest

from chesspairing.cli import TournamentShell
from chesspairing.cli.__main__ import create_completer, create_main_parser, main
from chesspairing.tournament import Tournament


@pytest.fixture
def shell():
    return TournamentShell(Tournament(pairing_system="swiss"))


def test_add_and_standings(shell, capsys):
    assert shell.execute("add Alice 1800, Bob, Carol Ann 1650")

    out = capsys.readouterr().out
    assert "3 player(s) added" in out
    assert shell.tournament.get_player("Carol Ann").rating == 1650

    shell.execute("standings --sort rating")
    out = capsys.readouterr().out
    assert out.index("Alice") < out.index("Carol Ann") < out.index("Bob")


def test_random_players(shell):
    shell.execute("random 12")
    assert len(shell.tournament.players) == 12

    shell.execute("random Zoe 2100")
    assert shell.tournament.get_player("Zoe").rating == 2100

    shell.execute("clear")
    shell.execute("random")
    assert len(shell.tournament.players) == 100


def test_swiss_rounds_end_to_end(shell, capsys):
    shell.execute("add A 2000, B 1800, C 1600, D 1400")
    shell.execute("generate")
    out = capsys.readouterr().out
    assert "Board 1: A vs B" in out
    assert "Board 2: C vs D" in out

    shell.execute("result 1 A B 1-0")
    shell.execute("result 1 C D 0-1")
    assert "Result recorded" in capsys.readouterr().out

    shell.execute("generate --system swiss")
    out = capsys.readouterr().out
    assert "Board 1: A vs D" in out
    assert "Board 2: B vs C" in out

    shell.execute("pairings 1")
    assert "[1-0]" in capsys.readouterr().out


def test_bad_result_keeps_running(shell, capsys):
    shell.execute("add A, B")
    shell.execute("generate")
    capsys.readouterr()

    assert shell.execute("result 1 A B 2-x")
    assert "Error" in capsys.readouterr().out
    assert shell.tournament.get_player("A").games_played == 0

    shell.execute("result 1 A B 1-0")
    shell.execute("result 1 A B 1-0")
    assert "Result not recorded" in capsys.readouterr().out


def test_knockout_commands(capsys):
    shell = TournamentShell(Tournament(pairing_system="knockout"))
    shell.execute("add A 2000, B 1900, C 1800")
    shell.execute("generate")
    out = capsys.readouterr().out
    assert "Board 1: A vs B" in out
    assert "Bye: C" in out

    shell.execute("generate")
    assert "Error" in capsys.readouterr().out
    assert shell.tournament.current_round == 1

    shell.execute("winner 1 A B B")
    shell.execute("generate")
    assert "Board 1: B vs C" in capsys.readouterr().out

    shell.execute("winner 2 B C C")
    shell.execute("generate")
    out = capsys.readouterr().out
    assert "Winner: C" in out
    assert "Error" not in out


def test_generate_errors_are_reported(shell, capsys):
    assert shell.execute("generate")
    assert "Error" in capsys.readouterr().out

    shell.execute("add A, B")
    assert shell.execute("generate knockout-ish")
    assert shell.tournament.current_round == 0


def test_export_command(shell, tmp_path, capsys):
    shell.execute("add A 2000, B 1800")
    target = tmp_path / "shortlist.csv"

    shell.execute(f'export "{target}"')

    assert "Shortlist written" in capsys.readouterr().out
    assert target.read_text(encoding="utf-8-sig").splitlines()[1].startswith("1,A,2000")


def test_reset_command(shell):
    shell.execute("add A, B")
    shell.execute("generate")
    shell.execute("result 1 A B 1-0")

    shell.execute("reset")

    assert shell.tournament.current_round == 0
    assert shell.tournament.get_player("A").score == 0


def test_help_unknown_and_exit(shell, capsys):
    shell.execute("help")
    assert "Available Commands" in capsys.readouterr().out

    shell.execute("help winner")
    assert "knockout" in capsys.readouterr().out

    assert shell.execute("castle kingside")
    assert "Unknown command" in capsys.readouterr().out

    assert not shell.execute("exit")
    assert not shell.execute("quit")
    assert shell.execute("")


def test_main_runs_commands_from_players_file(tmp_path, capsys):
    players_file = tmp_path / "players.txt"
    players_file.write_text("Alice 1800\nBob 1700\nCarol 1600\n", encoding="utf-8")

    code = main(
        [
            "--players-file",
            str(players_file),
            "--system",
            "round-robin",
            "--log-level",
            "error",
            "-c",
            "generate",
            "-c",
            "standings --sort name",
        ]
    )

    assert code == 0
    out = capsys.readouterr().out
    assert "Round 1" in out
    assert "Bye: Alice" in out
    table = out[out.index("Rank") :]
    assert table.index("Alice") < table.index("Bob") < table.index("Carol")


def test_main_reports_missing_players_file(tmp_path, capsys):
    assert main(["--players-file", str(tmp_path / "missing.txt"), "-c", "standings"]) == 1
    assert "Cannot read" in capsys.readouterr().out


def test_parser_defaults():
    args = create_main_parser().parse_args([])

    assert args.system == "swiss"
    assert args.players_file is None
    assert args.commands is None


def test_completer_knows_every_command():
    completer = create_completer()

    assert {"add", "generate", "result", "winner", "export", "exit"} <= set(completer.options)
