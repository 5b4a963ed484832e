import json

from apps.cli import run as run_cli
from apps.cli.play import play_player, play_system
from packages.engine import PlayerGame, Solver, score


def test_run_cli_writes_outputs(tmp_path, capsys):
    run_cli.main(["--strategy", "first_candidate", "--sample", "5", "--seed", "1",
                  "--outdir", str(tmp_path), "--progress", "off"])
    out = capsys.readouterr().out
    assert "games=5" in out
    manifests = list(tmp_path.glob("run_*_manifest.json"))
    assert len(manifests) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["num_cases"] == 5 and m["stats"]["success_rate"] == 1.0


def test_play_player_scripted():
    answers = iter(["12", "1243", "1234"])
    lines = []
    won = play_player(PlayerGame("1234"), ask=lambda _: next(answers), say=lines.append)
    assert won is True
    assert any("Invalid guess" in s for s in lines)
    assert any("2A2B" in s for s in lines)


def test_play_system_scripted_solves():
    secret = "7890"
    solver = Solver("first_candidate")

    def ask(_prompt):
        return str(score(secret, solver.current_guess))

    lines = []
    assert play_system(solver, ask=ask, say=lines.append) == "solved"
    assert "Got it: 7890" in lines[-1]


def test_play_system_contradiction_and_bad_input():
    replies = iter(["9A9B", "0 0", "0A0B"])
    lines = []
    outcome = play_system(Solver("first_candidate"), ask=lambda _: next(replies), say=lines.append)
    assert outcome == "contradiction"
    assert any("Invalid feedback" in s for s in lines)
