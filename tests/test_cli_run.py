import csv
import json
from pathlib import Path

import pytest
from apps.cli.run import main, run
from wordlebench.engine import compute, format_mask
from wordlebench.harness import play_game, write_csv
from wordlebench.solvers import create_guesser


def test_write_csv_columns(tmp_path: Path):
    g = create_guesser("naive")
    g.reset(answers=["crane", "raise", "stare"])
    r = play_game("stare", g)

    path = write_csv([r], str(tmp_path / "out" / "run.csv"), max_rounds=3)
    with open(path, encoding="utf-8", newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    row = rows[0]
    assert row["guesser"] == "naive" and row["answer"] == "stare"
    assert row["solved"] == "True" and row["rounds"] == str(r.rounds)
    assert row["guess_1"] == "crane"
    assert row["mask_1"] == "'" + format_mask(compute("stare", "crane"))
    assert row["guess_3"] == "" and row["mask_3"] == ""


def test_cli_main_writes_outputs(tmp_path: Path, capsys):
    ans = tmp_path / "answers.txt"
    ans.write_text("crane\nraise\nstare\ntrace\ncared\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    summary = run(["--answers", str(ans), "--outdir", str(outdir), "--progress", "off"])
    assert summary["games"] == 5 and summary["solved"] == 5

    out = capsys.readouterr().out
    assert "[naive] games=5" in out
    manifests = list(outdir.glob("run_*_manifest.json"))
    assert len(manifests) == 1 and len(list(outdir.glob("run_*.csv"))) == 1
    manifest = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert manifest["guesser_id"] == "naive"
    assert manifest["config"]["max_rounds"] == 31
    assert manifest["answers"]["passed"] is True


def test_cli_main_sample_no_write(tmp_path: Path):
    summary = run(["--guesser", "random_consistent", "--sample", "10", "--max-rounds", "6",
                    "--no-write", "--progress", "off", "--outdir", str(tmp_path)])
    assert summary["games"] == 10
    assert main(["--sample", "3", "--no-write", "--progress", "off"]) is None
    assert not any(tmp_path.iterdir())


def test_cli_main_rejects_unknown_guesser():
    with pytest.raises(SystemExit):
        main(["--guesser", "nope", "--no-write"])


def test_cli_skips_non_alpha_answers(tmp_path: Path, capsys):
    ans = tmp_path / "answers.txt"
    ans.write_text("crane raise cr4ne stare\n", encoding="utf-8")

    summary = run(["--answers", str(ans), "--no-write", "--progress", "off"])
    assert summary["games"] == 3 and summary["solved"] == 3
    assert "FAIL" in capsys.readouterr().out


@pytest.mark.parametrize("flags", [
    ["--sample", "0"],
    ["--sample", "-3"],
    ["--max-rounds", "0"],
])
def test_cli_rejects_bounds_below_one(flags, capsys):
    with pytest.raises(SystemExit) as exc:
        run(flags + ["--no-write", "--progress", "off"])
    assert exc.value.code == 2
    assert "must be >= 1" in capsys.readouterr().err
