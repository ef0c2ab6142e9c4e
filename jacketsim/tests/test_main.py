# -*- coding: utf-8 -*-
"""
CLI smoke tests: run / scenario / profile subcommands.
"""
import yaml

from jacketsim.main import main
from jacketsim.tests._fixtures import SAMPLE_STREAM, SAMPLE_LAYERS, SAMPLE_BETA

def test_run_file(tmp_path, capsys):
    p = tmp_path / "input.txt"
    p.write_text(SAMPLE_STREAM)
    assert main(["run", str(p)]) == 0
    lines = capsys.readouterr().out.split()
    assert len(lines) == 3

def test_scenario(tmp_path, capsys):
    p = tmp_path / "jacket.yaml"
    p.write_text(yaml.safe_dump({
        "beta": SAMPLE_BETA,
        "layers": [list(r) for r in SAMPLE_LAYERS],
        "queries": [[5], [4]],
    }))
    assert main(["scenario", str(p)]) == 0
    out = capsys.readouterr().out.split()
    assert out[0] == "POSSIBLE"
    assert len(out[1].split(".")[1]) == 10

def test_profile_to_csv(tmp_path):
    p = tmp_path / "jacket.yaml"
    p.write_text(yaml.safe_dump({"beta": SAMPLE_BETA, "layers": [list(r) for r in SAMPLE_LAYERS]}))
    out = tmp_path / "q.csv"
    assert main(["profile", str(p), "--n", "11", "--d-max", "0.01", "--csv", str(out)]) == 0
    assert out.read_text().startswith("d0_m,")

def test_bad_input_reports_error(tmp_path, capsys):
    p = tmp_path / "input.txt"
    p.write_text("0.02 0.04\n")
    assert main(["run", str(p)]) == 1
    assert "ERROR" in capsys.readouterr().err

def test_scenario_layers_from_csv_only(tmp_path, capsys):
    import pandas as pd
    csv = tmp_path / "layers.csv"
    pd.DataFrame(SAMPLE_LAYERS, columns=["d", "k", "mu", "c"]).to_csv(csv, index=False)
    p = tmp_path / "jacket.yaml"
    p.write_text(yaml.safe_dump({"beta": SAMPLE_BETA, "queries": [[5]]}))
    assert main(["scenario", str(p), "--layers-csv", str(csv)]) == 0
    assert capsys.readouterr().out.split() == ["POSSIBLE"]

def test_scenario_without_layers_or_csv_fails(tmp_path, capsys):
    p = tmp_path / "jacket.yaml"
    p.write_text(yaml.safe_dump({"beta": SAMPLE_BETA, "queries": [[5]]}))
    assert main(["scenario", str(p)]) == 1
    assert "layers" in capsys.readouterr().err
