import json

import pytest

from terragen import PerlinNoiseGenerator
from terragen.__main__ import main


def test_grid_dump_json(tmp_path, capsys):
    out = tmp_path / "out" / "grid.json"
    assert main(["--seed", "abc", "--persistence", "0.5", "grid", "--size", "4", "--dump-json", str(out)]) == 0

    data = json.loads(out.read_text(encoding="utf-8"))
    expected = PerlinNoiseGenerator({"map_seed": "abc", "size": 4, "persistence": 0.5}).generate()
    assert data["map_seed"] == "abc"
    assert data["terra"] == expected.to_list()
    assert "Generated 4x4 grid" in capsys.readouterr().out


def test_numeric_seed_argument(tmp_path):
    out = tmp_path / "grid.json"
    main(["--seed", "42", "grid", "--size", "2", "--dump-json", str(out)])
    assert json.loads(out.read_text(encoding="utf-8"))["map_seed"] == 42


def test_grid_ascii_preview(capsys):
    assert main(["--seed", "1", "grid", "--size", "8", "--ascii", "--no-color"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines[-8:]) == 8
    assert all(len(line) == 8 for line in lines[-8:])


def test_sample(capsys):
    assert main(["--seed", "42", "--persistence", "0.5", "sample", "0", "0", "10.5", "-3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    gen = PerlinNoiseGenerator({"map_seed": 42, "persistence": 0.5})
    assert lines[0].split("\t")[2] == repr(gen.evaluate(0.0, 0.0))
    assert lines[1].split("\t")[2] == repr(gen.evaluate(10.5, -3.0))


def test_sample_needs_pairs():
    with pytest.raises(SystemExit):
        main(["--seed", "42", "sample", "1"])


def test_config_file(tmp_path, capsys):
    cfg = tmp_path / "terragen.json"
    cfg.write_text(json.dumps({"map_seed": "cfg", "size": 2}), encoding="utf-8")
    assert main(["--config", str(cfg), "grid"]) == 0
    assert "Generated 2x2 grid, seed='cfg'" in capsys.readouterr().out


def test_bad_seed_type_from_config_exits_with_error(tmp_path, capsys):
    cfg = tmp_path / "terragen.json"
    cfg.write_text(json.dumps({"map_seed": [1, 2]}), encoding="utf-8")
    assert main(["--config", str(cfg), "grid"]) == 2
    assert "map_seed must be string or numeric" in capsys.readouterr().out


def test_nan_seed_exits_with_error(capsys):
    assert main(["--seed", "nan", "grid", "--size", "4"]) == 2
    assert "map_seed must be a finite number" in capsys.readouterr().out
