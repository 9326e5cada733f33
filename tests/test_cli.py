import json

import pytest

from supersorter import cli


def test_bench_command(tmp_path):
    code = cli.main([
        "--log-level", "WARNING",
        "bench", "-o", str(tmp_path), "-k", "1", "-i", "2",
        "-a", "quick", "-a", "merge", "-d", "reversed", "--seed", "1",
    ])
    assert code == 0
    assert (tmp_path / "Quick_Sort.txt").exists()
    assert (tmp_path / "Merge_Sort.txt").exists()
    assert not (tmp_path / "Bubble_Sort.txt").exists()


def test_flags_override_config_file(tmp_path):
    config = tmp_path / "bench.json"
    config.write_text(json.dumps({"iterations": 1, "size_exponent": 1, "algorithms": ["bubble"]}))
    out = tmp_path / "out"
    code = cli.main(["bench", "-c", str(config), "-o", str(out), "-a", "selection", "-d", "front"])
    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["Selection_Sort.txt", "comparison.txt"]


def test_quick_vs_default_command(tmp_path):
    code = cli.main(["quick-vs-default", "-o", str(tmp_path), "-k", "1", "-i", "3"])
    assert code == 0
    assert (tmp_path / "Default_Sort.txt").read_text().count("Sorted successfully") == 1


def test_bad_config_returns_error(tmp_path):
    assert cli.main(["bench", "-c", str(tmp_path / "missing.json")]) == 2


def test_unknown_algorithm_rejected_by_parser():
    with pytest.raises(SystemExit):
        cli.parse_args(["bench", "-a", "bogo"])


def test_command_required():
    with pytest.raises(SystemExit):
        cli.parse_args([])


def test_show_command(monkeypatch):
    seen = {}

    def fake_show(values, algorithm, speed=1.0):
        seen.update(values=values, algorithm=algorithm, speed=speed)

    monkeypatch.setattr("supersorter.visualize.show", fake_show)
    code = cli.main(["show", "-a", "insertion", "-n", "16", "-s", "2"])
    assert code == 0
    assert sorted(seen["values"]) == list(range(1, 17))
    assert seen["algorithm"] == "insertion"
    assert seen["speed"] == 2.0
