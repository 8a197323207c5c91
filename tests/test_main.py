from main import main


def test_main_prints_map_and_summary(capsys):
    assert main(["--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    map_lines = lines[:28]
    assert all(len(line) == 28 for line in map_lines)
    assert any("~" in line for line in map_lines)
    assert any("=" in line for line in map_lines)
    assert sum(line.count("#") for line in map_lines) >= 6 * 4
    assert "Seed: 3" in lines
    assert sum(1 for line in lines if line.startswith("Structure at")) == 6


def test_main_summary_only(capsys):
    assert main(["--seed", "3", "--no-map", "--no-batch", "--no-decorations", "--structures", "2"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Seed: 3")
    assert "Decorations: 0" in out
    assert "Static primitives" not in out
