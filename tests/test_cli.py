import json
from pathlib import Path

import pytest

from feasible_cli.cli import load_player_system, main


REPO_ROOT = Path(__file__).resolve().parent.parent
NIGHT_MARKET = str(REPO_ROOT / "config" / "levels" / "night_market.yaml")

LEVEL1_PLAYER = """
constraints:
  - {id: budget, a: 4, b: 2, c: 24, comp: "<="}
  - {id: security, a: -1, b: 0, c: -2, comp: "<="}
"""

LEVEL1_NOISY = """
- {id: budget, a: 2, b: 1, c: 13, comp: "<"}
- {id: security, a: 1, b: 0, c: 1, comp: ">="}
"""


def write(tmp_path, text, name="player.yaml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def run_failing(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


def test_load_player_system_layouts(tmp_path):
    mapping = load_player_system(write(tmp_path, LEVEL1_PLAYER, "a.yaml"))
    listing = load_player_system(write(tmp_path, LEVEL1_NOISY, "b.yaml"))
    assert [k.id for k in mapping] == ["budget", "security"]
    assert listing[0].c == 13.0


def test_load_player_system_rejects_scalars(tmp_path):
    with pytest.raises(ValueError, match="list of constraints"):
        load_player_system(write(tmp_path, "42\n"))


def test_list_levels_builtin(capsys):
    main(["list-levels"])
    out = capsys.readouterr().out
    assert "Campaign: feasible-zone" in out
    assert "[3] Four Rules: Budget, Noise, Security, Walkway (4 rules)" in out


def test_list_levels_other_builtin(capsys):
    main(["--builtin", "half-plane-hero", "list-levels"])
    out = capsys.readouterr().out
    assert "Campaign: half-plane-hero" in out
    assert "[5]" in out


def test_list_levels_from_campaign_file(capsys):
    main(["--campaign", NIGHT_MARKET, "list-levels"])
    out = capsys.readouterr().out
    assert "Campaign: night-market" in out
    assert "[2] Quiet corner (4 rules)" in out


def test_polygon(capsys):
    main(["polygon", "1"])
    out = capsys.readouterr().out
    assert "Target: 3 vertices, area 16.00" in out
    for vertex in ("(2, 0)", "(6, 0)", "(2, 8)"):
        assert vertex in out


def test_polygon_with_player(tmp_path, capsys):
    main(["polygon", "1", "--player", write(tmp_path, LEVEL1_NOISY)])
    out = capsys.readouterr().out
    assert "Player: 3 vertices" in out


def test_check_match(tmp_path, capsys):
    main(["check", "1", write(tmp_path, LEVEL1_PLAYER)])
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "MATCH"
    assert "Player area 16.00 / target area 16.00" in out


def test_check_mismatch_reports_point(tmp_path, capsys):
    main(["check", "1", write(tmp_path, LEVEL1_NOISY)])
    out = capsys.readouterr().out
    assert "NO MATCH: systems differ at (1, 0)" in out


def test_check_strict(tmp_path, capsys):
    player = write(tmp_path, LEVEL1_PLAYER)
    main(["check", "1", player, "--strict"])
    assert "MATCH (same half-planes)" in capsys.readouterr().out

    main(["check", "1", write(tmp_path, LEVEL1_NOISY, "noisy.yaml"), "--strict"])
    assert "NO MATCH (half-planes differ)" in capsys.readouterr().out


def test_status(capsys):
    main(["status", "3", "2", "4"])
    out = capsys.readouterr().out
    assert "Status at (2, 4):" in out
    lines = {line.split()[0]: line.split()[-1] for line in out.splitlines()[1:]}
    assert lines == {
        "budget": "slack",
        "noise": "slack",
        "security": "binding",
        "walkway": "binding",
    }


def test_player_with_duplicate_ids_is_rejected(tmp_path, capsys):
    player = write(tmp_path, """
- {id: r, a: 1, b: 0, c: 2, comp: ">="}
- {id: r, a: 1, b: 0, c: 10, comp: "<="}
""")
    with pytest.raises(ValueError, match="duplicate constraint ids"):
        load_player_system(player)

    assert run_failing(["status", "1", "2", "5", "--player", player]) == 1
    assert "duplicate constraint ids: ['r']" in capsys.readouterr().err


def test_status_classifies_every_row(tmp_path, capsys):
    # "k1" also is the fallback key of the unnamed second rule
    player = write(tmp_path, """
- {id: k1, a: 1, b: 0, c: 2, comp: ">="}
- {a: 1, b: 0, c: 10, comp: "<="}
""")
    main(["status", "1", "2", "5", "--player", player])
    rows = capsys.readouterr().out.splitlines()[1:]
    assert [row.split()[-1] for row in rows] == ["binding", "slack"]


def test_check_line(tmp_path, capsys):
    main(["check", "1", write(tmp_path, LEVEL1_PLAYER), "--line"])
    assert capsys.readouterr().out.strip() == "MATCH (lines within 0.01)"

    main(["check", "1", write(tmp_path, LEVEL1_NOISY, "noisy.yaml"), "--line"])
    assert "NO MATCH (lines differ" in capsys.readouterr().out


def test_check_line_and_strict_are_exclusive(tmp_path):
    player = write(tmp_path, LEVEL1_PLAYER)
    with pytest.raises(SystemExit) as exc:
        main(["check", "1", player, "--line", "--strict"])
    assert exc.value.code == 2


def test_degenerate_player_rule_logs_geometry_error(tmp_path, capsys):
    player = write(tmp_path, '- {id: flat, a: 0, b: 0, c: 1, comp: "<="}\n')
    assert run_failing(["check", "1", player]) == 1

    err = capsys.readouterr().err
    assert "Error: Constraint 'flat' has a zero normal vector" in err
    entries = [json.loads(line) for line in err.splitlines() if line.startswith("{")]
    assert entries[-1]["event"] == "error.geometry"
    assert entries[-1]["exception"]["type"] == "DegenerateConstraintError"


def test_segment(capsys):
    main(["segment", "1"])
    out = capsys.readouterr().out
    assert "2x + y ≤ 12" in out
    assert "(0, 12) -> (6, 0)" in out
    assert "(2, 0) -> (2, 12)" in out


def test_unknown_level_exits_with_error(capsys):
    assert run_failing(["polygon", "99"]) == 1
    assert "Level 99 not available" in capsys.readouterr().err


def test_missing_player_file_exits_with_error(tmp_path, capsys):
    assert run_failing(["check", "1", str(tmp_path / "missing.yaml")]) == 1
    assert "Config file not found" in capsys.readouterr().err


def test_missing_command_exits_with_error(capsys):
    assert run_failing([]) == 1


def test_verbose_emits_structured_logs(capsys):
    main(["-v", "list-levels"])
    err = capsys.readouterr().err
    events = [json.loads(line)["event"] for line in err.splitlines() if line.startswith("{")]
    assert "cli.command" in events
    assert "level.registered" in events
