import pytest

from grid_sheet.main import run_sheet, parse_script
from grid_sheet.cli import main

SCRIPT = """
# Totals
[A1] := 3
[B2] := 4
[C1] := =A1+B2
[A3] := label
[A1] := 10
[A3] :=
"""


def test_parse_script():
    statements = parse_script(SCRIPT)
    assert statements[0] == (3, "A1", "3")
    assert statements[2] == (5, "C1", "=A1+B2")
    assert statements[-1] == (8, "A3", "")


@pytest.mark.parametrize("line", ["A1 := 3", "[A1] = 3", "[AA1] := 3", "[A0] := 3"])
def test_parse_script_rejects_bad_lines(line):
    with pytest.raises(SyntaxError):
        parse_script(line)


def test_run_sheet():
    sheet = run_sheet(SCRIPT)
    assert sheet.get("C1") == "14"
    assert sheet.get("A3") == ""


def test_run_sheet_debug_output(capsys):
    run_sheet(SCRIPT, debug=True)
    out = capsys.readouterr().out
    assert "Found 6 statement(s)" in out
    assert "  C1 -> '14'" in out
    assert "Grid State (CSV format):" in out


def test_cli_prints_cells(tmp_path, capsys):
    script = tmp_path / "totals.sheet"
    script.write_text(SCRIPT)
    main([str(script)])
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["A1 = 10", "C1 = 14", "B2 = 4"]


def test_cli_debug_saves_csv(tmp_path):
    script = tmp_path / "totals.sheet"
    script.write_text(SCRIPT)
    main([str(script), "--debug"])
    csv_file = tmp_path / "totals.csv"
    assert csv_file.read_text().splitlines() == ["10,,14", ",4,"]


def test_cli_custom_dimensions(tmp_path, capsys):
    script = tmp_path / "small.sheet"
    script.write_text("[A1] := =B3\n")
    main([str(script), "--rows", "2", "--cols", "2"])
    assert capsys.readouterr().out.splitlines() == ["A1 = ERROR"]


def test_cli_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.sheet")])
    assert exc.value.code == 1
    assert "not found" in capsys.readouterr().out


def test_cli_bad_script(tmp_path, capsys):
    script = tmp_path / "bad.sheet"
    script.write_text("[A1] = 3\n")
    with pytest.raises(SystemExit) as exc:
        main([str(script)])
    assert exc.value.code == 1
    assert "Invalid statement at line 1" in capsys.readouterr().out
