import json
from pathlib import Path

from typer.testing import CliRunner

from linesmith import __version__
from linesmith.main import app

runner = CliRunner()


def _write(tmp_path: Path, name: str, content: str) -> Path:
    target = tmp_path / name
    target.write_text(content)
    return target


def test_list_json():
    result = runner.invoke(app, ["list", "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [m["name"] for m in payload][:2] == ["SplitLineToMultiLine", "ConvertToDestructuredObjectInput"]
    assert [m["priority"] for m in payload] == [1, 2, 3, 4, 5, 6]


def test_list_human():
    result = runner.invoke(app, ["--human", "list"])
    assert result.exit_code == 0
    assert "LogMessage" in result.stdout


def test_run_split_is_a_dry_run_by_default(tmp_path):
    target = _write(tmp_path, "o.js", "const o = { a: 1, b: 2 };\n")

    result = runner.invoke(app, ["run", "SplitLineToMultiLine", str(target), "--line", "1", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["success"] is True
    assert payload["replacement"] == "const o = {\n    a: 1,\n    b: 2\n};"
    assert payload["written"] is False
    assert target.read_text() == "const o = { a: 1, b: 2 };\n"


def test_run_split_write_and_indent_size(tmp_path):
    target = _write(tmp_path, "o.js", "const o = { a: 1, b: 2 };\n")

    result = runner.invoke(
        app,
        ["run", "splitlinetomultiline", str(target), "--line", "1", "--indent-size", "2", "--write"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["written"] is True
    assert Path(payload["backup_path"]).read_text() == "const o = { a: 1, b: 2 };\n"
    assert target.read_text() == "const o = {\n  a: 1,\n  b: 2\n};\n"


def test_run_log_message_on_service(service_file):
    result = runner.invoke(
        app,
        ["run", "LogMessage", str(service_file), "--line", "13", "--char", "8", "--end-line", "13", "--write"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    statement = "logger.info('[OrderService][submit] ');"
    assert payload["replacement"] == statement
    assert payload["cursor"] == {"line": 12, "char": 8 + len(statement) - 3}
    assert service_file.read_text().split("\n")[12] == "        " + statement


def test_run_informational_stop(tmp_path):
    target = _write(tmp_path, "a.js", "let a = 1;\n")

    result = runner.invoke(app, ["run", "SplitLineToMultiLine", str(target), "--line", "1"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["success"] is False
    assert payload["message"]


def test_run_unknown_macro(tmp_path):
    target = _write(tmp_path, "a.js", "let a = 1;\n")

    result = runner.invoke(app, ["run", "Uppercase", str(target), "--line", "1"])

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["code"] == "MACRO_NOT_FOUND"
    assert "LogMessage" in payload["suggestions"]


def test_run_invalid_json(tmp_path):
    target = _write(tmp_path, "a.js", "x = {a: 1}\n")

    result = runner.invoke(
        app,
        ["run", "ConvertJsonToJavascript", str(target), "--line", "1", "--char", "4", "--end-char", "10"],
    )

    assert result.exit_code == 1
    assert json.loads(result.stdout)["code"] == "INVALID_JSON"
    assert target.read_text() == "x = {a: 1}\n"


def test_run_line_out_of_range(tmp_path):
    target = _write(tmp_path, "a.js", "let a = 1;\n")

    result = runner.invoke(app, ["run", "SplitLineToMultiLine", str(target), "--line", "9"])

    assert result.exit_code == 1
    assert json.loads(result.stdout)["code"] == "INVALID_POSITION"


def test_run_human_mode(tmp_path):
    target = _write(tmp_path, "o.js", "f({ a: 1 });\n")

    result = runner.invoke(app, ["--human", "run", "SplitLineToMultiLine", str(target), "--line", "1"])

    assert result.exit_code == 0
    assert "SplitLineToMultiLine" in result.stdout
    assert "Dry run" in result.stdout


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
