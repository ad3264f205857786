import json
import subprocess
import sys
from pathlib import Path

import pytest

from texmath.cli import main


def test_main_prints_one_line_per_expression(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["pi + x", "sqrt(y)"]) == 0
    assert capsys.readouterr().out.splitlines() == ["\\pi + x", "\\sqrt{y}"]


def test_main_reads_input_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "formulas.txt"
    source.write_text("a / b\n\nfoo(a)\n", "utf-8")
    main(["--input", str(source)])
    assert capsys.readouterr().out.splitlines() == ["\\frac{a}{b}", "\\mathrm{foo}(a)"]


def test_main_uses_notation_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    notation = tmp_path / "notation.json"
    notation.write_text(
        json.dumps({"functions": {"foo": {"kind": "wrap", "prefix": "\\mathcal{F}(", "suffix": ")"}}}),
        "utf-8",
    )
    main(["--notation", str(notation), "foo(a)"])
    assert capsys.readouterr().out.strip() == "\\mathcal{F}(a)"


def test_main_show_scope(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--show-scope", "foo(x)"])
    out = capsys.readouterr().out
    assert "fallback functions:" in out
    assert out.splitlines()[-1] == "\\mathrm{foo}(x)"


def test_main_reports_translation_errors() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["sqrt(x, y)"])
    assert "expects 1 argument, got 2" in str(excinfo.value.code)

    with pytest.raises(SystemExit) as excinfo:
        main(["f(x"])
    assert "invalid expression" in str(excinfo.value.code)


def test_main_requires_expressions(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([])
    with pytest.raises(SystemExit) as excinfo:
        main(["--notation", str(tmp_path / "missing.json"), "x"])
    assert "missing notation file" in str(excinfo.value.code)


def test_cli_script_translates_expressions() -> None:
    root = Path(__file__).resolve().parents[1]
    result = subprocess.run(
        [sys.executable, str(root / "texmath_cli.py"), "alpha ** 2 + beta"],
        check=True,
        capture_output=True,
        text=True,
        cwd=root,
    )
    assert result.stdout == "{\\alpha}^{2} + \\beta\n"
