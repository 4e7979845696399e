"""Tests for the interactive CLI, driven through scripted input."""

import pytest

import run_cli
from circuitvision.config import Settings
from cli import CircuitVisionCLI


@pytest.fixture
def scripted_input(monkeypatch):
    def install(*answers):
        remaining = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

    return install


@pytest.fixture
def sketch_file(tmp_path, esp32_sketch):
    path = tmp_path / "sketch.ino"
    path.write_text(esp32_sketch)
    return path


def run_session(cli=None):
    cli = cli or CircuitVisionCLI(Settings())
    cli.run_interactive_session()
    return cli


def test_help_unknown_and_quit(scripted_input, capsys):
    scripted_input("help", "bogus", "quit")
    run_session()
    out = capsys.readouterr().out
    assert "analyze    - Hardware rule check" in out
    assert "❓ Unknown command" in out
    assert out.rstrip().endswith("👋 Goodbye!")


def test_end_of_input_exits(scripted_input, capsys):
    scripted_input()
    run_session()
    assert "👋 Exiting..." in capsys.readouterr().out


def test_analyze_prints_report(scripted_input, capsys, sketch_file):
    scripted_input("analyze", str(sketch_file), "history", "quit")
    cli = run_session()
    out = capsys.readouterr().out
    assert "### ❌ CRITICAL (3)" in out
    assert "❌ 3 critical issue(s)" in out
    assert "[analyze]" in out
    assert cli.session_history[0]["findings"] == 6


def test_target_changes_rule_platform(scripted_input, capsys, sketch_file):
    scripted_input("target", "Arduino", "analyze", str(sketch_file), "quit")
    cli = run_session()
    out = capsys.readouterr().out
    assert cli.target_platform == "Arduino"
    assert "✅ Target set to Arduino" in out
    assert "❌ 1 critical issue(s)" in out


def test_missing_file(scripted_input, capsys, tmp_path):
    missing = tmp_path / "nope.ino"
    scripted_input("analyze", str(missing), "quit")
    run_session()
    assert f"❌ File {missing} not found" in capsys.readouterr().out


def test_source_size_limit(scripted_input, capsys, sketch_file):
    scripted_input("components", str(sketch_file), "quit")
    run_session(CircuitVisionCLI(Settings(max_source_chars=10)))
    assert "⚠️ File too large" in capsys.readouterr().out


def test_components(scripted_input, capsys, tmp_path, component_sketch):
    path = tmp_path / "parts.ino"
    path.write_text(component_sketch)
    scripted_input("components", str(path), "quit")
    run_session()
    out = capsys.readouterr().out
    assert "📦 Components (3):" in out
    assert "  - DHT22 x1" in out


def test_platform(scripted_input, capsys, tmp_path):
    script = tmp_path / "main.py"
    script.write_text("import RPi.GPIO as GPIO\n")
    scripted_input("platform", str(script), "quit")
    run_session()
    out = capsys.readouterr().out
    assert "🧭 Raspberry Pi (raspberrypi) - confidence: medium" in out
    assert "GPIO Configuration" in out


def test_platform_low_confidence_warning(scripted_input, capsys, tmp_path):
    notes = tmp_path / "notes.txt"
    notes.write_text("hello")
    scripted_input("platform", str(notes), "quit")
    run_session()
    assert "⚠️ Low confidence" in capsys.readouterr().out


def test_diagram_repair(scripted_input, capsys, tmp_path):
    doc = tmp_path / "doc.md"
    doc.write_text("Wiring:\n```mermaid\nflowchart TD\n  A[B[C]]-->D\n```\n")
    scripted_input("diagram", str(doc), "quit")
    run_session()
    out = capsys.readouterr().out
    assert "A[B_C]-->D" in out
    assert "✅ Diagram repaired" in out


def test_diagram_fallback(scripted_input, capsys, tmp_path):
    doc = tmp_path / "doc.md"
    doc.write_text("no diagram at all")
    scripted_input("diagram", str(doc), "quit")
    run_session()
    out = capsys.readouterr().out
    assert 'Error["Invalid diagram"]' in out
    assert "⚠️ Could not repair" in out


def test_shopping(scripted_input, capsys, sketch_file):
    scripted_input("shopping", str(sketch_file), "quit")
    run_session()
    assert "## 🛒 Shopping List" in capsys.readouterr().out


def test_empty_history(scripted_input, capsys):
    scripted_input("history", "quit")
    run_session()
    assert "📝 No history" in capsys.readouterr().out


def test_main_rejects_bad_configuration(monkeypatch, capsys):
    monkeypatch.setenv("CIRCUITVISION_MAX_SOURCE_CHARS", "many")
    with pytest.raises(SystemExit) as exc:
        run_cli.main()
    assert exc.value.code == 1
    assert "❌ Configuration error" in capsys.readouterr().out


def test_main_runs_session(monkeypatch, scripted_input, capsys):
    monkeypatch.setattr(run_cli.logging, "basicConfig", lambda **kwargs: None)
    scripted_input("quit")
    run_cli.main()
    out = capsys.readouterr().out
    assert "🚀 Starting CircuitVision CLI..." in out
    assert "👋 Goodbye!" in out
