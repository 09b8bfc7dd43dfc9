"""Tests for the command-line interface.

WHY: The CLI is the only surface most users touch. Prompts must go to
stdout untouched (users pipe them), status and warnings to stderr, and
config errors must exit with code 1 rather than a traceback.

HOW: main() is called with an explicit argv inside a tmp_path working
directory. capsys captures both streams. The config.json written by
activate is checked against a small JSON schema.

RULES:
- Every test chdirs into tmp_path; nothing is written to the repo
"""

import json

import jsonschema
import pytest

from zerocode import __version__, content
from zerocode.cli import build_parser, main
from zerocode.transforms.cursor import CURSOR_PREAMBLE
from zerocode.transforms.universal import UNIVERSAL_PREAMBLE

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "version": {"const": __version__},
        "project": {"type": "string", "minLength": 1},
        "initialized": {"type": "string", "minLength": 1},
        "principles": {
            "type": "array",
            "items": {"enum": ["hickey", "linus", "zeus"]},
            "minItems": 3,
        },
    },
    "required": ["version", "project", "initialized", "principles"],
    "additionalProperties": False,
}


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ZEROCODE_PROFILES_FILE", raising=False)
    return tmp_path


class TestParser:

    def test_subcommand_required(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_generate_defaults(self):
        args = build_parser().parse_args(["generate"])
        assert args.platform == "universal"
        assert args.complexity == "basic"
        assert args.language == "english"
        assert args.output is None
        assert args.rule is None

    def test_bad_complexity_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "-c", "galaxy-brain"])
        assert exc_info.value.code == 2


class TestGenerate:

    def test_prompt_to_stdout(self, capsys):
        main(["generate", "-p", "cursor", "--category", "node"])
        captured = capsys.readouterr()
        assert CURSOR_PREAMBLE in captured.out
        assert captured.out.startswith("# ZeroCode Framework - Core Rules")
        assert captured.err == ""

    def test_unknown_platform_uses_universal(self, capsys):
        main(["generate", "-p", "gemini"])
        assert UNIVERSAL_PREAMBLE in capsys.readouterr().out

    def test_output_file(self, workdir, capsys):
        main(["generate", "-p", "claude", "-o", "prompt.md"])
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Saved to: prompt.md" in captured.err
        assert (workdir / "prompt.md").read_text(encoding="utf-8").startswith("# ZeroCode")

    def test_rules_and_category(self, capsys):
        main(["generate", "--rule", "Use pnpm", "--rule", "No ORMs", "--category", "python"])
        out = capsys.readouterr().out
        assert "## Project Context\n\n- Use pnpm\n- No ORMs" in out
        assert content.PYTHON_EXAMPLES in out

    def test_detects_project_examples(self, workdir, capsys):
        (workdir / "package.json").write_text('{"dependencies": {"react": "1"}}', encoding="utf-8")
        main(["generate"])
        assert content.REACT_EXAMPLES in capsys.readouterr().out

    def test_truncation_warning_on_stderr(self, workdir, monkeypatch, capsys):
        overrides = workdir / "profiles.json"
        overrides.write_text(json.dumps({"cursor": {"ceiling": 1000}}), encoding="utf-8")
        monkeypatch.setenv("ZEROCODE_PROFILES_FILE", str(overrides))

        main(["generate", "-p", "cursor"])
        captured = capsys.readouterr()
        assert "Warning: Prompt truncated to 1000 characters for Cursor compatibility" in captured.err
        assert len(captured.out.rstrip("\n")) <= 1000

    def test_bad_profiles_file_exits_1(self, workdir, monkeypatch, capsys):
        overrides = workdir / "profiles.json"
        overrides.write_text(json.dumps({"cursor": {"ceiling": -3}}), encoding="utf-8")
        monkeypatch.setenv("ZEROCODE_PROFILES_FILE", str(overrides))

        with pytest.raises(SystemExit) as exc_info:
            main(["generate"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Invalid profile overrides")

    def test_unwritable_output_exits_1(self, workdir, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "-o", str(workdir / "missing" / "prompt.md")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestActivate:

    def test_creates_prompt_and_config(self, workdir, capsys):
        main(["activate"])

        zerocode_dir = workdir / ".zerocode"
        prompt = (zerocode_dir / "universal-prompt.md").read_text(encoding="utf-8")
        assert UNIVERSAL_PREAMBLE in prompt

        config_data = json.loads((zerocode_dir / "config.json").read_text(encoding="utf-8"))
        jsonschema.validate(instance=config_data, schema=CONFIG_SCHEMA)
        assert config_data["project"] == workdir.name

        err = capsys.readouterr().err
        assert "ZeroCode activated!" in err

    def test_rerun_overwrites(self, workdir, capsys):
        main(["activate"])
        (workdir / ".zerocode" / "universal-prompt.md").write_text("stale", encoding="utf-8")
        main(["activate"])
        prompt = (workdir / ".zerocode" / "universal-prompt.md").read_text(encoding="utf-8")
        assert prompt != "stale"


class TestZinit:

    def test_writes_project_prompt(self, workdir, capsys):
        (workdir / "package.json").write_text('{"name": "app"}', encoding="utf-8")
        (workdir / "go.mod").write_text("module app\n", encoding="utf-8")

        main(["zinit"])

        prompt = (workdir / ".zerocode" / "zeus-orchestrator.md").read_text(encoding="utf-8")
        assert "- Project: {}".format(workdir.name) in prompt
        assert "- Technologies: JavaScript/TypeScript, Go" in prompt
        assert "Technologies: JavaScript/TypeScript, Go" in capsys.readouterr().err

    def test_nothing_detected(self, workdir, capsys):
        main(["zinit"])
        prompt = (workdir / ".zerocode" / "zeus-orchestrator.md").read_text(encoding="utf-8")
        assert "- Technologies: None detected" in prompt


class TestPlatformsAndDemo:

    def test_platforms_table(self, capsys):
        main(["platforms"])
        lines = capsys.readouterr().out.splitlines()
        assert [line.split()[0] for line in lines] == [
            "cursor", "claude", "ollama", "copilot", "universal",
        ]
        ollama = next(line for line in lines if line.startswith("ollama"))
        assert "8000 chars, 300 lines, plain" in ollama
        universal = next(line for line in lines if line.startswith("universal"))
        assert universal.endswith("(default)")

    def test_platforms_include_overrides(self, workdir, monkeypatch, capsys):
        overrides = workdir / "profiles.json"
        overrides.write_text(json.dumps({"gemini": {"ceiling": 30000}}), encoding="utf-8")
        monkeypatch.setenv("ZEROCODE_PROFILES_FILE", str(overrides))

        main(["platforms"])
        gemini = [line for line in capsys.readouterr().out.splitlines() if line.startswith("gemini")]
        assert gemini and "30000 chars" in gemini[0]

    def test_demo(self, capsys):
        main(["demo"])
        assert content.DEMO_TEXT in capsys.readouterr().out


class TestDetect:

    def test_platform_from_rule_text(self, capsys):
        main(["generate", "--detect", "--rule", "Paste this into Cursor"])
        captured = capsys.readouterr()
        assert CURSOR_PREAMBLE in captured.out
        assert "Platform: cursor" in captured.err

    def test_explicit_platform_wins(self, capsys):
        main(["generate", "--detect", "-p", "claude", "--rule", "Paste this into Cursor"])
        out = capsys.readouterr().out
        assert CURSOR_PREAMBLE not in out
        assert "## Claude Optimization" in out

    def test_no_keywords_stays_universal(self, capsys):
        main(["generate", "--detect"])
        assert UNIVERSAL_PREAMBLE in capsys.readouterr().out


class TestLogLevel:

    def test_unknown_level_exits_1(self, monkeypatch, capsys):
        monkeypatch.setattr("zerocode.cli.LOG_LEVEL", "chatty")
        with pytest.raises(SystemExit) as exc_info:
            main(["platforms"])
        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Unknown log level")
