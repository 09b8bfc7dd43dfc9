"""Command-line interface for the ZeroCode prompt generator.

WHY: Users need a quick way to produce a platform-tuned prompt from the
terminal and to drop a ready-made prompt into their project. The CLI
wires the generator, the project inspector, and file output behind a
handful of subcommands.

HOW: argparse with subcommands:
  generate   build a prompt for one platform (stdout or --output file);
             --detect guesses the platform from the --rule text
  demo       show the before/after illustration
  activate   create .zerocode/ with a universal prompt and config.json
  zinit      inspect the project and write .zerocode/zeus-orchestrator.md
  platforms  list the registered platform profiles and their limits
Status messages and truncation warnings go to stderr so prompts can be
piped from stdout.

RULES:
- Unknown platform names are accepted and use the universal profile
- ZEROCODE_PROFILES_FILE overrides are validated before any output
- Exit codes: 0 = success, 1 = config or file error
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from zerocode import __version__, content
from zerocode.config import (
    DEFAULT_COMPLEXITY,
    DEFAULT_DESTINATION,
    DEFAULT_LANGUAGE,
    DEFAULT_PLATFORM,
    LOG_LEVEL,
    PRINCIPLES,
    ZEROCODE_DIR_NAME,
    configured_overrides,
    resolve_log_level,
)
from zerocode.core.generator import PromptGenerator
from zerocode.core.models import AssemblyRequest, Complexity, GeneratedPrompt, Language
from zerocode.profiles import ProfileRegistry, detect_destination, supported_destinations
from zerocode.project import detect_technologies


def _status(msg: str) -> None:
    """Print a status message to stderr (stdout is reserved for prompts)."""
    print(msg, file=sys.stderr, flush=True)


def _build_generator(project_dir: Path) -> PromptGenerator:
    registry = ProfileRegistry.default(overrides=configured_overrides())
    return PromptGenerator(registry=registry, project_dir=project_dir)


def _report_warnings(prompt: GeneratedPrompt) -> None:
    for warning in prompt.warnings:
        _status("Warning: {}".format(warning))


def _zerocode_dir(project_dir: Path) -> Path:
    directory = project_dir / ZEROCODE_DIR_NAME
    directory.mkdir(parents=True, exist_ok=True)
    return directory


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_generate(args: argparse.Namespace) -> None:
    project_dir = Path.cwd()
    platform = args.platform
    if args.detect:
        platform = detect_destination("\n".join(args.rule or ()), requested=platform)
        _status("🔍 Platform: {}".format(platform))
    request = AssemblyRequest(
        destination=platform,
        complexity=Complexity(args.complexity),
        language=Language(args.language),
        custom_rules=tuple(args.rule or ()),
        category=args.category,
    )
    prompt = _build_generator(project_dir).generate_prompt(request)
    _report_warnings(prompt)

    if args.output:
        Path(args.output).write_text(prompt.system_prompt, encoding="utf-8")
        _status("✅ Saved to: {}".format(args.output))
    else:
        print(prompt.system_prompt)


def _cmd_demo(args: argparse.Namespace) -> None:
    print(content.DEMO_TEXT)


def _cmd_activate(args: argparse.Namespace) -> None:
    """Create .zerocode/ with a universal prompt and a config file.

    RULES:
    - Existing .zerocode/ directories are reused, files are overwritten
    - config.json holds version, project name, ISO timestamp, principles
    """
    project_dir = Path.cwd()
    project_name = project_dir.name
    _status("🚀 Activating ZeroCode for: {}".format(project_name))

    prompt = _build_generator(project_dir).generate_prompt(
        AssemblyRequest(destination=DEFAULT_DESTINATION)
    )
    _report_warnings(prompt)

    zerocode_dir = _zerocode_dir(project_dir)
    (zerocode_dir / "universal-prompt.md").write_text(prompt.system_prompt, encoding="utf-8")

    config_data = {
        "version": __version__,
        "project": project_name,
        "initialized": datetime.now(timezone.utc).isoformat(),
        "principles": list(PRINCIPLES),
    }
    (zerocode_dir / "config.json").write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    _status("✅ ZeroCode activated!")
    _status("📁 Created {} directory".format(ZEROCODE_DIR_NAME))
    _status("🎯 Hickey/Linus/Zeus principles active")
    _status("\n💡 Next: Copy {}/universal-prompt.md to your AI tool".format(ZEROCODE_DIR_NAME))


def _cmd_zinit(args: argparse.Namespace) -> None:
    project_dir = Path.cwd()
    project_name = project_dir.name
    _status("🔍 Analyzing project: {}".format(project_name))

    technologies = detect_technologies(project_dir)
    _status("📊 Technologies: {}".format(", ".join(technologies) or "None detected"))

    request = AssemblyRequest(
        destination=DEFAULT_DESTINATION,
        custom_rules=(
            "Project: {}".format(project_name),
            "Technologies: {}".format(", ".join(technologies) or "None detected"),
        ),
    )
    prompt = _build_generator(project_dir).generate_prompt(request)
    _report_warnings(prompt)

    zeus_path = _zerocode_dir(project_dir) / "zeus-orchestrator.md"
    zeus_path.write_text(prompt.system_prompt, encoding="utf-8")

    _status("✅ Project analyzed!")
    _status("📁 Created zeus-orchestrator.md")
    _status("🎯 Zeus will orchestrate based on your project")


def _cmd_platforms(args: argparse.Namespace) -> None:
    registry = ProfileRegistry.default(overrides=configured_overrides())
    for key in registry.keys():
        profile = registry.resolve(key)
        lines = "{} lines".format(profile.line_limit) if profile.line_limit else "no line limit"
        marker = " (default)" if key == registry.default_profile.key else ""
        print("{:<10} {:>6} chars, {}, {}{}".format(
            key, profile.ceiling, lines, profile.format_style.value, marker,
        ))


# ---------------------------------------------------------------------------
# Parser and entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - A subcommand is required
    - generate: -p/--platform, -c/--complexity, -l/--language, -o/--output,
      --rule (repeatable), --detect, --category
    """
    parser = argparse.ArgumentParser(
        prog="zerocode",
        description="ZeroCode - AI development framework",
    )
    parser.add_argument("--version", action="version", version="%(prog)s {}".format(__version__))
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate AI prompt")
    generate.add_argument(
        "-p", "--platform",
        default=DEFAULT_PLATFORM,
        help="AI platform: {} (default: %(default)s).".format(", ".join(supported_destinations())),
    )
    generate.add_argument(
        "-c", "--complexity",
        default=DEFAULT_COMPLEXITY,
        choices=[c.value for c in Complexity],
        help="Complexity level (default: %(default)s).",
    )
    generate.add_argument(
        "-l", "--language",
        default=DEFAULT_LANGUAGE,
        choices=[lang.value for lang in Language],
        help="Language (default: %(default)s).",
    )
    generate.add_argument("-o", "--output", default=None, help="Save to file instead of stdout.")
    generate.add_argument(
        "--rule",
        action="append",
        default=None,
        help="Extra project directive. Can be specified multiple times.",
    )
    generate.add_argument(
        "--detect",
        action="store_true",
        help="Pick the platform from the --rule text when --platform is left at the default.",
    )
    generate.add_argument(
        "--category",
        default=None,
        help="Example category (react, node, python). Default: detected from the project.",
    )
    generate.set_defaults(handler=_cmd_generate)

    demo = subparsers.add_parser("demo", help="👀 See the difference ZeroCode makes")
    demo.set_defaults(handler=_cmd_demo)

    activate = subparsers.add_parser("activate", help="🚀 Activate ZeroCode for this project")
    activate.set_defaults(handler=_cmd_activate)

    zinit = subparsers.add_parser("zinit", help="🔍 Analyze project")
    zinit.set_defaults(handler=_cmd_zinit)

    platforms = subparsers.add_parser("platforms", help="List supported platforms and limits")
    platforms.set_defaults(handler=_cmd_platforms)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``zerocode`` console script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=resolve_log_level(LOG_LEVEL),
            format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        )
        args.handler(args)
    except ValueError as e:
        # Config errors (bad profile overrides file, unknown log level, etc.)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
