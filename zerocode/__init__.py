"""ZeroCode — adaptive AI assistant prompt generator.

WHY: Every AI coding assistant has a different appetite for context.
Cursor and Claude accept long, richly formatted prompts; local Ollama
models choke on them. This package assembles one prompt from a library
of reusable fragments and tunes it for the destination platform.

HOW: Four-stage pipeline — assemble (greedy fragment inclusion under a
size budget), transform (per-platform rewrite steps), truncate (hard
ceiling safety net), report (applied steps and warnings). Each stage is
independently testable.

RULES:
- The core rules fragment is always included
- Adding a new platform = one profile entry + one transform module
- Warnings are returned as data; callers decide how to show them
"""

__version__ = "1.0.1"
