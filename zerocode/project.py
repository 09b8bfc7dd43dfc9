"""Project inspection: example category and technology detection.

WHY: The example block in a prompt is only useful if it matches the
project's stack. React examples in a Django repo waste budget. The
generator asks this module which example category fits the current
project, and the zinit command lists detected technologies.

HOW: Reads well-known manifest files in the project directory.
package.json is scanned for framework names as plain substrings (no
JSON parsing, so a half-written manifest still works). Python projects
are recognized by pyproject.toml or requirements.txt.

RULES:
- package.json wins over Python manifests
- react → "react", vue → "vue", angular → "angular",
  express / fastify → "node"
- pyproject.toml or requirements.txt → "python"
- Nothing recognized (or unreadable manifest) → "node"
- detect_technologies() reports one entry per manifest found
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "node"

# Substring checks against package.json, in priority order
_PACKAGE_JSON_CATEGORIES = [
    ("react", "react"),
    ("vue", "vue"),
    ("angular", "angular"),
    ("express", "node"),
    ("fastify", "node"),
]

_PYTHON_MANIFESTS = ("pyproject.toml", "requirements.txt")

# Manifest file → technology name, for detect_technologies()
_TECHNOLOGY_MANIFESTS = [
    ("package.json", "JavaScript/TypeScript"),
    ("requirements.txt", "Python"),
    ("pyproject.toml", "Python"),
    ("Cargo.toml", "Rust"),
    ("go.mod", "Go"),
]


def detect_project_type(directory: str | Path) -> str:
    """Return the example category for the project in *directory*."""
    directory = Path(directory)
    package_json = directory / "package.json"

    if package_json.is_file():
        try:
            manifest = package_json.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", package_json, e)
            return DEFAULT_CATEGORY
        for needle, category in _PACKAGE_JSON_CATEGORIES:
            if needle in manifest:
                return category
        return DEFAULT_CATEGORY

    if any((directory / name).is_file() for name in _PYTHON_MANIFESTS):
        return "python"

    return DEFAULT_CATEGORY


def detect_technologies(directory: str | Path) -> List[str]:
    """List technologies implied by manifest files in *directory*."""
    directory = Path(directory)
    technologies: List[str] = []
    for filename, technology in _TECHNOLOGY_MANIFESTS:
        if (directory / filename).is_file() and technology not in technologies:
            technologies.append(technology)
    return technologies
