"""Ollama transform — concise preamble for local models.

WHY: Local models have small context windows and often render emoji and
nested markdown poorly. The Ollama profile is declared plain and
symbol-free, so the base pipeline adds symbol removal and structural
simplification after this preamble.
"""

from __future__ import annotations

from zerocode.transforms.base import BaseTransform

OLLAMA_PREAMBLE = """
## Ollama Local Model Optimization

You are optimized for local model efficiency. Focus on:
- Concise, direct responses
- Essential information only
- Minimal context switching
- Clear, simple language
- Efficient token usage

"""


class OllamaTransform(BaseTransform):

    @property
    def name(self) -> str:
        return "Ollama Local Model"

    @property
    def preamble(self) -> str:
        return OLLAMA_PREAMBLE
