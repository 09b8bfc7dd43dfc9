"""Core assembly, truncation, and data model modules.

WHY: The core package holds the budget logic that every platform shares:
the size estimator, the fragment library, the greedy assembler, the
structural matchers, and the truncator. Platform-specific formatting
lives in zerocode.transforms, never here.

HOW: models.py defines the data structures, library.py holds fragments,
assembler.py and truncator.py implement the size policy, generator.py
wires the stages together.

RULES:
- Core operations never raise for missing fragments or odd document shapes
- Budget ratios come from zerocode.config, not literals
- Warnings are returned as data, never logged
"""
