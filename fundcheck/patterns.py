"""Composition of the fund / inventory / unit name rules.

Real directory names are built by concatenation: an inventory is named
``<fund><delimiter><inventory label>`` and a unit
``<inventory name><delimiter><unit label>``. The effective rule of each level
therefore embeds the rules of its ancestors.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern

from .errors import InvalidPatternError

# Archive naming convention: an optional short alphanumeric prefix group on the
# fund number (e.g. "Р_123"), Cyrillic letter suffixes on labels ("1_А", "7а").
DEFAULT_FUND_PATTERN = r"(?:[А-ЯЁA-Z0-9]{1,4}_)?\d+[А-ЯЁа-яё]?"
DEFAULT_INVENTORY_PATTERN = r"\d+(?:_?[А-ЯЁа-яё])?"
DEFAULT_UNIT_PATTERN = r"\d+(?:_?[А-ЯЁа-яё])?"
DEFAULT_DELIMITER = "-"


@dataclass(frozen=True)
class LevelRule:
    """Compiled matching rule for one hierarchy level."""
    level: str
    pattern: str
    prefix: str = ""

    @property
    def regex(self) -> Pattern[str]:
        return re.compile(self.pattern)

    def matches(self, name: str) -> bool:
        return self.regex.fullmatch(name) is not None

    def with_prefix(self, prefix: str) -> "LevelRule":
        return LevelRule(self.level, self.pattern, prefix)


@dataclass(frozen=True)
class LevelRules:
    fund: LevelRule
    inventory: LevelRule
    unit: LevelRule


def _validate(level: str, pattern: str) -> None:
    try:
        re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(level, pattern, str(e)) from e


def compose_rules(
    fund: str = DEFAULT_FUND_PATTERN,
    inventory: str = DEFAULT_INVENTORY_PATTERN,
    unit: str = DEFAULT_UNIT_PATTERN,
    delimiter: str = DEFAULT_DELIMITER,
) -> LevelRules:
    """Build the three effective rules from per-level fragments.

    Fragments are grouped so an alternation in one level cannot swallow its
    neighbours; the delimiter is matched literally.
    """
    for level, fragment in (("fund", fund), ("inventory", inventory), ("unit", unit)):
        _validate(level, fragment)
    sep = re.escape(delimiter)
    fund_pattern = f"(?:{fund})"
    inventory_pattern = f"{fund_pattern}{sep}(?:{inventory})"
    unit_pattern = f"{inventory_pattern}{sep}(?:{unit})"
    rules = LevelRules(
        fund=LevelRule("fund", fund_pattern),
        inventory=LevelRule("inventory", inventory_pattern),
        unit=LevelRule("unit", unit_pattern),
    )
    for rule in (rules.fund, rules.inventory, rules.unit):
        _validate(rule.level, rule.pattern)
    return rules
