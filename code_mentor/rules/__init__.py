"""Per-language heuristic rule batteries."""

from typing import Dict, Tuple

from ..models import Language
from .common import Rule
from .python import PYTHON_RULES
from .c_family import C_FAMILY_RULES
from .csharp import CSHARP_RULES

# Languages missing here have no battery and always fall back
RULE_BATTERIES: Dict[Language, Tuple[Rule, ...]] = {
    Language.PYTHON: PYTHON_RULES,
    Language.C: C_FAMILY_RULES,
    Language.CPP: C_FAMILY_RULES,
    Language.CSHARP: CSHARP_RULES,
}


def get_battery(language) -> Tuple[Rule, ...]:
    """Rules for a language tag; empty for unknown or unbattered languages."""
    lang = Language.from_value(language)
    if lang is None:
        return ()
    return RULE_BATTERIES.get(lang, ())


__all__ = [
    "Rule",
    "RULE_BATTERIES",
    "get_battery",
    "PYTHON_RULES",
    "C_FAMILY_RULES",
    "CSHARP_RULES",
]
