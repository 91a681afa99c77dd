"""Interaction effects between metrics (synergy and antagonism)."""

from __future__ import annotations

from lifeimpact.interactions.engine import (
    InteractionDescription,
    InteractionEffectEngine,
)
from lifeimpact.interactions.rules import DEFAULT_RULES, InteractionRule

__all__ = [
    "DEFAULT_RULES",
    "InteractionDescription",
    "InteractionEffectEngine",
    "InteractionRule",
]
