"""
Audience segment classification.

Implements the priority-ordered segment rules:
1. International + premium time + deep style   -> TOURIST_PREMIUM
2. Portuguese + premium time + paid experiences -> DAYTRIP_PT
3. Portuguese + short visit + gastro or hidden  -> LOCAL_CURIOUS
4. Quick tips + free tours                      -> EXPLORER_AUTONOMOUS
Anything else                                   -> GENERAL

Rules are evaluated in table order and the first match wins. There is no
scoring; ordering is the only tie-break.

Classification reads the raw intake state. An absent country counts as
international, an absent time bucket or style never matches a rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from domain.lead import (
    CountryCode,
    GuidanceStyle,
    InterestType,
    LeadState,
    Segment,
    TimeBucket,
)

PREMIUM_TIME_BUCKETS = frozenset({TimeBucket.MEDIO, TimeBucket.LONGO, TimeBucket.ESTADIA})
DEEP_GUIDANCE_STYLES = frozenset({GuidanceStyle.CONTEXTO, GuidanceStyle.GUIADO, GuidanceStyle.CONVERSA})


@dataclass(frozen=True, slots=True)
class SegmentSignals:
    """Derived predicates, computed once per classification."""

    is_international: bool
    is_premium_time: bool
    is_deep_style: bool
    is_short_time: bool
    is_quick_style: bool
    wants_paid: bool
    wants_free: bool
    wants_hidden: bool
    wants_gastro: bool

    @classmethod
    def from_state(cls, state: LeadState) -> "SegmentSignals":
        code = state.country.code if state.country is not None else None
        interests = state.interests
        return cls(
            is_international=code != CountryCode.PT,
            is_premium_time=state.time_bucket in PREMIUM_TIME_BUCKETS,
            is_deep_style=state.guidance_style in DEEP_GUIDANCE_STYLES,
            is_short_time=state.time_bucket == TimeBucket.CURTO,
            is_quick_style=state.guidance_style == GuidanceStyle.RAPIDO,
            wants_paid=InterestType.EXPERIENCIAS_PAGAS in interests,
            wants_free=InterestType.GRATIS in interests,
            wants_hidden=InterestType.OCULTO in interests,
            wants_gastro=InterestType.GASTRONOMIA in interests,
        )


@dataclass(frozen=True, slots=True)
class SegmentRule:
    rule_id: str
    segment: Segment
    predicate: Callable[[SegmentSignals], bool]


@dataclass(frozen=True, slots=True)
class SegmentDecision:
    segment: Segment
    rules: Tuple[str, ...]  # zero or one rule id


SEGMENT_RULES: Tuple[SegmentRule, ...] = (
    SegmentRule(
        rule_id="intl_premium_time_deep_style",
        segment=Segment.TOURIST_PREMIUM,
        predicate=lambda s: s.is_international and s.is_premium_time and s.is_deep_style,
    ),
    SegmentRule(
        rule_id="pt_premium_time_paid",
        segment=Segment.DAYTRIP_PT,
        predicate=lambda s: not s.is_international and s.is_premium_time and s.wants_paid,
    ),
    SegmentRule(
        rule_id="pt_short_curious",
        segment=Segment.LOCAL_CURIOUS,
        predicate=lambda s: not s.is_international and s.is_short_time and (s.wants_gastro or s.wants_hidden),
    ),
    SegmentRule(
        rule_id="quick_free",
        segment=Segment.EXPLORER_AUTONOMOUS,
        predicate=lambda s: s.is_quick_style and s.wants_free,
    ),
)

FALLBACK_SEGMENT = Segment.GENERAL


def classify(state: LeadState, rules: Sequence[SegmentRule] = SEGMENT_RULES) -> SegmentDecision:
    """
    Select exactly one audience segment for the intake state.

    Total function: every well-typed state yields a decision. When no rule
    matches the segment is GENERAL and no rule id is reported.

    Args:
        state: Raw intake state (defaults are NOT applied before classifying)
        rules: Ordered rule table, first match wins

    Returns:
        SegmentDecision with the chosen segment and the matching rule id, if any
    """
    signals = SegmentSignals.from_state(state)

    for rule in rules:
        if rule.predicate(signals):
            return SegmentDecision(segment=rule.segment, rules=(rule.rule_id,))

    return SegmentDecision(segment=FALLBACK_SEGMENT, rules=())


__all__ = [
    "DEEP_GUIDANCE_STYLES",
    "FALLBACK_SEGMENT",
    "PREMIUM_TIME_BUCKETS",
    "SEGMENT_RULES",
    "SegmentDecision",
    "SegmentRule",
    "SegmentSignals",
    "classify",
]
