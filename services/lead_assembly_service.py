"""
Lead assembly service.

Orchestrates id generation, tagging, segmentation and the brief into the
final immutable LeadData, in two stages:

1. LeadCore: identifiers, defaults, tags, segment and Teresa-mode suggestions.
2. LeadData: the brief rendered from the core, percent-encoded into the
   WhatsApp message.

Classification runs on the raw intake state, before identity/context
defaults are applied. The stored context can therefore show a defaulted
value (e.g. "medio") where the segment was decided on an absent one.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List
from urllib.parse import quote

from domain.lead import (
    DEFAULT_COUNTRY_NAME,
    DEFAULT_FIRST_NAME,
    LEAD_LANGUAGE,
    LEAD_SOURCE,
    WHATSAPP_HOST,
    WHATSAPP_TO,
    AgeRange,
    CountryCode,
    GuidanceStyle,
    InterestType,
    LeadContext,
    LeadCore,
    LeadData,
    LeadIdentity,
    LeadState,
    PartyType,
    TimeBucket,
    WhatsAppMessage,
)
from domain.time import to_iso8601, utc_now
from services.brief_service import compose_brief
from services.identifier_service import LeadIdGenerator, generate_lead_id
from services.segmentation_service import classify
from services.tag_service import build_tags

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics.
_URI_COMPONENT_SAFE = "-_.!~*'()"

# Suggested Teresa modes, checked independently in this order.
TERESA_MODE_TRIGGERS = (
    (InterestType.GASTRONOMIA, "gastro"),
    (InterestType.OCULTO, "pins"),
    (InterestType.EXPERIENCIAS_PAGAS, "experiencias"),
)


def encode_uri_component(text: str) -> str:
    """Percent-encode UTF-8 text so it can be used verbatim as a query value."""
    return quote(text, safe=_URI_COMPONENT_SAFE)


def suggest_teresa_modes(interests: List[InterestType]) -> List[str]:
    return [mode for interest, mode in TERESA_MODE_TRIGGERS if interest in interests]


def build_identity(state: LeadState) -> LeadIdentity:
    country = state.country
    return LeadIdentity(
        first_name=state.first_name or DEFAULT_FIRST_NAME,
        country_code=country.code if country is not None else CountryCode.OTHER,
        country_name=(country.name if country is not None else "") or DEFAULT_COUNTRY_NAME,
        age_range=state.age_range or AgeRange.AGE_26_35,
    )


def build_context(state: LeadState) -> LeadContext:
    return LeadContext(
        time_bucket=state.time_bucket or TimeBucket.MEDIO,
        party_type=state.party_type or PartyType.SOLO,
        guidance_style=state.guidance_style or GuidanceStyle.RAPIDO,
    )


def build_lead_core(
    state: LeadState,
    *,
    id_generator: LeadIdGenerator = generate_lead_id,
    clock: Callable[[], datetime] = utc_now,
) -> LeadCore:
    """
    Stage 1: everything except the outbound message.

    Raises:
        IdentifierGenerationError: If no lead id could be generated
        ValueError: If the clock returns a non-UTC timestamp
    """
    lead_id = id_generator()
    created_at = to_iso8601("created_at", clock())
    decision = classify(state)

    return LeadCore(
        lead_id=lead_id,
        created_at=created_at,
        source=LEAD_SOURCE,
        language=LEAD_LANGUAGE,
        identity=build_identity(state),
        context=build_context(state),
        interests=tuple(state.interests),
        tags=tuple(build_tags(state)),
        segment_primary=decision.segment,
        segment_rules_applied=decision.rules,
        teresa_mode_suggestions=tuple(suggest_teresa_modes(state.interests)),
    )


def finalize_lead(core: LeadCore) -> LeadData:
    """Stage 2: compose the brief from the core and attach the WhatsApp message."""
    message = compose_brief(core)
    whatsapp = WhatsAppMessage(to=WHATSAPP_TO, prefilled_message=encode_uri_component(message))
    return LeadData.from_core(core, whatsapp)


def generate_lead_json(
    state: LeadState,
    *,
    id_generator: LeadIdGenerator = generate_lead_id,
    clock: Callable[[], datetime] = utc_now,
) -> LeadData:
    """
    Qualify a finished intake snapshot into a LeadData record.

    Args:
        state: Final intake snapshot from the wizard
        id_generator: Source of unique lead ids (default: random UUID4)
        clock: Source of the creation timestamp (default: current UTC time)

    Returns:
        Immutable LeadData

    Example:
        lead = generate_lead_json(state)
        print(lead.segment_primary, build_whatsapp_link(lead))
    """
    core = build_lead_core(state, id_generator=id_generator, clock=clock)
    lead = finalize_lead(core)

    logger.info(
        "Lead qualified",
        extra={
            "lead_id": lead.lead_id,
            "segment": lead.segment_primary.value,
            "rules": list(lead.segment_rules_applied),
        },
    )
    return lead


def build_whatsapp_link(lead: LeadData) -> str:
    """Deep link that opens WhatsApp with the brief prefilled."""
    return f"{WHATSAPP_HOST}/{lead.whatsapp.to}?text={lead.whatsapp.prefilled_message}"


__all__ = [
    "TERESA_MODE_TRIGGERS",
    "build_context",
    "build_identity",
    "build_lead_core",
    "build_whatsapp_link",
    "encode_uri_component",
    "finalize_lead",
    "generate_lead_json",
    "suggest_teresa_modes",
]
