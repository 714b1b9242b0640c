"""
Teresa brief composer.

Renders the fixed Portuguese outreach template from a LeadCore. The output
is plain text; percent-encoding happens in the assembler.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from domain.lead import GuidanceStyle, InterestType, LeadCore, PartyType, TimeBucket

INTEREST_LABELS: Mapping[InterestType, str] = MappingProxyType({
    InterestType.CLASSICOS: "Clássicos",
    InterestType.OCULTO: "Segredos",
    InterestType.GASTRONOMIA: "Comer/Beber",
    InterestType.GRATIS: "Passeios Free",
    InterestType.EXPERIENCIAS_PAGAS: "Experiências",
})

STYLE_LABELS: Mapping[GuidanceStyle, str] = MappingProxyType({
    GuidanceStyle.RAPIDO: "Dicas rápidas",
    GuidanceStyle.CONTEXTO: "Com história",
    GuidanceStyle.GUIADO: "Passo a passo",
    GuidanceStyle.CONVERSA: "Conversar",
})

TIME_LABELS: Mapping[TimeBucket, str] = MappingProxyType({
    TimeBucket.CURTO: "1-2h",
    TimeBucket.MEDIO: "Meio dia",
    TimeBucket.LONGO: "Dia inteiro",
    TimeBucket.ESTADIA: "Dias",
})

PARTY_LABELS: Mapping[PartyType, str] = MappingProxyType({
    PartyType.SOLO: "Solo",
    PartyType.CASAL: "Casal",
    PartyType.GRUPO: "Amigos",
    PartyType.FAMILIA: "Família",
})

CLOSING_QUESTION = "Pode me sugerir um plano e opções (pins/gastro/experiências) para hoje?"


def compose_brief(core: LeadCore) -> str:
    """
    Render the human-readable brief for a lead.

    Example output:
        Olá Teresa! Sou Ana. Lead #3f2a...
        Contexto:
        - País: Portugal
        - Tempo: 1-2h
        - Companhia: Solo
        - Interesses: Comer/Beber
        - Estilo: Com história
        - Faixa etária: 26-35

        Pode me sugerir um plano e opções (pins/gastro/experiências) para hoje?
    """
    identity = core.identity
    context = core.context

    interests = ", ".join(INTEREST_LABELS[i] for i in core.interests)
    age = identity.age_range.value.replace("_", "-", 1)

    lines = [
        f"Olá Teresa! Sou {identity.first_name}. Lead #{core.lead_id[:4]}...",
        "Contexto:",
        f"- País: {identity.country_name}",
        f"- Tempo: {TIME_LABELS[context.time_bucket]}",
        f"- Companhia: {PARTY_LABELS[context.party_type]}",
        f"- Interesses: {interests}",
        f"- Estilo: {STYLE_LABELS[context.guidance_style]}",
        f"- Faixa etária: {age}",
        "",
        CLOSING_QUESTION,
    ]
    return "\n".join(lines)


__all__ = [
    "CLOSING_QUESTION",
    "INTEREST_LABELS",
    "PARTY_LABELS",
    "STYLE_LABELS",
    "TIME_LABELS",
    "compose_brief",
]
