"""
Marketing tag builder.

Tags are `namespace:value` strings emitted in a fixed canonical order:
country pair, time, party, each interest (selection order), style, age.
Absent fields produce no tag; defaults are never applied here.
"""

from __future__ import annotations

from typing import List

from domain.lead import CountryCode, LeadState


def build_tags(state: LeadState) -> List[str]:
    """
    Map intake answers to the ordered tag list.

    Example:
        state = LeadState(country=Country(CountryCode.PT, "Portugal"),
                          time_bucket=TimeBucket.CURTO)
        build_tags(state)
        # ["pais:PT", "perfil:nacional", "tempo:curto"]
    """
    tags: List[str] = []

    if state.country is not None:
        tags.append(f"pais:{state.country.code.value}")
        if state.country.code == CountryCode.PT:
            tags.append("perfil:nacional")
        else:
            tags.append("perfil:internacional")

    if state.time_bucket is not None:
        tags.append(f"tempo:{state.time_bucket.value}")
    if state.party_type is not None:
        tags.append(f"companhia:{state.party_type.value}")

    tags.extend(f"interesse:{interest.value}" for interest in state.interests)

    if state.guidance_style is not None:
        tags.append(f"estilo:{state.guidance_style.value}")
    if state.age_range is not None:
        tags.append(f"idade:{state.age_range.value}")

    return tags


__all__ = ["build_tags"]
