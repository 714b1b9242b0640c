"""
Tests for `services/brief_service.py`.

Covers the fixed Portuguese template, label lookups and age formatting.
"""

from __future__ import annotations

import pytest

from domain.lead import (
    AgeRange,
    CountryCode,
    GuidanceStyle,
    InterestType,
    LeadContext,
    LeadCore,
    LeadIdentity,
    PartyType,
    Segment,
    TimeBucket,
)
from services.brief_service import (
    INTEREST_LABELS,
    PARTY_LABELS,
    STYLE_LABELS,
    TIME_LABELS,
    compose_brief,
)


def _core(**overrides) -> LeadCore:
    identity = overrides.pop("identity", LeadIdentity(
        first_name="Ana",
        country_code=CountryCode.BR,
        country_name="Brasil",
        age_range=AgeRange.AGE_26_35,
    ))
    context = overrides.pop("context", LeadContext(
        time_bucket=TimeBucket.LONGO,
        party_type=PartyType.FAMILIA,
        guidance_style=GuidanceStyle.GUIADO,
    ))
    fields = dict(
        lead_id="9f8e7d6c-0000-4000-8000-000000000000",
        created_at="2025-01-01T12:00:00.000Z",
        source="organic",
        language="pt",
        identity=identity,
        context=context,
        interests=(InterestType.CLASSICOS, InterestType.GASTRONOMIA),
        tags=(),
        segment_primary=Segment.TOURIST_PREMIUM,
        segment_rules_applied=("intl_premium_time_deep_style",),
        teresa_mode_suggestions=("gastro",),
    )
    fields.update(overrides)
    return LeadCore(**fields)


def test_compose_brief_renders_full_template() -> None:
    expected = (
        "Olá Teresa! Sou Ana. Lead #9f8e...\n"
        "Contexto:\n"
        "- País: Brasil\n"
        "- Tempo: Dia inteiro\n"
        "- Companhia: Família\n"
        "- Interesses: Clássicos, Comer/Beber\n"
        "- Estilo: Passo a passo\n"
        "- Faixa etária: 26-35\n"
        "\n"
        "Pode me sugerir um plano e opções (pins/gastro/experiências) para hoje?"
    )

    assert compose_brief(_core()) == expected


def test_compose_brief_with_no_interests_leaves_list_empty() -> None:
    brief = compose_brief(_core(interests=()))

    assert "- Interesses: \n" in brief


def test_compose_brief_keeps_interest_input_order() -> None:
    brief = compose_brief(_core(interests=(InterestType.GRATIS, InterestType.OCULTO)))

    assert "- Interesses: Passeios Free, Segredos\n" in brief


@pytest.mark.parametrize(
    "age_range, rendered",
    [
        (AgeRange.AGE_18_25, "18-25"),
        (AgeRange.AGE_36_50, "36-50"),
        (AgeRange.AGE_51_PLUS, "51-plus"),
    ],
)
def test_compose_brief_formats_age_range(age_range: AgeRange, rendered: str) -> None:
    identity = LeadIdentity(
        first_name="Rui",
        country_code=CountryCode.PT,
        country_name="Portugal",
        age_range=age_range,
    )

    assert f"- Faixa etária: {rendered}\n" in compose_brief(_core(identity=identity))


def test_label_tables_cover_every_enum_value() -> None:
    assert set(INTEREST_LABELS) == set(InterestType)
    assert set(STYLE_LABELS) == set(GuidanceStyle)
    assert set(TIME_LABELS) == set(TimeBucket)
    assert set(PARTY_LABELS) == set(PartyType)


def test_label_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        TIME_LABELS[TimeBucket.CURTO] = "changed"  # type: ignore[index]
