"""
Tests for `domain/lead.py` and `domain/time.py`.

Covers:
- LeadState intake operations (interest toggling, reset).
- LeadData is immutable once assembled.
- Serialization uses the exact field names of the output contract.
- Timestamps must be UTC and render as ISO-8601 with a Z suffix.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from domain.lead import (
    AgeRange,
    Country,
    CountryCode,
    GuidanceStyle,
    InterestType,
    LeadContext,
    LeadCore,
    LeadData,
    LeadIdentity,
    LeadState,
    PartyType,
    Segment,
    TimeBucket,
    WhatsAppMessage,
)
from domain.time import require_utc_timestamp, to_iso8601


def _core() -> LeadCore:
    return LeadCore(
        lead_id="abcd1234",
        created_at="2025-01-01T12:00:00.000Z",
        source="organic",
        language="pt",
        identity=LeadIdentity(
            first_name="Ana",
            country_code=CountryCode.PT,
            country_name="Portugal",
            age_range=AgeRange.AGE_36_50,
        ),
        context=LeadContext(
            time_bucket=TimeBucket.CURTO,
            party_type=PartyType.CASAL,
            guidance_style=GuidanceStyle.CONTEXTO,
        ),
        interests=(InterestType.GASTRONOMIA, InterestType.OCULTO),
        tags=("pais:PT", "perfil:nacional"),
        segment_primary=Segment.LOCAL_CURIOUS,
        segment_rules_applied=("pt_short_curious",),
        teresa_mode_suggestions=("gastro", "pins"),
    )


def _lead() -> LeadData:
    return LeadData.from_core(_core(), WhatsAppMessage(to="+351931358278", prefilled_message="Ol%C3%A1"))


def test_lead_state_defaults_are_empty() -> None:
    state = LeadState()

    assert state.country is None
    assert state.interests == []
    assert state.first_name is None


def test_lead_state_interests_are_not_shared_between_instances() -> None:
    a = LeadState()
    b = LeadState()
    a.interests.append(InterestType.GRATIS)

    assert b.interests == []


def test_toggle_interest_appends_in_selection_order() -> None:
    state = LeadState()
    state.toggle_interest(InterestType.OCULTO)
    state.toggle_interest(InterestType.CLASSICOS)

    assert state.interests == [InterestType.OCULTO, InterestType.CLASSICOS]


def test_toggle_interest_removes_selected_interest_and_keeps_order() -> None:
    state = LeadState(interests=[InterestType.OCULTO, InterestType.GRATIS, InterestType.CLASSICOS])
    state.toggle_interest(InterestType.GRATIS)

    assert state.interests == [InterestType.OCULTO, InterestType.CLASSICOS]


def test_reset_clears_every_answer() -> None:
    state = LeadState(
        country=Country(code=CountryCode.BR, name="Brasil"),
        time_bucket=TimeBucket.LONGO,
        party_type=PartyType.GRUPO,
        interests=[InterestType.GRATIS],
        guidance_style=GuidanceStyle.GUIADO,
        first_name="João",
        age_range=AgeRange.AGE_18_25,
    )
    state.reset()

    assert state == LeadState()


def test_lead_data_from_core_copies_every_core_field() -> None:
    core = _core()
    lead = LeadData.from_core(core, WhatsAppMessage(to="+1", prefilled_message="x"))

    assert lead.lead_id == core.lead_id
    assert lead.identity is core.identity
    assert lead.tags == core.tags
    assert lead.segment_rules_applied == core.segment_rules_applied
    assert lead.teresa_mode_suggestions == core.teresa_mode_suggestions
    assert lead.whatsapp.to == "+1"


def test_lead_data_is_immutable() -> None:
    lead = _lead()

    with pytest.raises(FrozenInstanceError):
        lead.segment_primary = Segment.GENERAL  # type: ignore[misc]
    with pytest.raises(FrozenInstanceError):
        lead.identity.first_name = "Outra"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        lead.tags.append("x")  # type: ignore[attr-defined]


def test_lead_data_to_dict_uses_contract_field_names() -> None:
    data = _lead().to_dict()

    assert data == {
        "leadId": "abcd1234",
        "createdAt": "2025-01-01T12:00:00.000Z",
        "source": "organic",
        "language": "pt",
        "identity": {
            "firstName": "Ana",
            "countryCode": "PT",
            "countryName": "Portugal",
            "ageRange": "36_50",
        },
        "context": {
            "timeBucket": "curto",
            "partyType": "casal",
            "guidanceStyle": "contexto",
        },
        "interests": ["gastronomia", "oculto"],
        "tags": ["pais:PT", "perfil:nacional"],
        "segmentPrimary": "LOCAL_CURIOUS",
        "segmentRulesApplied": ["pt_short_curious"],
        "teresaModeSuggestions": ["gastro", "pins"],
        "whatsapp": {"to": "+351931358278", "prefilledMessage": "Ol%C3%A1"},
    }


def test_lead_data_to_storage_record_flattens_identity_and_context() -> None:
    record = _lead().to_storage_record()

    assert record["firstName"] == "Ana"
    assert record["countryCode"] == "PT"
    assert record["timeBucket"] == "curto"
    assert record["segmentRules"] == ["pt_short_curious"]
    assert record["teresaModes"] == ["gastro", "pins"]
    assert record["whatsappMessage"] == "Ol%C3%A1"
    assert "leadId" not in record
    assert "createdAt" not in record


def test_to_iso8601_renders_milliseconds_and_z_suffix() -> None:
    value = datetime(2025, 3, 4, 5, 6, 7, 891000, tzinfo=timezone.utc)

    assert to_iso8601("created_at", value) == "2025-03-04T05:06:07.891Z"


def test_require_utc_timestamp_rejects_naive_and_offset_timestamps() -> None:
    with pytest.raises(ValueError):
        require_utc_timestamp("created_at", datetime(2025, 1, 1))
    with pytest.raises(ValueError):
        require_utc_timestamp(
            "created_at", datetime(2025, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        )
