"""
Domain: Lead intake state and the qualified lead record.

Contract excerpts implemented here:
- A LeadState is the mutable accumulator filled in by the intake wizard.
  Every field is optional; absence is meaningful input to classification.
- A LeadCore holds every field of the qualified record except the outbound
  message, which is composed from the core itself.
- A LeadData is assembled exactly once from a LeadCore plus its outbound
  WhatsApp message and must not change thereafter.
- Every LeadData carries exactly one Segment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

# Fixed output values for the organic intake pipeline.
LEAD_SOURCE = "organic"
LEAD_LANGUAGE = "pt"
WHATSAPP_TO = "+351931358278"
WHATSAPP_HOST = "https://wa.me"

DEFAULT_FIRST_NAME = "Visitante"
DEFAULT_COUNTRY_NAME = "Outro"


class CountryCode(str, Enum):
    BR = "BR"
    PT = "PT"
    ES = "ES"
    FR = "FR"
    DE = "DE"
    UK = "UK"
    US = "US"
    OTHER = "OTHER"


class TimeBucket(str, Enum):
    CURTO = "curto"
    MEDIO = "medio"
    LONGO = "longo"
    ESTADIA = "estadia"


class PartyType(str, Enum):
    SOLO = "solo"
    CASAL = "casal"
    GRUPO = "grupo"
    FAMILIA = "familia"


class InterestType(str, Enum):
    CLASSICOS = "classicos"
    OCULTO = "oculto"
    GASTRONOMIA = "gastronomia"
    GRATIS = "gratis"
    EXPERIENCIAS_PAGAS = "experiencias_pagas"


class GuidanceStyle(str, Enum):
    RAPIDO = "rapido"
    CONTEXTO = "contexto"
    GUIADO = "guiado"
    CONVERSA = "conversa"


class AgeRange(str, Enum):
    AGE_18_25 = "18_25"
    AGE_26_35 = "26_35"
    AGE_36_50 = "36_50"
    AGE_51_PLUS = "51_plus"


class Segment(str, Enum):
    TOURIST_PREMIUM = "TOURIST_PREMIUM"
    DAYTRIP_PT = "DAYTRIP_PT"
    LOCAL_CURIOUS = "LOCAL_CURIOUS"
    EXPLORER_AUTONOMOUS = "EXPLORER_AUTONOMOUS"
    GENERAL = "GENERAL"


@dataclass(frozen=True, slots=True)
class Country:
    code: CountryCode
    name: str


@dataclass(slots=True)
class LeadState:
    """
    Intake answers collected step by step by the wizard.

    Mutable on purpose: the intake collaborator fills it in incrementally and
    the assembler reads a final snapshot of it.
    """

    country: Optional[Country] = None
    time_bucket: Optional[TimeBucket] = None
    party_type: Optional[PartyType] = None
    interests: list[InterestType] = field(default_factory=list)
    guidance_style: Optional[GuidanceStyle] = None
    first_name: Optional[str] = None
    age_range: Optional[AgeRange] = None

    def toggle_interest(self, interest: InterestType) -> None:
        """Select an interest, or deselect it if it was already selected."""
        if interest in self.interests:
            self.interests = [i for i in self.interests if i != interest]
        else:
            self.interests = [*self.interests, interest]

    def reset(self) -> None:
        self.country = None
        self.time_bucket = None
        self.party_type = None
        self.interests = []
        self.guidance_style = None
        self.first_name = None
        self.age_range = None


@dataclass(frozen=True, slots=True)
class LeadIdentity:
    first_name: str
    country_code: CountryCode
    country_name: str
    age_range: AgeRange


@dataclass(frozen=True, slots=True)
class LeadContext:
    time_bucket: TimeBucket
    party_type: PartyType
    guidance_style: GuidanceStyle


@dataclass(frozen=True, slots=True)
class WhatsAppMessage:
    to: str
    prefilled_message: str  # already percent-encoded


@dataclass(frozen=True, slots=True)
class LeadCore:
    """
    Qualified lead without its outbound message.

    The brief is rendered from this record, so the message can only be
    attached once the core is complete (see LeadData.from_core).
    """

    lead_id: str
    created_at: str
    source: str
    language: str
    identity: LeadIdentity
    context: LeadContext
    interests: tuple[InterestType, ...]
    tags: tuple[str, ...]
    segment_primary: Segment
    segment_rules_applied: tuple[str, ...]
    teresa_mode_suggestions: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LeadData:
    """
    Final qualified lead handed off to storage/delivery collaborators.

    Immutability:
    - Frozen, and every sequence is a tuple, so no field changes after assembly.
    """

    lead_id: str
    created_at: str
    source: str
    language: str
    identity: LeadIdentity
    context: LeadContext
    interests: tuple[InterestType, ...]
    tags: tuple[str, ...]
    segment_primary: Segment
    segment_rules_applied: tuple[str, ...]
    teresa_mode_suggestions: tuple[str, ...]
    whatsapp: WhatsAppMessage

    @classmethod
    def from_core(cls, core: LeadCore, whatsapp: WhatsAppMessage) -> "LeadData":
        return cls(
            lead_id=core.lead_id,
            created_at=core.created_at,
            source=core.source,
            language=core.language,
            identity=core.identity,
            context=core.context,
            interests=core.interests,
            tags=core.tags,
            segment_primary=core.segment_primary,
            segment_rules_applied=core.segment_rules_applied,
            teresa_mode_suggestions=core.teresa_mode_suggestions,
            whatsapp=whatsapp,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase field names of the output contract."""
        return {
            "leadId": self.lead_id,
            "createdAt": self.created_at,
            "source": self.source,
            "language": self.language,
            "identity": {
                "firstName": self.identity.first_name,
                "countryCode": self.identity.country_code.value,
                "countryName": self.identity.country_name,
                "ageRange": self.identity.age_range.value,
            },
            "context": {
                "timeBucket": self.context.time_bucket.value,
                "partyType": self.context.party_type.value,
                "guidanceStyle": self.context.guidance_style.value,
            },
            "interests": [i.value for i in self.interests],
            "tags": list(self.tags),
            "segmentPrimary": self.segment_primary.value,
            "segmentRulesApplied": list(self.segment_rules_applied),
            "teresaModeSuggestions": list(self.teresa_mode_suggestions),
            "whatsapp": {
                "to": self.whatsapp.to,
                "prefilledMessage": self.whatsapp.prefilled_message,
            },
        }

    def to_storage_record(self) -> dict[str, Any]:
        """
        Flatten into the row shape the lead store accepts.

        Pure transformation; identity and context are inlined, the rule and
        suggestion lists use the store's column names.
        """
        return {
            "source": self.source,
            "language": self.language,
            "firstName": self.identity.first_name,
            "countryCode": self.identity.country_code.value,
            "countryName": self.identity.country_name,
            "ageRange": self.identity.age_range.value,
            "timeBucket": self.context.time_bucket.value,
            "partyType": self.context.party_type.value,
            "guidanceStyle": self.context.guidance_style.value,
            "interests": [i.value for i in self.interests],
            "tags": list(self.tags),
            "segmentPrimary": self.segment_primary.value,
            "segmentRules": list(self.segment_rules_applied),
            "teresaModes": list(self.teresa_mode_suggestions),
            "whatsappMessage": self.whatsapp.prefilled_message,
        }
