"""
API Request and Response Models.

Pydantic models for validating intake payloads and serializing qualified
leads. Field aliases carry the camelCase names used by the wizard and by the
lead output contract.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.lead import (
    AgeRange,
    Country,
    CountryCode,
    GuidanceStyle,
    InterestType,
    LeadState,
    PartyType,
    Segment,
    TimeBucket,
)


# ============================================================================
# Intake Models
# ============================================================================

class CountryRequest(BaseModel):
    """Country picked in the wizard."""
    code: CountryCode
    name: str = Field(..., min_length=1)


class LeadStateRequest(BaseModel):
    """Intake answers; every field is optional."""
    country: Optional[CountryRequest] = None
    time_bucket: Optional[TimeBucket] = Field(None, alias="timeBucket")
    party_type: Optional[PartyType] = Field(None, alias="partyType")
    interests: List[InterestType] = Field(default_factory=list)
    guidance_style: Optional[GuidanceStyle] = Field(None, alias="guidanceStyle")
    first_name: Optional[str] = Field(None, alias="firstName")
    age_range: Optional[AgeRange] = Field(None, alias="ageRange")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "country": {"code": "PT", "name": "Portugal"},
                "timeBucket": "curto",
                "partyType": "solo",
                "interests": ["gastronomia"],
                "guidanceStyle": "contexto",
                "firstName": "Ana",
                "ageRange": "26_35"
            }
        }

    def to_domain(self) -> LeadState:
        country = None
        if self.country is not None:
            country = Country(code=self.country.code, name=self.country.name)
        return LeadState(
            country=country,
            time_bucket=self.time_bucket,
            party_type=self.party_type,
            interests=list(self.interests),
            guidance_style=self.guidance_style,
            first_name=self.first_name,
            age_range=self.age_range,
        )


# ============================================================================
# Qualified Lead Models
# ============================================================================

class LeadIdentityResponse(BaseModel):
    first_name: str = Field(..., alias="firstName")
    country_code: CountryCode = Field(..., alias="countryCode")
    country_name: str = Field(..., alias="countryName")
    age_range: AgeRange = Field(..., alias="ageRange")


class LeadContextResponse(BaseModel):
    time_bucket: TimeBucket = Field(..., alias="timeBucket")
    party_type: PartyType = Field(..., alias="partyType")
    guidance_style: GuidanceStyle = Field(..., alias="guidanceStyle")


class WhatsAppResponse(BaseModel):
    to: str
    prefilled_message: str = Field(..., alias="prefilledMessage")


class LeadDataResponse(BaseModel):
    """Qualified lead, in the output contract shape."""
    lead_id: str = Field(..., alias="leadId")
    created_at: str = Field(..., alias="createdAt")
    source: str
    language: str
    identity: LeadIdentityResponse
    context: LeadContextResponse
    interests: List[InterestType]
    tags: List[str]
    segment_primary: Segment = Field(..., alias="segmentPrimary")
    segment_rules_applied: List[str] = Field(..., alias="segmentRulesApplied")
    teresa_mode_suggestions: List[str] = Field(..., alias="teresaModeSuggestions")
    whatsapp: WhatsAppResponse


class LeadQualificationResponse(BaseModel):
    """Qualified lead plus the ready-to-open WhatsApp deep link."""
    lead: LeadDataResponse
    whatsapp_url: str = Field(..., alias="whatsappUrl")


class TagsResponse(BaseModel):
    tags: List[str]


class SegmentResponse(BaseModel):
    segment: Segment
    rules: List[str]

    class Config:
        json_schema_extra = {
            "example": {
                "segment": "LOCAL_CURIOUS",
                "rules": ["pt_short_curious"]
            }
        }


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    detail: Optional[str] = None
    status_code: int
