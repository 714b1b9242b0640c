"""
Leads API Endpoints.

Endpoints for qualifying intake answers into tagged, segmented leads.
"""

import logging

from fastapi import APIRouter, HTTPException

from api.models import (
    LeadQualificationResponse,
    LeadStateRequest,
    SegmentResponse,
    TagsResponse,
)
from services.identifier_service import IdentifierGenerationError
from services.lead_assembly_service import build_whatsapp_link, generate_lead_json
from services.segmentation_service import classify
from services.tag_service import build_tags

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/leads/qualify",
    response_model=LeadQualificationResponse,
    summary="Qualify Lead",
    description="Turn finished wizard answers into a tagged, segmented lead with a prefilled WhatsApp message."
)
def qualify_lead(request: LeadStateRequest):
    """
    Qualify a lead from the intake wizard answers.

    **How it works:**
    1. Builds the ordered marketing tags from the answers given
    2. Picks one audience segment (first matching rule wins)
    3. Fills identity/context defaults for unanswered questions
    4. Renders the Teresa brief and encodes it into the WhatsApp deep link

    Nothing is persisted; the caller stores or delivers the lead.
    """
    try:
        lead = generate_lead_json(request.to_domain())

        return LeadQualificationResponse.model_validate({
            "lead": lead.to_dict(),
            "whatsappUrl": build_whatsapp_link(lead),
        })

    except IdentifierGenerationError as e:
        raise HTTPException(
            status_code=503,
            detail=f"Lead id could not be generated: {str(e)}"
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Lead qualification failed")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to qualify lead: {str(e)}"
        )


@router.post(
    "/leads/tags",
    response_model=TagsResponse,
    summary="Build Lead Tags",
    description="Ordered marketing tags for the answered intake questions only."
)
def lead_tags(request: LeadStateRequest):
    return TagsResponse(tags=build_tags(request.to_domain()))


@router.post(
    "/leads/segment",
    response_model=SegmentResponse,
    summary="Classify Lead Segment",
    description="Audience segment for the raw intake answers, with the rule that selected it."
)
def lead_segment(request: LeadStateRequest):
    decision = classify(request.to_domain())
    return SegmentResponse(segment=decision.segment, rules=list(decision.rules))
