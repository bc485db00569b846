"""
Sampling API Endpoints.

This module provides the endpoints of the sampling review workflow. Extensions
submit sampling requests, which are only acknowledged; reviewers then submit a
decision (approve, edit or deny) which is the point where the model is called.
"""

from fastapi import APIRouter, Depends

from sampling_gate.sampling.schemas import (
    SamplingApprovalRequest,
    SamplingPendingResponse,
    SamplingRequest,
    SamplingResponse,
)
from sampling_gate.server.services.deps import SamplingServiceDep, verify_secret_key

router = APIRouter(dependencies=[Depends(verify_secret_key)])


@router.post(
    "/request",
    response_model=SamplingPendingResponse,
    summary="Submit Sampling Request",
    description="Register a sampling request from an extension. The model is not called until a reviewer decides.",
    response_description="Pending status acknowledgement.",
    responses={
        401: {"description": "Unauthorized - invalid secret key"},
        500: {"description": "Internal server error"},
    },
)
async def submit_sampling_request(request: SamplingRequest, service: SamplingServiceDep):
    """
    Submit a sampling request.

    Returns immediately with a pending status; the reviewer is notified out of band.
    """
    return await service.submit_request(request)


@router.post(
    "/approve",
    response_model=SamplingResponse,
    summary="Submit Sampling Decision",
    description="Approve, edit or deny a sampling request. Approve and edit call the session agent's model.",
    response_description="The model reply, or the denial message.",
    responses={
        400: {"description": "Unknown action or edit without replacement messages"},
        401: {"description": "Unauthorized - invalid secret key"},
        500: {"description": "Session, agent or provider failure"},
    },
)
async def submit_sampling_decision(decision: SamplingApprovalRequest, service: SamplingServiceDep):
    """
    Submit a reviewer decision.

    Errors raised by the service are mapped to HTTP responses by the sampling
    exception handlers.
    """
    return await service.resolve_decision(decision)
