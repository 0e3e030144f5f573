"""Invitation link routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from invitelink.application.usecase.invite import (
    ComposeInvitationRequest,
    ComposeInvitationResponse,
    ComposeInvitationUseCase,
    ParseInvitationRequest,
    ParseInvitationResponse,
    ParseInvitationUseCase,
)

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.post("/parse", response_model=ParseInvitationResponse)
async def parse_invitation(
    request: ParseInvitationRequest,
    parse_invitation_use_case: FromDishka[ParseInvitationUseCase],
) -> ParseInvitationResponse:
    """Validate an invitation link.

    Invalid links are reported with valid=False rather than an error
    status, so clients can show a single generic message.
    """
    return await parse_invitation_use_case.execute(request)


@router.post("/compose", response_model=ComposeInvitationResponse)
async def compose_invitation(
    request: ComposeInvitationRequest,
    compose_invitation_use_case: FromDishka[ComposeInvitationUseCase],
) -> ComposeInvitationResponse:
    """Compose the share link for a community snapshot."""
    return await compose_invitation_use_case.execute(request)
