from typing import Optional

from fastapi import APIRouter
from fastapi import Depends

from rapidjobs import api_logger
from rapidjobs import dependencies
from rapidjobs.domain.waitlist.entities import WaitlistConfig
from rapidjobs.repository.email_api_repository import EmailApiRepository
from rapidjobs.service.entities import ErrorResponse
from rapidjobs.service.waitlist import join_waitlist_service
from rapidjobs.service.waitlist.entities import JoinWaitlistRequest
from rapidjobs.service.waitlist.entities import JoinWaitlistResponse

TAG = "Waitlist"
router = APIRouter(prefix="/waitlist")
router.tags = [TAG]

logger = api_logger.get()


@router.post(
    "",
    summary="Join the waitlist",
    description="Validates the email, sends a confirmation to it and notifies the team.",
    response_description="Returns ok, or an error message.",
    response_model=JoinWaitlistResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid email"},
        500: {"model": ErrorResponse, "description": "Email service error"},
    },
)
async def join_waitlist(
    request: JoinWaitlistRequest,
    config: WaitlistConfig = Depends(dependencies.get_waitlist_config),
    email_repository: Optional[EmailApiRepository] = Depends(
        dependencies.get_email_api_repository
    ),
):
    return await join_waitlist_service.execute(request, config, email_repository)
