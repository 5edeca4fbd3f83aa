from typing import Optional

from rapidjobs import api_logger
from rapidjobs.domain.waitlist import email_validation
from rapidjobs.domain.waitlist import join_waitlist_use_case
from rapidjobs.domain.waitlist.entities import WaitlistConfig
from rapidjobs.domain.waitlist.entities import WaitlistSignup
from rapidjobs.repository.email_api_repository import EmailApiRepository
from rapidjobs.service import error_responses
from rapidjobs.service.waitlist.entities import JoinWaitlistRequest
from rapidjobs.service.waitlist.entities import JoinWaitlistResponse

logger = api_logger.get()


async def execute(
    request: JoinWaitlistRequest,
    config: WaitlistConfig,
    email_repository: Optional[EmailApiRepository],
) -> JoinWaitlistResponse:
    email = email_validation.normalize(request.email)
    if not email_validation.is_valid(email):
        raise error_responses.InvalidEmailAPIError()

    if not email_repository:
        logger.error("Waitlist signup rejected, RESEND_API_KEY is not configured")
        raise error_responses.EmailServiceNotConfiguredAPIError()

    try:
        result = await join_waitlist_use_case.execute(
            WaitlistSignup(email=email), config, email_repository
        )
    except Exception as e:
        logger.error(f"Waitlist error: {str(e)}")
        raise error_responses.InternalServerAPIError()

    if result.notification_failed:
        logger.warning("Waitlist signup accepted without operator notification")
    return JoinWaitlistResponse(ok=True)
