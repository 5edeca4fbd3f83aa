from prometheus_client import Counter

from rapidjobs import api_logger
from rapidjobs.domain.waitlist import email_templates
from rapidjobs.domain.waitlist.entities import ConfirmationEmailError
from rapidjobs.domain.waitlist.entities import WaitlistConfig
from rapidjobs.domain.waitlist.entities import WaitlistSignup
from rapidjobs.domain.waitlist.entities import WaitlistSignupResult
from rapidjobs.repository.email_api_repository import EmailApiRepository

logger = api_logger.get()

waitlist_email_failures_counter = Counter(
    "waitlist_email_failures",
    "Failed waitlist email sends by kind",
    ["kind"],
)


async def execute(
    signup: WaitlistSignup,
    config: WaitlistConfig,
    email_repository: EmailApiRepository,
) -> WaitlistSignupResult:
    try:
        confirmation_id = await email_repository.send(
            email_templates.confirmation(config.sender, signup.email)
        )
    except Exception as e:
        waitlist_email_failures_counter.labels("confirmation").inc()
        logger.error(f"Waitlist confirmation email failed: {str(e)}")
        raise ConfirmationEmailError(signup.email, str(e))

    result = WaitlistSignupResult(confirmation_id=confirmation_id)
    if not config.owner_email:
        return result

    # The signup stands once the confirmation is out
    try:
        result.notification_id = await email_repository.send(
            email_templates.operator_notification(
                config.sender, config.owner_email, signup.email
            )
        )
    except Exception as e:
        waitlist_email_failures_counter.labels("notification").inc()
        logger.error(f"Waitlist operator notification failed: {str(e)}")
        result.notification_failed = True
    return result
