import os
from typing import Optional

from fastapi.templating import Jinja2Templates

import settings
from rapidjobs import api_logger
from rapidjobs.domain.waitlist.entities import WaitlistConfig
from rapidjobs.repository.email_api_repository import EmailApiRepository

TEMPLATES_DIRECTORY = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "templates"
)

logger = api_logger.get()

_email_api_repository: Optional[EmailApiRepository] = None
_waitlist_config: WaitlistConfig = WaitlistConfig(sender=settings.FROM_EMAIL)
_templates: Jinja2Templates = Jinja2Templates(directory=TEMPLATES_DIRECTORY)


# pylint: disable=W0603
def init_globals():
    global _email_api_repository
    global _waitlist_config

    # No credential, no client: the waitlist service reports the misconfiguration
    if settings.RESEND_API_KEY:
        _email_api_repository = EmailApiRepository(
            settings.RESEND_API_BASE_URL, settings.RESEND_API_KEY
        )
    else:
        _email_api_repository = None
        logger.warning("RESEND_API_KEY is not set, waitlist emails are disabled")

    _waitlist_config = WaitlistConfig(
        sender=settings.FROM_EMAIL,
        owner_email=settings.OWNER_EMAIL or None,
    )


def get_email_api_repository() -> Optional[EmailApiRepository]:
    return _email_api_repository


def get_waitlist_config() -> WaitlistConfig:
    return _waitlist_config


def get_templates() -> Jinja2Templates:
    return _templates
