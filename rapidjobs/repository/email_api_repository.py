from typing import Optional

import aiohttp

from rapidjobs import api_logger
from rapidjobs.domain.waitlist.entities import EmailMessage
from rapidjobs.domain.waitlist.entities import EmailProviderError

logger = api_logger.get()


class EmailApiRepository:
    """Resend transactional email API"""

    def __init__(self, api_base_url: str, api_key: str):
        self.api_base_url = api_base_url
        self.api_key = api_key

    async def send(self, message: EmailMessage) -> Optional[str]:
        """
        Returns the provider message id, raises EmailProviderError if the
        provider rejects the message
        """
        async with aiohttp.ClientSession() as session:
            response = await session.post(
                f"{self.api_base_url.rstrip('/')}/emails",
                headers={"Authorization": f"Bearer {self.api_key}"},
                json={
                    "from": message.sender,
                    "to": message.to,
                    "subject": message.subject,
                    "html": message.html,
                },
            )
            response_json = await _get_json(response)
        if response.status >= 400:
            raise EmailProviderError(
                response.status,
                response_json.get("message") or f"HTTP {response.status}",
            )
        message_id = response_json.get("id")
        logger.debug(f"Email sent, id={message_id} subject={message.subject}")
        return message_id


async def _get_json(response: aiohttp.ClientResponse) -> dict:
    try:
        body = await response.json(content_type=None)
    except Exception:
        return {}
    return body if isinstance(body, dict) else {}
