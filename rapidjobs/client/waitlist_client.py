from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin

import aiohttp

from rapidjobs.domain.landing import translations
from rapidjobs.domain.waitlist import email_validation

WAITLIST_PATH = "api/waitlist"


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    message: str
    # False when client side validation stopped the submission
    request_sent: bool


class WaitlistClient:
    """
    Submits the landing page waitlist form: validates locally, sends one
    POST and maps the response to a localized message. No retries.
    """

    def __init__(
        self,
        base_url: str,
        locale: str = "en",
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.locale = locale
        self._session = session
        self.is_busy = False

    async def join(self, email: str) -> SubmissionResult:
        if not email_validation.is_valid(email):
            return SubmissionResult(
                ok=False, message=self._t("hero.invalid"), request_sent=False
            )

        self.is_busy = True
        try:
            status, body = await self._post(email)
            if 200 <= status < 300:
                return SubmissionResult(
                    ok=True, message=self._t("hero.success"), request_sent=True
                )
            return SubmissionResult(
                ok=False,
                message=_get_error(body) or self._t("hero.error"),
                request_sent=True,
            )
        except (aiohttp.ClientError, ValueError):
            return SubmissionResult(
                ok=False, message=self._t("hero.error"), request_sent=True
            )
        finally:
            self.is_busy = False

    async def _post(self, email: str):
        url = urljoin(self.base_url, WAITLIST_PATH)
        if self._session:
            return await _post_json(self._session, url, email)
        async with aiohttp.ClientSession() as session:
            return await _post_json(session, url, email)

    def _t(self, key: str) -> str:
        return translations.translate(self.locale, key)


async def _post_json(session: aiohttp.ClientSession, url: str, email: str):
    async with session.post(url, json={"email": email}) as response:
        # Raises ValueError subclasses on a body that is not JSON
        body = await response.json(content_type=None)
        return response.status, body


def _get_error(body) -> Optional[str]:
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None
