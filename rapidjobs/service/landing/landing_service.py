from dataclasses import dataclass
from functools import partial
from typing import Any
from typing import Callable
from typing import Dict
from typing import Optional

import settings
from rapidjobs.domain.landing import translations

# Strings the form script needs at runtime
FORM_MESSAGE_KEYS = [
    "hero.join",
    "hero.joining",
    "hero.invalid",
    "hero.success",
    "hero.error",
]


@dataclass(frozen=True)
class LandingPage:
    locale: str
    context: Dict[str, Any]
    persist_locale: bool


def resolve_locale(query_locale: Optional[str], cookie_locale: Optional[str]) -> str:
    if translations.is_supported(query_locale):
        return query_locale
    if translations.is_supported(cookie_locale):
        return cookie_locale
    return settings.DEFAULT_LOCALE


def execute(
    query_locale: Optional[str], cookie_locale: Optional[str]
) -> LandingPage:
    locale = resolve_locale(query_locale, cookie_locale)
    t: Callable[[str], str] = partial(translations.translate, locale)
    context = {
        "locale": locale,
        "locales": settings.SUPPORTED_LOCALES,
        "t": t,
        "form_messages": {key: t(key) for key in FORM_MESSAGE_KEYS},
        "app_store_url": settings.APP_STORE_URL,
        "play_store_url": settings.PLAY_STORE_URL,
    }
    return LandingPage(
        locale=locale,
        context=context,
        persist_locale=translations.is_supported(query_locale)
        and query_locale != cookie_locale,
    )
