from typing import Optional

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

import settings
from rapidjobs import dependencies
from rapidjobs.service.landing import landing_service

router = APIRouter(include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def landing(
    request: Request,
    lang: Optional[str] = Query(default=None),
    templates: Jinja2Templates = Depends(dependencies.get_templates),
):
    page = landing_service.execute(
        lang, request.cookies.get(settings.LOCALE_COOKIE_NAME)
    )
    response = templates.TemplateResponse(request, "landing.html", page.context)
    if page.persist_locale:
        response.set_cookie(
            settings.LOCALE_COOKIE_NAME,
            page.locale,
            max_age=settings.LOCALE_COOKIE_MAX_AGE_SECONDS,
            samesite="lax",
        )
    return response
