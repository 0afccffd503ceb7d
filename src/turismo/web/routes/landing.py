from datetime import datetime

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from turismo.web.content import (
    ABOUT,
    AFFILIATION_NOTE,
    BRAND,
    FEATURES,
    FOOTER_LINKS,
    HERO,
    META,
    NOTIFY,
)

router = APIRouter(tags=["ui"], include_in_schema=False)


def current_year() -> int:
    return datetime.now().year


@router.get("/", response_class=HTMLResponse)
async def landing(request: Request):
    """Public landing page (Jinja2 template)."""
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "landing.html",
        {
            "brand": BRAND,
            "meta": META,
            "hero": HERO,
            "about": ABOUT,
            "features": FEATURES,
            "notify": NOTIFY,
            "footer_links": FOOTER_LINKS,
            "affiliation_note": AFFILIATION_NOTE,
            "year": current_year(),
        },
    )
