"""Static informational pages."""

from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from blog.config import Settings
from blog.infrastructure.dependencies import get_settings_dependency

router = APIRouter(tags=["Pages"], default_response_class=HTMLResponse)


@router.get("/", name="home")
async def home() -> HTMLResponse:
    return HTMLResponse("<h1>Hello, welcome to my goblog!</h1>")


@router.get("/about", name="about")
async def about(settings: Settings = Depends(get_settings_dependency)) -> HTMLResponse:
    email = escape(settings.contact_email)
    return HTMLResponse(
        "This blog is used to record programming notes. "
        "If you have feedback or suggestions, please contact "
        f'<a href="mailto:{email}">{email}</a>'
    )
