"""Page routes: the submission view and short code resolution."""

from pathlib import Path as FilePath

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from loguru import logger

from app.api.browser import PageBrowser
from app.api.dependencies import get_browser, get_view
from app.core.config import settings
from app.services.view import LinkView

ROOT_PATH = "/"

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(
    directory=str(FilePath(__file__).resolve().parent.parent.parent / "templates")
)


def _render(
    request: Request,
    view: LinkView,
    template: str,
    status_code: int = status.HTTP_200_OK,
    **context
) -> HTMLResponse:
    context.update(
        app_name=settings.APP_NAME,
        state=view.render(),
        recovery_delay=view.recovery.delay,
        banner_hide_seconds=settings.BANNER_AUTO_HIDE_SECONDS,
    )
    return templates.TemplateResponse(
        request, template, context, status_code=status_code
    )


@router.get("/", response_class=HTMLResponse)
async def shorten_page(request: Request, view: LinkView = Depends(get_view)):
    """Serve the submission view."""
    view.navigate(ROOT_PATH)
    return _render(request, view, "index.html")


@router.post("/", response_class=HTMLResponse)
async def submit_url(
    request: Request,
    url: str = Form(...),
    view: LinkView = Depends(get_view),
):
    """Handle form submission to shorten a URL."""
    view.navigate(ROOT_PATH)
    short_url = await view.submit(url)
    return _render(
        request,
        view,
        "index.html",
        status_code=status.HTTP_200_OK if short_url else status.HTTP_400_BAD_REQUEST,
        url=url,
    )


@router.post("/copy", response_class=HTMLResponse)
async def copy_short_url(
    request: Request,
    short_url: str = Form(...),
    view: LinkView = Depends(get_view),
    browser: PageBrowser = Depends(get_browser),
):
    """Copy the displayed short link; the page hands it to the browser clipboard."""
    view.navigate(ROOT_PATH)
    view.show_short_url(short_url)
    view.copy_to_clipboard()
    return _render(request, view, "index.html", clipboard=browser.clipboard)


@router.get("/{short_code:path}", response_class=HTMLResponse)
async def resolve_short_code(
    request: Request,
    short_code: str,
    view: LinkView = Depends(get_view),
    browser: PageBrowser = Depends(get_browser),
):
    """Redirect a short code to its original URL.

    On failure the page shows the error and sends the browser back to the
    submission view after the recovery delay.
    """
    view.navigate(ROOT_PATH + short_code)
    if await view.wait_resolution():
        return RedirectResponse(url=browser.location, status_code=status.HTTP_302_FOUND)

    logger.info(f"Short code '{short_code}' could not be resolved")
    return _render(
        request,
        view,
        "resolve.html",
        status_code=status.HTTP_404_NOT_FOUND,
        root_path=ROOT_PATH,
    )
