import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from app.client import IssueForm, SubmissionState, api_client
from app.database.config import get_db
from app.navigation import nav_items
from app.routes.issues import select_newest_first

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)


def render(request: Request, name: str, context: Optional[dict] = None, status_code: int = 200):
    """Render a page template with the navigation bar filled in."""
    page_context = {"nav": nav_items(request.url.path)}
    page_context.update(context or {})
    return templates.TemplateResponse(request, name, page_context, status_code=status_code)


@router.get("/")
async def home(request: Request):
    return render(request, "home.html")


@router.get("/issues")
async def issues_page(request: Request, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select_newest_first())
    return render(request, "issues/list.html", {"issues": result.scalars().all()})


@router.get("/issues/new")
async def new_issue_page(request: Request):
    return render(request, "issues/new.html", {"form": IssueForm()})


@router.post("/issues/new")
async def submit_new_issue(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
):
    """Post the form through the create-issue API and navigate on success."""
    form = IssueForm()
    async with api_client(request.app, str(request.base_url)) as client:
        await form.submit(client, {"title": title, "description": description})

    if form.state is SubmissionState.SUCCESS:
        return RedirectResponse(form.redirect_to, status_code=status.HTTP_303_SEE_OTHER)

    logger.info("New issue form not accepted", extra={"state": form.state.value})
    return render(
        request, "issues/new.html", {"form": form}, status_code=status.HTTP_400_BAD_REQUEST
    )
