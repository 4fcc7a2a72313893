import json
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas import IssueCreate, IssueResponse, format_errors
from app.database.config import get_db
from app.database import models

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/issues", tags=["issues"])

INVALID_BODY = {"_errors": ["Request body must be a JSON object."]}


def select_newest_first():
    """Query for every issue, newest first (ties broken by id)."""
    return select(models.Issue).order_by(models.Issue.created_at.desc(), models.Issue.id.desc())


@router.get("", response_model=list[IssueResponse])
async def list_issues(db: AsyncSession = Depends(get_db)):
    """List all issues, newest first."""
    result = await db.execute(select_newest_first())
    return result.scalars().all()


@router.post("", response_model=IssueResponse, status_code=status.HTTP_201_CREATED)
async def create_issue(request: Request, db: AsyncSession = Depends(get_db)):
    """Validate the JSON body and create a new issue"""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(INVALID_BODY, status_code=status.HTTP_400_BAD_REQUEST)

    if not isinstance(body, dict):
        return JSONResponse(INVALID_BODY, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        payload = IssueCreate.model_validate(body)
    except ValidationError as exc:
        logger.info("Rejected invalid issue", extra={"fields": sorted(body)})
        return JSONResponse(format_errors(exc), status_code=status.HTTP_400_BAD_REQUEST)

    # Everything except title and description is left to the column defaults
    new_issue = models.Issue(title=payload.title, description=payload.description)
    db.add(new_issue)
    try:
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Failed to create issue")
        raise
    await db.refresh(new_issue)

    logger.info("Issue created", extra={"issue_id": new_issue.id})
    return new_issue
