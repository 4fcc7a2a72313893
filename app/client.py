"""Submission flow for the "new issue" form.

The form checks its input against the same schema the API uses, posts it to
``/api/issues`` and, on success, tells the page where to navigate next.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from app.schemas import IssueCreate, first_errors, format_errors

logger = logging.getLogger(__name__)

CREATE_ISSUE_URL = "/api/issues"
ISSUES_PAGE_URL = "/issues"
UNEXPECTED_ERROR = (
    "An unexpected error occurred. Please note, both an Issue Title "
    "and an Issue Description are required."
)


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    ERROR = "error"
    SUCCESS = "success"


@dataclass
class IssueForm:
    """State of one new-issue form."""

    state: SubmissionState = SubmissionState.IDLE
    values: dict[str, str] = field(default_factory=lambda: {"title": "", "description": ""})
    field_errors: dict[str, str] = field(default_factory=dict)
    error: str = ""
    redirect_to: Optional[str] = None

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    async def submit(self, client: httpx.AsyncClient, data: dict[str, Any]) -> SubmissionState:
        """
        Validate ``data`` and post it to the create-issue endpoint.

        Args:
            client: HTTP client whose base URL points at the application
            data: Raw form fields

        Returns:
            The state the form ended in
        """
        # Only strings are echoed back into the form
        self.values = {}
        for name in ("title", "description"):
            value = data.get(name)
            self.values[name] = value if isinstance(value, str) else ""
        self.field_errors = {}
        self.error = ""
        self.redirect_to = None

        try:
            payload = IssueCreate.model_validate(data)
        except ValidationError as exc:
            # Invalid input never leaves the form
            self.field_errors = first_errors(format_errors(exc))
            self.state = SubmissionState.IDLE
            return self.state

        self.state = SubmissionState.SUBMITTING
        try:
            response = await client.post(CREATE_ISSUE_URL, json=payload.model_dump())
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Issue submission failed: {str(e)}")
            self.state = SubmissionState.ERROR
            self.error = UNEXPECTED_ERROR
            return self.state

        self.state = SubmissionState.SUCCESS
        self.redirect_to = ISSUES_PAGE_URL
        logger.info("Issue submitted", extra={"status_code": response.status_code})
        return self.state


def api_client(app, base_url: str = "http://testserver") -> httpx.AsyncClient:
    """Return an AsyncClient that talks to ``app`` in-process."""
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url=base_url,
        timeout=5.0,
    )
