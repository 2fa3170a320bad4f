"""Result types for Jira operations."""

from pydantic import BaseModel, ConfigDict, Field


class IssueResult(BaseModel):
    """Returned after successful issue creation (``POST /rest/api/2/issue/``)."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    key: str
    url: str = Field(default="", alias="self")  # REST self-link
