from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class IssueCategory(str, Enum):
    REGISTRATION = "registration"
    ADVISING = "advising"
    ACCESSIBILITY = "accessibility"
    TECH = "tech"


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]


# Request bodies are kept loose on purpose: the services own validation so
# that missing fields and bad categories get the same 400 messages everywhere.

class IssueCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None


class IssueUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    upvotes: Optional[int] = None


class CommentCreate(BaseModel):
    content: Optional[str] = None


class SolutionCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class SolutionUpdate(BaseModel):
    upvotes: Optional[int] = None


class _Record(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class IssueResponse(_Record):
    id: str
    title: str
    description: str
    category: IssueCategory
    upvotes: int = 0
    created_at: UTCDateTime
    updated_at: UTCDateTime


class CommentResponse(_Record):
    id: str
    content: str
    issue_id: str
    created_at: UTCDateTime


class SolutionResponse(_Record):
    id: str
    title: str
    description: str
    issue_id: str
    upvotes: int = 0
    created_at: UTCDateTime


class IssueEnvelope(BaseModel):
    issue: IssueResponse


class IssueList(BaseModel):
    issues: list[IssueResponse]


class CommentEnvelope(BaseModel):
    comment: CommentResponse


class CommentList(BaseModel):
    comments: list[CommentResponse]


class SolutionEnvelope(BaseModel):
    solution: SolutionResponse


class SolutionList(BaseModel):
    solutions: list[SolutionResponse]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
