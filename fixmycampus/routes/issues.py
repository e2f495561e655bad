from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, status

from fixmycampus.database import Store, get_store
from fixmycampus.schemas import (
    ErrorResponse,
    IssueCreate,
    IssueEnvelope,
    IssueList,
    IssueResponse,
    IssueUpdate,
    MessageResponse,
)
from fixmycampus.services import issues as issue_service
from fixmycampus.tasks.notifications import notify_issue_creation

router = APIRouter(prefix="/issues", tags=["issues"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("", response_model=IssueList)
async def list_issues(category: Optional[str] = None, store: Store = Depends(get_store)):
    """List issues, newest first, optionally filtered by category."""
    issues = await issue_service.list_issues(store, category)
    return {"issues": [IssueResponse.model_validate(issue) for issue in issues]}


@router.post(
    "",
    response_model=IssueEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
)
async def create_issue(
    payload: IssueCreate,
    background_tasks: BackgroundTasks,
    store: Store = Depends(get_store),
):
    """Create new issue"""
    issue = await issue_service.create_issue(store, payload.title, payload.description, payload.category)

    background_tasks.add_task(notify_issue_creation, issue=issue)

    return {"issue": IssueResponse.model_validate(issue)}


@router.get("/{issue_id}", response_model=IssueEnvelope, responses=_NOT_FOUND)
async def get_issue(issue_id: str, store: Store = Depends(get_store)):
    """Get issue by ID"""
    issue = await issue_service.get_issue(store, issue_id)
    return {"issue": IssueResponse.model_validate(issue)}


@router.put("/{issue_id}", response_model=IssueEnvelope, responses={**_NOT_FOUND, **_BAD_REQUEST})
async def update_issue(issue_id: str, payload: IssueUpdate, store: Store = Depends(get_store)):
    """Update any of title, description, category and upvotes."""
    issue = await issue_service.update_issue(store, issue_id, payload.model_dump(exclude_unset=True))
    return {"issue": IssueResponse.model_validate(issue)}


@router.post("/{issue_id}/upvote", response_model=IssueEnvelope, responses=_NOT_FOUND)
async def upvote_issue(issue_id: str, store: Store = Depends(get_store)):
    """Add one vote to an issue."""
    issue = await issue_service.upvote_issue(store, issue_id)
    return {"issue": IssueResponse.model_validate(issue)}


@router.delete("/{issue_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_issue(issue_id: str, store: Store = Depends(get_store)):
    """Delete issue by ID, along with its comments and solutions."""
    await issue_service.delete_issue(store, issue_id)
    return {"message": "Issue deleted successfully"}
