from fastapi import APIRouter, Depends, status

from fixmycampus.database import Store, get_store
from fixmycampus.schemas import (
    CommentCreate,
    CommentEnvelope,
    CommentList,
    CommentResponse,
    ErrorResponse,
    MessageResponse,
)
from fixmycampus.services import comments as comment_service

router = APIRouter(tags=["comments"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("/issues/{issue_id}/comments", response_model=CommentList, responses=_NOT_FOUND)
async def list_comments(issue_id: str, store: Store = Depends(get_store)):
    """Comments on an issue in the order they were written."""
    comments = await comment_service.list_comments(store, issue_id)
    return {"comments": [CommentResponse.model_validate(comment) for comment in comments]}


@router.post(
    "/issues/{issue_id}/comments",
    response_model=CommentEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={**_NOT_FOUND, status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
)
async def create_comment(issue_id: str, payload: CommentCreate, store: Store = Depends(get_store)):
    comment = await comment_service.create_comment(store, issue_id, payload.content)
    return {"comment": CommentResponse.model_validate(comment)}


@router.delete("/comments/{comment_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_comment(comment_id: str, store: Store = Depends(get_store)):
    await comment_service.delete_comment(store, comment_id)
    return {"message": "Comment deleted successfully"}
