"""Comment service: discussion entries attached to an issue."""

import logging
import uuid
from typing import Optional

from sqlalchemy import delete, select

from fixmycampus.database import Store, models
from fixmycampus.errors import NotFoundError, ValidationError
from fixmycampus.services.issues import get_issue

logger = logging.getLogger(__name__)


async def list_comments(store: Store, issue_id: str) -> list[models.Comment]:
    """Comments for an issue, oldest first."""
    await get_issue(store, issue_id)

    query = (
        select(models.Comment)
        .where(models.Comment.issue_id == issue_id)
        .order_by(models.Comment.created_at.asc())
    )
    return await store.list(query, action="fetch comments")


async def create_comment(store: Store, issue_id: str, content: Optional[str]) -> models.Comment:
    content = content.strip() if isinstance(content, str) else ""
    if not content:
        raise ValidationError("Comment content is required")

    await get_issue(store, issue_id)

    comment = models.Comment(
        id=str(uuid.uuid4()),
        content=content,
        issue_id=issue_id,
        created_at=models.utcnow(),
    )
    comment = await store.add(comment, action="create comment")

    logger.info("Comment created", extra={"issue_id": issue_id, "comment_id": comment.id})
    return comment


async def delete_comment(store: Store, comment_id: str) -> None:
    comment = await store.get(models.Comment, comment_id, action="fetch comment")
    if comment is None:
        raise NotFoundError("Comment not found")

    await store.execute(
        delete(models.Comment).where(models.Comment.id == comment_id), action="delete comment"
    )
    logger.info("Comment deleted", extra={"comment_id": comment_id})
