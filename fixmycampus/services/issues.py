"""Issue service: reported campus problems, filterable by category."""

import logging
import uuid
from typing import Any, Optional

from sqlalchemy import delete, select, update

from fixmycampus.database import Store, models
from fixmycampus.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

INVALID_CATEGORY = "Invalid category. Must be one of: " + ", ".join(models.CATEGORIES)

_UPDATABLE_FIELDS = ("title", "description", "category", "upvotes")


def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


async def get_issue(store: Store, issue_id: str) -> models.Issue:
    issue = await store.get(models.Issue, issue_id, action="fetch issue")
    if issue is None:
        raise NotFoundError("Issue not found")
    return issue


async def list_issues(store: Store, category: Optional[str] = None) -> list[models.Issue]:
    """List issues newest first, optionally for one category only.

    An unknown category matches nothing. It is answered without a query
    because PostgreSQL rejects values outside its native enum type.
    """
    if category and category not in models.CATEGORIES:
        return []

    query = select(models.Issue)
    if category:
        query = query.where(models.Issue.category == category)
    query = query.order_by(models.Issue.created_at.desc())

    return await store.list(query, action="fetch issues")


async def create_issue(
    store: Store,
    title: Optional[str],
    description: Optional[str],
    category: Optional[str],
) -> models.Issue:
    """Validate and persist a new issue with zero upvotes."""
    title, description = _clean(title), _clean(description)

    if not title or not description or not category:
        raise ValidationError("Title, description, and category are required")
    if category not in models.CATEGORIES:
        raise ValidationError(INVALID_CATEGORY)

    now = models.utcnow()
    issue = models.Issue(
        id=str(uuid.uuid4()),
        title=title,
        description=description,
        category=category,
        upvotes=0,
        created_at=now,
        updated_at=now,
    )
    issue = await store.add(issue, action="create issue")

    logger.info("Issue created", extra={"issue_id": issue.id, "category": category})
    return issue


async def update_issue(store: Store, issue_id: str, fields: dict[str, Any]) -> models.Issue:
    """Apply a partial edit.

    Only the keys present in ``fields`` are written; ``updated_at`` is
    refreshed on every successful call.
    """
    await get_issue(store, issue_id)

    values: dict[Any, Any] = {}
    for name in _UPDATABLE_FIELDS:
        if name not in fields:
            continue
        value = fields[name]

        if name in ("title", "description"):
            value = _clean(value)
            if not value:
                raise ValidationError(f"{name.capitalize()} cannot be empty")
        elif name == "category":
            if value not in models.CATEGORIES:
                raise ValidationError(INVALID_CATEGORY)
        elif name == "upvotes":
            if value is None or value < 0:
                raise ValidationError("Upvotes must be a non-negative integer")

        values[getattr(models.Issue, name)] = value

    if not values:
        raise ValidationError("No fields to update")

    values[models.Issue.updated_at] = models.utcnow()
    await store.execute(
        update(models.Issue).where(models.Issue.id == issue_id).values(values),
        action="update issue",
    )
    return await get_issue(store, issue_id)


async def upvote_issue(store: Store, issue_id: str) -> models.Issue:
    """Add one vote in a single UPDATE so concurrent votes are not lost."""
    updated = await store.execute(
        update(models.Issue)
        .where(models.Issue.id == issue_id)
        .values({
            models.Issue.upvotes: models.Issue.upvotes + 1,
            models.Issue.updated_at: models.utcnow(),
        }),
        action="upvote issue",
    )
    if not updated:
        raise NotFoundError("Issue not found")
    return await get_issue(store, issue_id)


async def delete_issue(store: Store, issue_id: str) -> None:
    """Delete an issue. Its comments and solutions go with it (FK cascade)."""
    await get_issue(store, issue_id)
    await store.execute(delete(models.Issue).where(models.Issue.id == issue_id), action="delete issue")
    logger.info("Issue deleted", extra={"issue_id": issue_id})
