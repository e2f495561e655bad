"""Solution service: proposed remedies for an issue, ranked by votes."""

import logging
import uuid
from typing import Optional

from sqlalchemy import delete, select, update

from fixmycampus.database import Store, models
from fixmycampus.errors import NotFoundError, ValidationError
from fixmycampus.services.issues import get_issue

logger = logging.getLogger(__name__)


async def get_solution(store: Store, solution_id: str) -> models.Solution:
    solution = await store.get(models.Solution, solution_id, action="fetch solution")
    if solution is None:
        raise NotFoundError("Solution not found")
    return solution


async def list_solutions(store: Store, issue_id: str) -> list[models.Solution]:
    """Solutions for an issue, most upvoted first.

    Ties go to the earliest proposal.
    """
    await get_issue(store, issue_id)

    query = (
        select(models.Solution)
        .where(models.Solution.issue_id == issue_id)
        .order_by(models.Solution.upvotes.desc(), models.Solution.created_at.asc())
    )
    return await store.list(query, action="fetch solutions")


async def create_solution(
    store: Store,
    issue_id: str,
    title: Optional[str],
    description: Optional[str],
) -> models.Solution:
    title = title.strip() if isinstance(title, str) else ""
    description = description.strip() if isinstance(description, str) else ""

    if not title:
        raise ValidationError("Solution title is required")
    if not description:
        raise ValidationError("Solution description is required")

    await get_issue(store, issue_id)

    solution = models.Solution(
        id=str(uuid.uuid4()),
        title=title,
        description=description,
        issue_id=issue_id,
        upvotes=0,
        created_at=models.utcnow(),
    )
    solution = await store.add(solution, action="create solution")

    logger.info("Solution proposed", extra={"issue_id": issue_id, "solution_id": solution.id})
    return solution


async def upvote_solution(store: Store, solution_id: str) -> models.Solution:
    """Add one vote with ``upvotes = upvotes + 1`` in the database."""
    updated = await store.execute(
        update(models.Solution)
        .where(models.Solution.id == solution_id)
        .values({models.Solution.upvotes: models.Solution.upvotes + 1}),
        action="upvote solution",
    )
    if not updated:
        raise NotFoundError("Solution not found")
    return await get_solution(store, solution_id)


async def set_votes(store: Store, solution_id: str, upvotes: Optional[int] = None) -> models.Solution:
    """Store a client-computed vote total, or add one vote when none is given."""
    if upvotes is None:
        return await upvote_solution(store, solution_id)

    await get_solution(store, solution_id)
    if upvotes < 0:
        raise ValidationError("Upvotes must be a non-negative integer")

    await store.execute(
        update(models.Solution)
        .where(models.Solution.id == solution_id)
        .values({models.Solution.upvotes: upvotes}),
        action="update solution",
    )
    return await get_solution(store, solution_id)


async def delete_solution(store: Store, solution_id: str) -> None:
    await get_solution(store, solution_id)
    await store.execute(
        delete(models.Solution).where(models.Solution.id == solution_id), action="delete solution"
    )
    logger.info("Solution deleted", extra={"solution_id": solution_id})
