from typing import Optional

from fastapi import APIRouter, Body, Depends, status

from fixmycampus.database import Store, get_store
from fixmycampus.schemas import (
    ErrorResponse,
    MessageResponse,
    SolutionCreate,
    SolutionEnvelope,
    SolutionList,
    SolutionResponse,
    SolutionUpdate,
)
from fixmycampus.services import solutions as solution_service

router = APIRouter(tags=["solutions"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.get("/issues/{issue_id}/solutions", response_model=SolutionList, responses=_NOT_FOUND)
async def list_solutions(issue_id: str, store: Store = Depends(get_store)):
    """Solutions for an issue, most upvoted first, earliest first on ties."""
    solutions = await solution_service.list_solutions(store, issue_id)
    return {"solutions": [SolutionResponse.model_validate(solution) for solution in solutions]}


@router.post(
    "/issues/{issue_id}/solutions",
    response_model=SolutionEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses={**_NOT_FOUND, **_BAD_REQUEST},
)
async def create_solution(issue_id: str, payload: SolutionCreate, store: Store = Depends(get_store)):
    """Propose a solution for an issue."""
    solution = await solution_service.create_solution(store, issue_id, payload.title, payload.description)
    return {"solution": SolutionResponse.model_validate(solution)}


@router.put("/solutions/{solution_id}", response_model=SolutionEnvelope, responses={**_NOT_FOUND, **_BAD_REQUEST})
async def update_solution(
    solution_id: str,
    payload: Optional[SolutionUpdate] = Body(None),
    store: Store = Depends(get_store),
):
    """Set the vote total, or add one vote when no total is sent."""
    upvotes = payload.upvotes if payload is not None else None
    solution = await solution_service.set_votes(store, solution_id, upvotes)
    return {"solution": SolutionResponse.model_validate(solution)}


@router.post("/solutions/{solution_id}/upvote", response_model=SolutionEnvelope, responses=_NOT_FOUND)
async def upvote_solution(solution_id: str, store: Store = Depends(get_store)):
    """Add one vote to a solution."""
    solution = await solution_service.upvote_solution(store, solution_id)
    return {"solution": SolutionResponse.model_validate(solution)}


@router.delete("/solutions/{solution_id}", response_model=MessageResponse, responses=_NOT_FOUND)
async def delete_solution(solution_id: str, store: Store = Depends(get_store)):
    await solution_service.delete_solution(store, solution_id)
    return {"message": "Solution deleted successfully"}
