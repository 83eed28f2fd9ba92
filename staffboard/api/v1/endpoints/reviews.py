from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from staffboard.core.dependencies import get_store
from staffboard.models.review import PerformanceReview, PerformanceReviewCreate, PerformanceReviewUpdate
from staffboard.services.record_store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


def _not_found(review_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Performance review with id '{review_id}' not found",
    )


@router.get("", response_model=list[PerformanceReview])
async def list_reviews(
    employee_id: str | None = Query(None, alias="employeeId"),  # noqa: B008
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    try:
        return await store.list_reviews(employee_id=employee_id)
    except Exception as err:
        logger.exception("Failed to list performance reviews")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve performance reviews",
        ) from err


@router.get("/{review_id}", response_model=PerformanceReview)
async def get_review(review_id: str, store: RecordStore = Depends(get_store)):  # noqa: B008
    review = await store.get_review(review_id)
    if not review:
        raise _not_found(review_id)
    return review


@router.post("", response_model=PerformanceReview, status_code=status.HTTP_201_CREATED)
async def create_review(
    payload: PerformanceReviewCreate,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    return await store.create_review(payload)


@router.patch("/{review_id}", response_model=PerformanceReview)
async def update_review(
    review_id: str,
    payload: PerformanceReviewUpdate,
    store: RecordStore = Depends(get_store),  # noqa: B008
):
    review = await store.update_review(review_id, payload)
    if not review:
        raise _not_found(review_id)
    return review


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_review(review_id: str, store: RecordStore = Depends(get_store)):  # noqa: B008
    if not await store.delete_review(review_id):
        raise _not_found(review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
