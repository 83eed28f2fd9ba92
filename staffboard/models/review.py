"""Performance review models."""

from __future__ import annotations

import datetime

from staffboard.models.base import CamelModel


class PerformanceReviewBase(CamelModel):
    employee_id: str
    reviewer_id: str
    date: datetime.date
    rating: float
    comments: str = ""
    strengths: list[str] = []
    areas_to_improve: list[str] = []
    goals: list[str] = []


class PerformanceReviewCreate(PerformanceReviewBase):
    """Request body for recording a review."""


class PerformanceReviewUpdate(CamelModel):
    """Partial review update; only fields sent by the client are merged."""

    employee_id: str | None = None
    reviewer_id: str | None = None
    date: datetime.date | None = None
    rating: float | None = None
    comments: str | None = None
    strengths: list[str] | None = None
    areas_to_improve: list[str] | None = None
    goals: list[str] | None = None


class PerformanceReview(PerformanceReviewBase):
    id: str
