"""Request contracts for the goal endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GoalProjectionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currentAmount: float
    targetAmount: float
    targetDate: str
    monthlyContribution: float = Field(default=0.0, ge=0)
    startDate: Optional[str] = None


class RecommendationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    goalCategory: str = "Other"
    heldAccountTypes: List[str] = Field(default_factory=list)
