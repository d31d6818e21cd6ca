"""Request contracts for the projection endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wangku.core.instruments import PilgrimageType
from wangku.core.rate_selection import RateMethod
from wangku.core.rates import EPFSavingsType
from wangku.schemas.epf import ContributionSettingsPayload


class CompoundRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currentBalance: float = Field(ge=0)
    monthlyContribution: float = Field(default=0.0, ge=0)
    ratePercent: float = Field(ge=0, le=100)
    years: int = Field(ge=0, le=100)


class ASBRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currentBalance: float = Field(ge=0)
    monthlyContribution: float = Field(default=0.0, ge=0)
    years: int = Field(default=5, ge=0, le=100)
    unitsHeld: float = Field(default=0.0, ge=0)
    year: Optional[int] = None


class EPFRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currentBalance: float = Field(ge=0)
    currentAge: int
    monthlySalary: float = Field(ge=0)
    retirementAge: int = Field(default=55, ge=18, le=100)
    savingsType: EPFSavingsType = EPFSavingsType.CONVENTIONAL
    rateMethod: RateMethod = RateMethod.LATEST
    contributionSettings: Optional[ContributionSettingsPayload] = None


class TabungHajiRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    currentBalance: float = Field(ge=0)
    monthlyContribution: float = Field(default=0.0, ge=0)
    targetAmount: Optional[float] = Field(default=None, ge=0)
    pilgrimageType: PilgrimageType = PilgrimageType.HAJJ
    people: int = Field(default=1, ge=1, le=10)
    rateMethod: RateMethod = RateMethod.HISTORICAL_AVERAGE
