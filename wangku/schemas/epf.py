"""Request contracts for the EPF contribution endpoints."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wangku.core.epf_contribution import (
    DEFAULT_EMPLOYEE_PERCENTAGE,
    DEFAULT_EMPLOYER_PERCENTAGE,
    EPFContributionSettings,
    SettingsSource,
)


class ContributionSettingsPayload(BaseModel):
    """Settings as resolved by the caller; percentages are range-checked later."""

    model_config = ConfigDict(extra="forbid")

    employeePercentage: float = DEFAULT_EMPLOYEE_PERCENTAGE
    employerPercentage: float = DEFAULT_EMPLOYER_PERCENTAGE
    useTotal: bool = True
    isManual: bool = False
    manualAmount: Optional[float] = Field(default=None, ge=0)
    source: SettingsSource = SettingsSource.DEFAULT

    def to_settings(self) -> EPFContributionSettings:
        return EPFContributionSettings(
            employee_percentage=self.employeePercentage,
            employer_percentage=self.employerPercentage,
            use_total=self.useTotal,
            is_manual=self.isManual,
            manual_amount=self.manualAmount,
            source=self.source,
        )


class ContributionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    monthlySalary: float = Field(ge=0)
    settings: ContributionSettingsPayload = Field(default_factory=ContributionSettingsPayload)
