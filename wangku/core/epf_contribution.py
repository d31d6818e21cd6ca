"""EPF (KWSP) monthly contribution breakdown."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from wangku.core.results import ResultModel

DEFAULT_EMPLOYEE_PERCENTAGE = 11.0
DEFAULT_EMPLOYER_PERCENTAGE = 12.0

MAX_PERCENTAGE = 20.0
TYPICAL_EMPLOYEE_RANGE = (9.0, 13.0)
TYPICAL_EMPLOYER_RANGE = (11.0, 13.0)


class SettingsSource(str, Enum):
    ACCOUNT = "account"
    PROFILE = "profile"
    DEFAULT = "default"


class EPFContributionSettings(BaseModel):
    """Resolved contribution settings; which layer they came from is recorded in ``source``."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    employee_percentage: float = Field(default=DEFAULT_EMPLOYEE_PERCENTAGE, ge=0, le=MAX_PERCENTAGE)
    employer_percentage: float = Field(default=DEFAULT_EMPLOYER_PERCENTAGE, ge=0, le=MAX_PERCENTAGE)
    use_total: bool = True
    is_manual: bool = False
    manual_amount: Optional[float] = Field(default=None, ge=0)
    source: SettingsSource = SettingsSource.DEFAULT


class ContributionBreakdown(ResultModel):
    employee_contribution: float
    employer_contribution: float
    total_contribution: float
    used_contribution: float
    settings: EPFContributionSettings


class ContributionValidation(ResultModel):
    is_valid: bool
    warnings: List[str] = []


class ContributionPreset(ResultModel):
    name: str
    description: str
    employee_percentage: float
    employer_percentage: float


def calculate_contribution(monthly_salary: float, settings: EPFContributionSettings) -> ContributionBreakdown:
    """
    Split a salary into employee/employer contributions.

    ``used_contribution`` is the figure that feeds the projection; the other
    totals are for display. A manual amount has no split and is reported
    entirely as the employee's share.
    """
    if settings.is_manual and settings.manual_amount is not None:
        return ContributionBreakdown(
            employee_contribution=settings.manual_amount,
            employer_contribution=0.0,
            total_contribution=settings.manual_amount,
            used_contribution=settings.manual_amount,
            settings=settings,
        )

    employee = monthly_salary * (settings.employee_percentage / 100)
    employer = monthly_salary * (settings.employer_percentage / 100)
    total = employee + employer

    return ContributionBreakdown(
        employee_contribution=employee,
        employer_contribution=employer,
        total_contribution=total,
        used_contribution=total if settings.use_total else employee,
        settings=settings,
    )


def validate_contribution_percentages(employee_percentage: float, employer_percentage: float) -> ContributionValidation:
    if not 0 <= employee_percentage <= MAX_PERCENTAGE:
        return ContributionValidation(
            is_valid=False,
            warnings=["Employee contribution percentage must be between 0% and 20%"],
        )
    if not 0 <= employer_percentage <= MAX_PERCENTAGE:
        return ContributionValidation(
            is_valid=False,
            warnings=["Employer contribution percentage must be between 0% and 20%"],
        )

    warnings: List[str] = []
    low, high = TYPICAL_EMPLOYEE_RANGE
    if not low <= employee_percentage <= high:
        warnings.append(
            f"Employee contribution of {employee_percentage:g}% is outside the typical KWSP range (9-13%)"
        )
    low, high = TYPICAL_EMPLOYER_RANGE
    if not low <= employer_percentage <= high:
        warnings.append(
            f"Employer contribution of {employer_percentage:g}% is outside the typical KWSP range (11-13%)"
        )
    if employee_percentage == DEFAULT_EMPLOYEE_PERCENTAGE and employer_percentage == DEFAULT_EMPLOYER_PERCENTAGE:
        warnings.append("Using KWSP standard rates")

    return ContributionValidation(is_valid=True, warnings=warnings)


def contribution_rate_presets() -> List[ContributionPreset]:
    return [
        ContributionPreset(
            name="KWSP Standard",
            description="Standard Malaysian EPF rates",
            employee_percentage=11,
            employer_percentage=12,
        ),
        ContributionPreset(
            name="Maximum Employer",
            description="Standard employee + maximum employer rate",
            employee_percentage=11,
            employer_percentage=13,
        ),
        ContributionPreset(
            name="Employee Only",
            description="Conservative estimate with employee contribution only",
            employee_percentage=11,
            employer_percentage=0,
        ),
        ContributionPreset(
            name="Age 60+ (Reduced)",
            description="Reduced rates for employees aged 60 and above",
            employee_percentage=4,
            employer_percentage=4,
        ),
    ]


def contribution_explanation(settings: EPFContributionSettings) -> str:
    if settings.is_manual:
        return "Using manual contribution amount"

    employee = settings.employee_percentage
    employer = settings.employer_percentage
    if settings.use_total:
        return (
            f"Using total contribution ({employee:g}% employee + {employer:g}% employer"
            f" = {employee + employer:g}%)"
        )
    return f"Using employee contribution only ({employee:g}%)"
