from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional

from wangku.core.goals import parse_date

MAX_AMOUNT = 1_000_000_000
MAX_SALARY = 1_000_000
MIN_AGE = 18
MAX_AGE = 65


class InputValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def ensure_valid(*results: ValidationResult) -> None:
    errors = [message for result in results for message in result.errors]
    if errors:
        raise InputValidationError(errors)


def _is_nan(value: float) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def validate_amount(amount: float, field_name: str = "Amount") -> ValidationResult:
    result = ValidationResult()
    if _is_nan(amount):
        result.errors.append(f"{field_name} must be a valid number")
        return result
    if amount < 0:
        result.errors.append(f"{field_name} cannot be negative")
    if amount > MAX_AMOUNT:
        result.errors.append(f"{field_name} cannot exceed RM1 billion")
    return result


def validate_target_amount(amount: float) -> ValidationResult:
    result = validate_amount(amount, "Target amount")
    if result.is_valid and amount == 0:
        result.errors.append("Target amount must be greater than zero")
    return result


def validate_date(value: Optional[str], field_name: str = "Date") -> ValidationResult:
    result = ValidationResult()
    if not value:
        result.errors.append(f"{field_name} is required")
        return result
    try:
        parse_date(value, field_name)
    except ValueError:
        result.errors.append(f"{field_name} is not a valid date")
    return result


def validate_age(age: float) -> ValidationResult:
    result = ValidationResult()
    if _is_nan(age) or age == 0:
        result.errors.append("Age must be a valid number")
        return result
    if age < MIN_AGE:
        result.errors.append(f"Age must be at least {MIN_AGE} years")
    if age > MAX_AGE:
        result.errors.append(f"Age cannot exceed {MAX_AGE} years")
    if age != math.floor(age):
        result.errors.append("Age must be a whole number")
    return result


def validate_salary(salary: float) -> ValidationResult:
    result = ValidationResult()
    if _is_nan(salary):
        result.errors.append("Monthly salary must be a valid number")
        return result
    if salary <= 0:
        result.errors.append("Monthly salary must be greater than zero")
    if salary > MAX_SALARY:
        result.errors.append("Monthly salary cannot exceed RM1,000,000")
    return result
