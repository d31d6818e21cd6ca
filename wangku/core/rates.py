"""Dividend rate tables and savings benchmarks.

The tables are plain data kept in ``wangku/data/rates.yaml`` so a newly
declared dividend can be added without touching the calculators. They are
loaded once, validated into an immutable :class:`DividendRates` bundle and
handed to every calculator explicitly.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

DEFAULT_RATES_PATH = Path(__file__).resolve().parent.parent / "data" / "rates.yaml"

RateTable = Dict[int, float]


class EPFSavingsType(str, Enum):
    CONVENTIONAL = "Conventional"
    SYARIAH = "Syariah"


class ASBDetailedRate(BaseModel):
    """Per-unit ASB distribution for one year, in sen."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    dividend: float = Field(ge=0)
    bonus: float = Field(ge=0)
    total: float = Field(ge=0)

    @model_validator(mode="after")
    def total_matches_parts(self) -> "ASBDetailedRate":
        if abs(self.dividend + self.bonus - self.total) > 1e-9:
            raise ValueError(
                f"total {self.total} does not equal dividend {self.dividend} + bonus {self.bonus}"
            )
        return self


class DividendRates(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    asb: RateTable = Field(default_factory=dict)
    asb_detailed: Dict[int, ASBDetailedRate] = Field(default_factory=dict)
    tabung_haji: RateTable = Field(default_factory=dict)
    epf_conventional: RateTable = Field(default_factory=dict)
    epf_syariah: RateTable = Field(default_factory=dict)
    epf_benchmarks: Dict[int, float] = Field(default_factory=dict)
    hajj_cost: float = Field(default=45000.0, ge=0)
    umrah_cost: float = Field(default=15000.0, ge=0)
    fixed_rates: Dict[str, float] = Field(default_factory=dict)

    @field_validator("asb", "tabung_haji", "epf_conventional", "epf_syariah", "fixed_rates")
    @classmethod
    def rates_not_negative(cls, table: dict) -> dict:
        for key, rate in table.items():
            if rate < 0:
                raise ValueError(f"rate for {key} must not be negative (got {rate})")
        return table

    def epf_table(self, savings_type: Union[EPFSavingsType, str]) -> RateTable:
        if EPFSavingsType(savings_type) is EPFSavingsType.SYARIAH:
            return self.epf_syariah
        return self.epf_conventional

    def table_for(self, account_type: str) -> Optional[RateTable]:
        """Return the declared-dividend table for an account type, if it has one."""
        tables = {
            "ASB": self.asb,
            "Tabung Haji": self.tabung_haji,
            "EPF": self.epf_conventional,
        }
        return tables.get(account_type)


def load_dividend_rates(path: Optional[Union[str, Path]] = None) -> DividendRates:
    """Read and validate the rate tables from a YAML file."""
    rates_path = Path(path) if path else DEFAULT_RATES_PATH
    raw = yaml.safe_load(rates_path.read_text(encoding="utf-8")) or {}
    rates = DividendRates.model_validate(raw)
    logger.info(
        "Loaded dividend rates from %s (ASB %s, EPF %s, Tabung Haji %s)",
        rates_path,
        _year_span(rates.asb),
        _year_span(rates.epf_conventional),
        _year_span(rates.tabung_haji),
    )
    return rates


def _year_span(table: RateTable) -> str:
    if not table:
        return "empty"
    return f"{min(table)}-{max(table)}"
