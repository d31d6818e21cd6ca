"""Contracts for the rate table endpoints."""

from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict

from wangku.core.rate_selection import RateMethod
from wangku.core.rates import EPFSavingsType

Instrument = Literal["ASB", "EPF", "Tabung Haji"]


class RateSelectionRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    instrument: Instrument
    method: RateMethod = RateMethod.LATEST
    savingsType: Optional[EPFSavingsType] = None


class RateSelectionResponse(BaseModel):
    instrument: Instrument
    method: RateMethod
    savingsType: Optional[EPFSavingsType] = None
    rate: float
    table: Dict[int, float]
