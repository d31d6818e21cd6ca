"""Pydantic schema for the ping endpoint."""

from typing import Optional

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str
    ratesThrough: Optional[int] = None
