"""Inclusive numeric range used for key size policies."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SizeRange(BaseModel):
    """Range with an optional lower bound, upper bound, or both."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: Optional[int] = Field(default=None, ge=0)
    end: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "SizeRange":
        if self.start is None and self.end is None:
            raise ValueError("Range requires at least one of 'start' or 'end'")
        if self.start is not None and self.end is not None and self.start > self.end:
            raise ValueError(f"Range start ({self.start}) must not exceed end ({self.end})")
        return self

    def is_within(self, value: int, inclusive: bool = True) -> bool:
        if self.start is not None:
            if value < self.start or (not inclusive and value == self.start):
                return False
        if self.end is not None:
            if value > self.end or (not inclusive and value == self.end):
                return False
        return True

    def describe(self) -> str:
        if self.start is not None and self.end is not None:
            return f"between {self.start} and {self.end}"
        if self.start is not None:
            return f"at least {self.start}"
        return f"at most {self.end}"


__all__ = ["SizeRange"]
