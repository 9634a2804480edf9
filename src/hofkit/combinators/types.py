"""Combinator types and data classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

CallState = Literal["using_f", "using_g"]


@dataclass(frozen=True)
class OnceAndAfterConfig:
    """Behavioural options for once_and_after.

    Attributes:
        advance_on_error: Switch to the second callable even when the first
            call raises. By default the switch happens only on normal return.
    """
    advance_on_error: bool = False


class OnceAndAfterSnapshot(BaseModel):
    """Read-only view of a once_and_after instance."""

    model_config = ConfigDict(frozen=True)

    state: CallState
    calls: int = Field(default=0, ge=0)
