"""Pydantic model for one turn of a suspect conversation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class Message(BaseModel):
    role: Literal["user", "model"]
    text: str
