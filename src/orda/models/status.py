"""Pydantic v2 model for the /status health payload."""

from pydantic import BaseModel, ConfigDict


class Status(BaseModel):
    """Server health. Currently always ``"running"``; not enforced."""

    model_config = ConfigDict(strict=True, frozen=True)

    status: str
