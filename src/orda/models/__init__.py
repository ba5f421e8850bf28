"""Pydantic v2 models for all aoe4guides.com response payloads.

Re-exports all model classes for convenient import::

    from orda.models import BuildOrder, Status, ...
"""

from .build_order import BuildOrder, BuildOrderStep, DetailStep, Timestamp
from .status import Status

__all__ = [
    "BuildOrder",
    "BuildOrderStep",
    "DetailStep",
    "Timestamp",
    "Status",
]
