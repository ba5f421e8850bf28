"""Typed client for the aoe4guides.com Age of Empires IV build order API.

Re-exports the public surface::

    from orda import OrdaClient, Civilization, SortBy
"""

__version__ = "0.1.0"

from .config import ClientConfig
from .decode import decode_build, decode_build_list, decode_status
from .exceptions import DecodeError, OrdaError, TransportError, UnexpectedStatus
from .http_client import OrdaClient, SyncOrdaClient
from .models import BuildOrder, BuildOrderStep, DetailStep, Status, Timestamp
from .query import Civilization, Query, SortBy

__all__ = [
    "OrdaClient",
    "SyncOrdaClient",
    "ClientConfig",
    "Civilization",
    "SortBy",
    "Query",
    "BuildOrder",
    "BuildOrderStep",
    "DetailStep",
    "Status",
    "Timestamp",
    "decode_status",
    "decode_build",
    "decode_build_list",
    "OrdaError",
    "TransportError",
    "DecodeError",
    "UnexpectedStatus",
]
