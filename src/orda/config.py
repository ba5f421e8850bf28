"""Client configuration with defaults for the aoe4guides.com API."""

import os
from dataclasses import dataclass

from orda import __version__

AOE4GUIDES_BASE_URL = "https://aoe4guides.com/api"

DEFAULT_USER_AGENT = f"orda-python/{__version__}"


@dataclass
class ClientConfig:
    """Configuration for OrdaClient / SyncOrdaClient.

    Timing values are in seconds.
    """

    # API root; routes such as /builds are appended to it
    base_url: str = AOE4GUIDES_BASE_URL

    # httpx timeout applied to connect, read, write and pool acquisition
    timeout: float = 10.0

    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        self.base_url = self.base_url.rstrip("/")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from ``ORDA_BASE_URL`` and ``ORDA_TIMEOUT``.

        Unset variables fall back to the defaults above. A non-numeric
        ``ORDA_TIMEOUT`` raises ValueError.
        """
        timeout = os.getenv("ORDA_TIMEOUT")
        return cls(
            base_url=os.getenv("ORDA_BASE_URL", AOE4GUIDES_BASE_URL),
            timeout=float(timeout) if timeout else 10.0,
        )
