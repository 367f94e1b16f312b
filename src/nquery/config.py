"""Runtime configuration for nquery.

Settings come from environment variables (optionally from a ``.env`` file)
and are frozen into a ``QueryConfig`` that is handed to the client explicitly.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS = "http://127.0.0.1:4646"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class QueryConfig:
    """Immutable settings for one query invocation.

    Attributes:
        address: Base address of the Nomad API, without the ``/v1`` prefix
        log_level: Name of the log level used by the command line tool
        skip_failed: Skip jobs whose detail fetch fails instead of aborting
    """

    address: str = DEFAULT_ADDRESS
    log_level: str = DEFAULT_LOG_LEVEL
    skip_failed: bool = False

    @classmethod
    def from_env(cls, skip_failed: bool = False) -> "QueryConfig":
        """Load config from environment variables.

        Env vars:
            NOMAD_ADDR: Nomad API address (default: "http://127.0.0.1:4646")
            NQUERY_LOG_LEVEL: "DEBUG", "INFO", "WARNING", ... (default: "WARNING")
        """
        address = os.getenv("NOMAD_ADDR") or DEFAULT_ADDRESS

        log_level = os.getenv("NQUERY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning(
                f"Unknown NQUERY_LOG_LEVEL: {log_level}. Using '{DEFAULT_LOG_LEVEL}'."
            )
            log_level = DEFAULT_LOG_LEVEL

        return cls(
            address=address.rstrip("/"),
            log_level=log_level,
            skip_failed=skip_failed,
        )
