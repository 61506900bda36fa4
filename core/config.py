# =============================================================================
# core/config.py  —  Startup configuration
# =============================================================================
#
# Settings come from environment variables (a .env file is loaded into the
# environment by the entry points before this runs).  They are resolved
# exactly once, at startup.  A missing endpoint or database id raises
# ConfigError, which the entry points treat as fatal.
#
#   COSMOSDB_URI          required   account endpoint
#   COSMOS_DATABASE_ID    required   database id
#   COSMOSDB_KEY          optional   account key (else DefaultAzureCredential)
#   COSMOS_CONTAINER_ID   optional   container used by the seed command
#   LOG_LEVEL             optional   logging level name, default INFO
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from core.errors import ConfigError

REQUIRED_VARIABLES = ("COSMOSDB_URI", "COSMOS_DATABASE_ID")


def env(key: str, default: str | None = None, environ: Mapping[str, str] | None = None) -> str | None:
    """Read an environment variable, treating blank values as unset."""
    source = os.environ if environ is None else environ
    value = source.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


@dataclass(frozen=True)
class CosmosSettings:
    endpoint: str
    database_id: str
    key: Optional[str] = None
    default_container: Optional[str] = None
    log_level: str = "INFO"

    @property
    def uses_key_auth(self) -> bool:
        return self.key is not None

    def __repr__(self) -> str:
        # Never print the account key.
        return (
            f"CosmosSettings(endpoint={self.endpoint!r}, database_id={self.database_id!r}, "
            f"key={'***' if self.key else None}, default_container={self.default_container!r})"
        )


def load_settings(environ: Mapping[str, str] | None = None) -> CosmosSettings:
    """Build settings from the environment.

    Raises:
        ConfigError: listing every required variable that is missing.
    """
    missing = [name for name in REQUIRED_VARIABLES if env(name, environ=environ) is None]
    if missing:
        raise ConfigError(missing)

    return CosmosSettings(
        endpoint=env("COSMOSDB_URI", environ=environ),
        database_id=env("COSMOS_DATABASE_ID", environ=environ),
        key=env("COSMOSDB_KEY", environ=environ),
        default_container=env("COSMOS_CONTAINER_ID", environ=environ),
        log_level=(env("LOG_LEVEL", "INFO", environ=environ) or "INFO").upper(),
    )
