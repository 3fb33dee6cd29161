"""Environment variable overrides for configuration values."""

import os
from typing import List, Optional


def get_env(key: str, fallback: Optional[str]) -> Optional[str]:
    """Get an environment variable, or the configured value when it is unset.

    A variable that is set to the empty string still counts as set.

    Args:
        key: The environment variable name (e.g., "REDIS_ADDRESS").
        fallback: The value loaded from configuration.

    Returns:
        The environment value if present, otherwise ``fallback`` unchanged.
    """
    if key in os.environ:
        return os.environ[key]
    return fallback


def get_env_list(key: str, fallback: List[str]) -> List[str]:
    """Resolve a comma separated address list.

    Args:
        key: The environment variable name.
        fallback: The configured list.

    Returns:
        List[str]: The resolved entries, split on commas.
    """
    return get_env(key, ",".join(fallback)).split(",")
