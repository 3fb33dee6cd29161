"""Registry of all available component checks."""

from typing import Dict, List

from component_health_checks.checks import (
    kafka_check,
    minio_check,
    mongo_check,
    redis_check,
    zookeeper_check,
)

from .models.check_base_model import ComponentCheck


class CheckRegistry:
    """Central registry of all available checks.

    Checks are kept in a fixed order so results are always reported the
    same way, whether they were run one after another or concurrently.
    """

    def __init__(self) -> None:
        """Initialize the check registry with all available checks."""
        self._checks: Dict[str, ComponentCheck] = {}
        for check in (
            mongo_check.create_check(),
            minio_check.create_check(),
            redis_check.create_check(),
            zookeeper_check.create_check(),
            kafka_check.create_check(),
        ):
            self._checks[check.name] = check

    def get_check(self, check_name: str) -> ComponentCheck:
        """Get a check by name.

        Args:
            check_name: The name of the check (e.g., "redis").

        Returns:
            ComponentCheck: The check instance.

        Raises:
            KeyError: If the check is not found.
        """
        if check_name not in self._checks:
            raise KeyError(f"Check '{check_name}' not found in registry")
        return self._checks[check_name]

    def get_check_names(self) -> List[str]:
        """Get the names of all checks in registry order.

        Returns:
            List[str]: The check names.
        """
        return list(self._checks.keys())

    def get_all_checks(self) -> Dict[str, ComponentCheck]:
        """Get all registered checks.

        Returns:
            A dictionary of all checks, in registry order.
        """
        return self._checks.copy()


check_reg = CheckRegistry()
