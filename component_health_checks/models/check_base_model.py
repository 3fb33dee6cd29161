"""Base class for all component checks."""

from abc import ABC, abstractmethod
from typing import Optional

from loguru import logger

from component_health_checks.errors import ComponentCheckError
from component_health_checks.models.check_result import CheckResult
from component_health_checks.models.component_kind import ComponentKind
from component_health_checks.models.health_check_config import ComponentConfig


class ComponentCheck(ABC):
    """Base class for all component checks.

    Subclasses implement ``verify``, which opens its own short-lived
    connection, closes it on every path and either returns a descriptor of
    the checked address or raises a ``ComponentCheckError``.
    """

    def __init__(
        self, name: str, check_name: str, kind: ComponentKind, description: str
    ):
        """Initialize a check.

        Args:
            name: The internal check identifier (e.g., "redis")
            check_name: The display name for results (e.g., "REDIS")
            kind: The kind of component checked
            description: The human-readable description
        """
        self.name = name
        self.check_name = check_name
        self.kind = kind
        self.description = description

    @abstractmethod
    def verify(self, config: ComponentConfig, debug: bool = False) -> Optional[str]:
        """Verify the component.

        Args:
            config: The loaded configuration snapshot.
            debug: Whether diagnostic output may include secrets.

        Returns:
            The descriptor of the verified address, or None if the check
            does not apply to this deployment.

        Raises:
            ComponentCheckError: If the component is unusable.
        """

    def execute(self, config: ComponentConfig, debug: bool = False) -> CheckResult:
        """Run the check and convert its outcome into a result.

        Args:
            config: The loaded configuration snapshot.
            debug: Whether diagnostic output may include secrets.

        Returns:
            CheckResult: The result of the check.
        """
        try:
            descriptor = self.verify(config, debug=debug)
        except ComponentCheckError as e:
            logger.debug(f"[CHECK] {self.name} failed: {type(e).__name__}")
            return self._create_result(
                passed=False,
                error_type=type(e).__name__,
                error_code=e.code,
                message=str(e),
            )

        if descriptor is None:
            return self._create_result(
                passed=True, skipped=True, message="Check not applicable"
            )
        return self._create_result(passed=True, descriptor=descriptor)

    def _create_result(
        self,
        passed: bool,
        descriptor: str = "",
        skipped: bool = False,
        error_type: Optional[str] = None,
        error_code: Optional[int] = None,
        message: str = "",
    ) -> CheckResult:
        """Create a CheckResult for this check.

        Args:
            passed: Whether the check passed.
            descriptor: The verified address descriptor.
            skipped: Whether the check did not apply.
            error_type: The failure class name.
            error_code: The failure code, if any.
            message: An optional message.

        Returns:
            CheckResult: The formatted result.
        """
        if not message and not passed:
            message = self.description

        return CheckResult(
            component=self.name,
            check_name=self.check_name,
            kind=self.kind,
            passed=passed,
            skipped=skipped,
            descriptor=descriptor,
            error_type=error_type,
            error_code=error_code,
            message=message,
        )
