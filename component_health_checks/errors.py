"""Typed failures raised by component checks."""

from typing import Optional

COMPONENT_START_ERR_CODE = 6000
CONFIG_ERR_CODE = 6001


class ComponentCheckError(Exception):
    """Base class for all check failures.

    Carries the underlying cause and a contextual string, usually the
    address that was being checked.
    """

    code: Optional[int] = None
    default_message = "component check failed"

    def __init__(self, cause=None, context: str = "") -> None:
        self.cause = cause
        self.context = context
        super().__init__(self._render())

    def _render(self) -> str:
        cause = self.cause if self.cause is not None else self.default_message
        if self.context:
            return f"{cause};{self.context}"
        return str(cause)


class ConfigurationError(ComponentCheckError):
    """A required setting is missing or invalid."""

    code = CONFIG_ERR_CODE
    default_message = "Config file is incorrect"


class ConnectivityError(ComponentCheckError):
    """The component could not be reached or rejected the session."""


class CheckTimeoutError(ComponentCheckError):
    """An operation did not complete within its bound."""


class ResourceStateError(ComponentCheckError):
    """The component is reachable but unhealthy or missing a resource."""

    code = COMPONENT_START_ERR_CODE
    default_message = "ComponentStartErr"


class AuthenticationError(ConnectivityError):
    """The component was reached but rejected the presented credentials."""
