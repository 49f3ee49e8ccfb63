"""
Service base class.

Services sit between the HTTP handlers and the store. The base only gives
each service a logger and tags what it logs with the service's class name.
"""

from typing import Any

from client_registry.core.logging import get_logger


class BaseService:
    def __init__(self) -> None:
        self._logger = get_logger(type(self).__module__)

    def _tagged(self, context: dict[str, Any]) -> dict[str, Any]:
        return {"extra": {"service": type(self).__name__, **context}}

    def _log_operation(self, operation: str, **context: Any) -> None:
        """Record a state change at info level."""
        self._logger.info(operation, **self._tagged(context))

    def _log_debug(self, message: str, **context: Any) -> None:
        self._logger.debug(message, **self._tagged(context))
