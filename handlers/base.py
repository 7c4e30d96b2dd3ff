"""Shared plumbing for action handlers."""

from __future__ import annotations

import logging

from client_app.logging_config import Operation, get_logger, log_event
from memory.ui_state import StateStore, notify, set_loading
from tools.api_client import BackendClient

LOGGER = get_logger(__name__)


class ActionBase:
    """Binds a handler group to the backend client, the store and one loading flag."""

    loading_group: str = ""

    def __init__(self, client: BackendClient, store: StateStore) -> None:
        self.client = client
        self.store = store

    def _set_loading(self, value: bool) -> None:
        self.store.dispatch(set_loading, self.loading_group, value)

    def _info(self, message: str) -> None:
        self.store.dispatch(notify, message, level="info")

    def _warn(self, message: str) -> None:
        """Precondition failures: shown to the user, nothing was sent."""

        self.store.dispatch(notify, message, level="warning")

    def _fail(self, action: str, prefix: str, exc: Exception, operation: Operation | None = None) -> None:
        """Surface a handled error; ``operation`` is marked so its outcome logs as failed."""

        if operation is not None:
            operation.fail(exc)
        log_event(
            LOGGER,
            logging.WARNING,
            "action_failed",
            action=action,
            error_type=type(exc).__name__,
            status_code=getattr(exc, "status_code", None),
        )
        self.store.dispatch(notify, f"{prefix}: {exc}", level="error")


__all__ = ["ActionBase"]
