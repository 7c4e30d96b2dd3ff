"""Client app bootstrap."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from client_app.config import ClientConfig
from client_app.logging_config import configure_logging, get_logger, log_event
from handlers.actions import ActionHandlers
from handlers.startup_probe import run_startup_probe
from memory.ui_state import StateStore
from tools.api_client import BackendClient
from ui.view import ViewModel, render

LOGGER = get_logger(__name__)


class MazzuraClientApp:
    """Wires together config, the backend client, the state store and handlers."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: BackendClient | None = None,
        store: StateStore | None = None,
    ) -> None:
        self.config = config or ClientConfig.from_env()
        configure_logging(self.config.log_level)

        self.client = client or BackendClient(self.config.backend_url, timeout=self.config.request_timeout)
        self.store = store or StateStore()
        self.handlers = ActionHandlers(self.client, self.store)
        self._probe: Future | None = None

    @property
    def base_url(self) -> str:
        return self.config.backend_url

    def start(self, wait: bool = True) -> Future:
        """Run the startup probe once.

        With ``wait=False`` the probe runs in the background so the first render
        shows ``Checking backend...`` and the forms stay usable meanwhile.
        """

        if self._probe is None:
            log_event(LOGGER, logging.INFO, "startup_probe_scheduled", backend_url=self.base_url)
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="mazzura-startup")
            self._probe = executor.submit(run_startup_probe, self.client, self.store, self.base_url)
            executor.shutdown(wait=False)
        if wait:
            self._probe.result()
        return self._probe

    def probe_finished(self) -> bool:
        return self._probe is not None and self._probe.done()

    def view(self) -> ViewModel:
        return render(self.store.state)


__all__ = ["MazzuraClientApp"]
