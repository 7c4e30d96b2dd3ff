"""Startup probe: backend health and the challenge list, fetched side by side."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from client_app.logging_config import get_logger, log_event
from memory.ui_state import StateStore, set_challenges, set_status
from tools.api_client import BackendClient, BackendError

LOGGER = get_logger(__name__)


def status_ok(message: str) -> str:
    return f"✅ {message}"


def status_unreachable(base_url: str) -> str:
    return f"❌ Cannot reach backend at {base_url}"


def check_health(client: BackendClient, store: StateStore, base_url: str) -> bool:
    """Update the status text from the root probe; any failure counts as unreachable."""

    try:
        health = client.health()
    except BackendError as exc:
        log_event(LOGGER, logging.WARNING, "health_probe_failed", error_type=type(exc).__name__)
        store.dispatch(set_status, status_unreachable(base_url))
        return False
    store.dispatch(set_status, status_ok(health.message))
    return True


def load_challenges(client: BackendClient, store: StateStore) -> bool:
    """Fetch challenges; on failure the list is left empty and nothing is shown."""

    try:
        challenges = client.list_challenges()
    except BackendError as exc:
        LOGGER.debug("Challenge list unavailable", extra={"error_type": type(exc).__name__})
        return False
    store.dispatch(set_challenges, challenges)
    return True


def run_startup_probe(client: BackendClient, store: StateStore, base_url: str | None = None) -> None:
    """Run both startup calls concurrently and wait for them to settle.

    Each call writes only its own slice, so completion order does not matter.
    """

    base_url = base_url or client.base_url
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="startup-probe") as pool:
        health = pool.submit(check_health, client, store, base_url)
        challenges = pool.submit(load_challenges, client, store)
        health.result()
        challenges.result()


__all__ = ["check_health", "load_challenges", "run_startup_probe", "status_ok", "status_unreachable"]
