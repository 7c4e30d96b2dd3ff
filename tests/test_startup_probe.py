"""Startup probe: health status and challenge list."""

from __future__ import annotations

import threading

from conftest import BASE_URL, FakeBackend, FakeResponse, refused
from handlers.startup_probe import run_startup_probe
from memory.ui_state import INITIAL_STATUS, StateStore
from tools.api_client import BackendClient
from ui.view import CHALLENGES_EMPTY, render


def test_probe_success_sets_status_and_challenges(client: BackendClient, store: StateStore) -> None:
    assert store.state.status == INITIAL_STATUS

    run_startup_probe(client, store)

    assert store.state.status == "✅ Mazzura backend running"
    assert [c.title for c in store.state.challenges] == ["Monochrome Monday", "Thrift Flip"]


def test_unreachable_backend_leaves_view_usable(
    client: BackendClient, store: StateStore, backend: FakeBackend
) -> None:
    backend.overrides[("GET", "/")] = refused()
    backend.overrides[("GET", "/api/challenges")] = refused()

    run_startup_probe(client, store, BASE_URL)

    assert store.state.status.startswith("❌")
    assert BASE_URL in store.state.status
    assert store.state.challenges == ()
    assert store.drain_notifications() == []

    view = render(store.state)
    assert view.challenges_empty_text == CHALLENGES_EMPTY
    assert not view.save_profile.disabled
    assert not view.add_item.disabled
    assert not view.generate.disabled


def test_challenge_failure_is_silent(client: BackendClient, store: StateStore, backend: FakeBackend) -> None:
    backend.overrides[("GET", "/api/challenges")] = FakeResponse(503, text="unavailable")

    run_startup_probe(client, store)

    assert store.state.status.startswith("✅")
    assert store.state.challenges == ()
    assert store.drain_notifications() == []


def test_health_error_status_is_reported_as_unreachable(
    client: BackendClient, store: StateStore, backend: FakeBackend
) -> None:
    backend.overrides[("GET", "/")] = FakeResponse(500, text="boom")

    run_startup_probe(client, store)

    assert store.state.status == f"❌ Cannot reach backend at {BASE_URL}"
    assert len(store.state.challenges) == 2


def test_both_calls_are_issued(client: BackendClient, store: StateStore, backend: FakeBackend) -> None:
    run_startup_probe(client, store)

    paths = sorted(call["path"] for call in backend.calls)
    assert paths == ["/", "/api/challenges"]


def test_challenges_arrive_while_health_is_still_pending(
    client: BackendClient, store: StateStore, backend: FakeBackend
) -> None:
    release_health = threading.Event()
    challenges_loaded = threading.Event()

    def slow_health() -> FakeResponse:
        release_health.wait(timeout=5)
        return FakeResponse(body={"message": "Mazzura backend running"})

    backend.overrides[("GET", "/")] = slow_health
    store.subscribe(lambda state: state.challenges and challenges_loaded.set())

    probe = threading.Thread(target=run_startup_probe, args=(client, store))
    probe.start()
    try:
        assert challenges_loaded.wait(timeout=5)
        assert store.state.status == INITIAL_STATUS
        assert render(store.state).challenges[0].title == "Monochrome Monday"
    finally:
        release_health.set()
        probe.join(timeout=5)

    assert not probe.is_alive()
    assert store.state.status == "✅ Mazzura backend running"
