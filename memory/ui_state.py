"""Explicit UI state container: named slices, pure reducers and a store.

Every mutation is a pure function ``(state, *args) -> state`` applied through
:meth:`StateStore.dispatch`, which serialises writes. Each reducer touches only
its own slice, so responses landing in any order cannot clobber each other.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Tuple

from models.challenge import Challenge
from models.drafts import GenerationDraft, ItemDraft, ProfileDraft
from models.outfit import GeneratedOutfit
from models.wardrobe_item import WardrobeRecord

INITIAL_STATUS = "Checking backend..."
LOADING_GROUPS = ("profile", "wardrobe", "outfit")


@dataclass(frozen=True)
class LoadingFlags:
    profile: bool = False
    wardrobe: bool = False
    outfit: bool = False


@dataclass(frozen=True)
class Notification:
    """A user-facing message queued for the view to show."""

    level: str
    message: str


@dataclass(frozen=True)
class AppState:
    status: str = INITIAL_STATUS
    session_email: str = ""
    profile_draft: ProfileDraft = field(default_factory=ProfileDraft)
    item_draft: ItemDraft = field(default_factory=ItemDraft)
    gen_draft: GenerationDraft = field(default_factory=GenerationDraft)
    display_profile: Optional[Dict[str, Any]] = None
    wardrobe_list: Tuple[WardrobeRecord, ...] = ()
    generated_outfit: Optional[GeneratedOutfit] = None
    challenges: Tuple[Challenge, ...] = ()
    loading: LoadingFlags = field(default_factory=LoadingFlags)
    notifications: Tuple[Notification, ...] = ()


# -------------------- Reducers --------------------


def set_status(state: AppState, status: str) -> AppState:
    return replace(state, status=status)


def set_session_email(state: AppState, email: str) -> AppState:
    return replace(state, session_email=email)


def update_profile_draft(state: AppState, **changes: str) -> AppState:
    return replace(state, profile_draft=replace(state.profile_draft, **changes))


def update_item_draft(state: AppState, **changes: str) -> AppState:
    return replace(state, item_draft=replace(state.item_draft, **changes))


def reset_item_draft(state: AppState, owner_email: str) -> AppState:
    """Clear the item form, keeping only the owner."""

    return replace(state, item_draft=ItemDraft(owner_email=owner_email))


def update_gen_draft(state: AppState, **changes: str) -> AppState:
    return replace(state, gen_draft=replace(state.gen_draft, **changes))


def set_display_profile(state: AppState, profile: Optional[Dict[str, Any]]) -> AppState:
    return replace(state, display_profile=dict(profile) if profile is not None else None)


def set_wardrobe_list(state: AppState, items: List[WardrobeRecord]) -> AppState:
    return replace(state, wardrobe_list=tuple(items))


def set_generated_outfit(state: AppState, outfit: Optional[GeneratedOutfit]) -> AppState:
    return replace(state, generated_outfit=outfit)


def set_challenges(state: AppState, challenges: List[Challenge]) -> AppState:
    return replace(state, challenges=tuple(challenges))


def set_loading(state: AppState, group: str, value: bool) -> AppState:
    if group not in LOADING_GROUPS:
        raise ValueError(f"Unknown loading group '{group}'. Allowed: {LOADING_GROUPS}")
    return replace(state, loading=replace(state.loading, **{group: value}))


def notify(state: AppState, message: str, level: str = "info") -> AppState:
    return replace(state, notifications=state.notifications + (Notification(level=level, message=message),))


def clear_notifications(state: AppState) -> AppState:
    return replace(state, notifications=())


# -------------------- Store --------------------


Reducer = Callable[..., AppState]
Listener = Callable[[AppState], None]


class StateStore:
    """Holds the current :class:`AppState` and applies reducers one at a time."""

    def __init__(self, initial: AppState | None = None) -> None:
        self._state = initial or AppState()
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, reducer: Reducer, *args: Any, **kwargs: Any) -> AppState:
        with self._lock:
            self._state = reducer(self._state, *args, **kwargs)
            new_state = self._state
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def drain_notifications(self) -> List[Notification]:
        """Return queued notifications and clear the queue."""

        with self._lock:
            pending = list(self._state.notifications)
            self._state = clear_notifications(self._state)
        return pending


__all__ = [
    "AppState",
    "INITIAL_STATUS",
    "LoadingFlags",
    "Notification",
    "StateStore",
    "clear_notifications",
    "notify",
    "reset_item_draft",
    "set_challenges",
    "set_display_profile",
    "set_generated_outfit",
    "set_loading",
    "set_session_email",
    "set_status",
    "set_wardrobe_list",
    "update_gen_draft",
    "update_item_draft",
    "update_profile_draft",
]
