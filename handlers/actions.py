"""Single entry point for every user intent the view can trigger."""

from __future__ import annotations

from typing import Any, List, Optional

from handlers.outfit_actions import OutfitActions
from handlers.profile_actions import ProfileActions
from handlers.wardrobe_actions import WardrobeActions
from memory.ui_state import (
    StateStore,
    set_session_email,
    update_gen_draft,
    update_item_draft,
    update_profile_draft,
)
from models.outfit import GeneratedOutfit
from models.wardrobe_item import WardrobeRecord
from tools.api_client import BackendClient


class ActionHandlers:
    """Groups the profile, wardrobe and outfit actions plus the draft setters.

    Draft setters write straight into the store: no debouncing and no
    validation while typing.
    """

    def __init__(self, client: BackendClient, store: StateStore) -> None:
        self.client = client
        self.store = store
        self.profile = ProfileActions(client, store)
        self.wardrobe = WardrobeActions(client, store)
        self.outfit = OutfitActions(client, store)

    # Draft state

    def set_session_email(self, email: str) -> None:
        self.store.dispatch(set_session_email, email)

    def update_profile_draft(self, **changes: str) -> None:
        self.store.dispatch(update_profile_draft, **changes)

    def update_item_draft(self, **changes: str) -> None:
        self.store.dispatch(update_item_draft, **changes)

    def update_gen_draft(self, **changes: str) -> None:
        self.store.dispatch(update_gen_draft, **changes)

    # Actions

    def save_profile(self) -> Optional[Any]:
        return self.profile.save_profile()

    def fetch_profile(self) -> Optional[dict]:
        return self.profile.fetch_profile()

    def add_item(self) -> bool:
        return self.wardrobe.add_item()

    def list_wardrobe(self, owner: Optional[str] = None) -> Optional[List[WardrobeRecord]]:
        return self.wardrobe.list_wardrobe(owner)

    def generate_outfit(self) -> Optional[GeneratedOutfit]:
        return self.outfit.generate_outfit()


__all__ = ["ActionHandlers"]
