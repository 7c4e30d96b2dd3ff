"""Wardrobe add and list actions."""

from __future__ import annotations

from typing import List, Optional

from client_app.logging_config import Operation, get_logger, operation_context
from handlers.base import ActionBase
from logic.parsing import resolve_owner
from logic.payloads import item_payload
from memory.ui_state import reset_item_draft, set_wardrobe_list
from models.wardrobe_item import WardrobeRecord
from tools.api_client import BackendError

LOGGER = get_logger(__name__)


class WardrobeActions(ActionBase):
    loading_group = "wardrobe"

    def add_item(self) -> bool:
        """Submit the item draft, then refresh the owner's wardrobe once."""

        state = self.store.state
        owner = resolve_owner(state.item_draft.owner_email, state.session_email)
        if not owner:
            self._warn("Provide owner email")
            return False

        with operation_context(LOGGER, "add_item", category=state.item_draft.category) as operation:
            self._set_loading(True)
            try:
                try:
                    payload = item_payload(state.item_draft, state.session_email)
                except ValueError as exc:
                    self._fail("add_item", "Add item failed", exc, operation)
                    return False
                try:
                    self.client.add_wardrobe_item(payload)
                except BackendError as exc:
                    self._fail("add_item", "Add item failed", exc, operation)
                    return False

                self._refresh(payload["owner_email"])
                self.store.dispatch(reset_item_draft, payload["owner_email"])
                self._info("Item added")
                return True
            finally:
                self._set_loading(False)

    def list_wardrobe(self, owner: Optional[str] = None) -> Optional[List[WardrobeRecord]]:
        """List the wardrobe of ``owner``, defaulting to the session email."""

        owner = resolve_owner(owner, self.store.state.session_email)
        if not owner:
            self._warn("Enter email to list wardrobe")
            return None

        with operation_context(LOGGER, "list_wardrobe") as operation:
            self._set_loading(True)
            try:
                return self._refresh(owner, operation)
            finally:
                self._set_loading(False)

    def _refresh(self, owner: str, operation: Optional[Operation] = None) -> Optional[List[WardrobeRecord]]:
        try:
            items = self.client.list_wardrobe(owner)
        except BackendError as exc:
            self._fail("list_wardrobe", "Fetch wardrobe failed", exc, operation)
            return None
        self.store.dispatch(set_wardrobe_list, items)
        return items


__all__ = ["WardrobeActions"]
