"""Outfit generation action."""

from __future__ import annotations

from typing import Optional

from client_app.logging_config import get_logger, operation_context
from handlers.base import ActionBase
from logic.payloads import generation_payload
from memory.ui_state import set_generated_outfit
from models.outfit import GeneratedOutfit
from tools.api_client import BackendError

LOGGER = get_logger(__name__)


class OutfitActions(ActionBase):
    loading_group = "outfit"

    def generate_outfit(self) -> Optional[GeneratedOutfit]:
        state = self.store.state
        if not state.session_email:
            self._warn("Enter email (profile owner)")
            return None

        with operation_context(LOGGER, "generate_outfit", weather=state.gen_draft.weather) as operation:
            self._set_loading(True)
            try:
                payload = generation_payload(state.session_email, state.gen_draft)
                outfit = self.client.generate_outfit(payload)
            except (BackendError, ValueError) as exc:
                self._fail("generate_outfit", "Generation failed", exc, operation)
                return None
            finally:
                self._set_loading(False)

            self.store.dispatch(set_generated_outfit, outfit)
            self._info("Outfit generated")
            return outfit


__all__ = ["OutfitActions"]
