"""Profile save and fetch actions."""

from __future__ import annotations

from typing import Any, Optional

from client_app.logging_config import get_logger, operation_context
from handlers.base import ActionBase
from logic.payloads import profile_payload
from memory.ui_state import set_display_profile, set_session_email
from tools.api_client import BackendError

LOGGER = get_logger(__name__)


class ProfileActions(ActionBase):
    loading_group = "profile"

    def save_profile(self) -> Optional[Any]:
        """Persist the profile draft and make its email the session email.

        Empty fields are allowed. The sent payload, not the server echo, becomes
        the displayed profile.
        """

        with operation_context(LOGGER, "save_profile") as operation:
            self._set_loading(True)
            try:
                payload = profile_payload(self.store.state.profile_draft)
                result = self.client.save_profile(payload)
            except BackendError as exc:
                self._fail("save_profile", "Failed to save profile", exc, operation)
                return None
            finally:
                self._set_loading(False)

            self._info("Profile saved")
            self.store.dispatch(set_session_email, payload["email"])
            self.store.dispatch(set_display_profile, payload)
            return result

    def fetch_profile(self) -> Optional[dict]:
        email = self.store.state.session_email
        if not email:
            self._warn("Enter email to fetch profile")
            return None

        with operation_context(LOGGER, "fetch_profile") as operation:
            self._set_loading(True)
            try:
                profile = self.client.get_profile(email)
            except BackendError as exc:
                self._fail("fetch_profile", "Profile fetch failed", exc, operation)
                self.store.dispatch(set_display_profile, None)
                return None
            finally:
                self._set_loading(False)

            self.store.dispatch(set_display_profile, profile)
            return profile


__all__ = ["ProfileActions"]
