"""Draft-to-payload transforms shared by the action handlers."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict

from logic.parsing import parse_number, parse_warmth, resolve_owner, split_csv
from models.drafts import GenerationDraft, ItemDraft, ProfileDraft
from models.outfit import OutfitGenerationRequest
from models.profile import Profile
from models.taxonomy import validate_weather
from models.wardrobe_item import WardrobeItem


def build_profile(draft: ProfileDraft) -> Profile:
    return Profile(
        name=draft.name,
        email=draft.email,
        body_type=draft.body_type,
        skin_tone=draft.skin_tone,
        preferred_colors=split_csv(draft.preferred_colors),
        vibe=draft.vibe,
        location=draft.location,
    )


def profile_payload(draft: ProfileDraft) -> Dict[str, Any]:
    """Body for ``POST /api/profile``; empty fields are allowed."""

    return asdict(build_profile(draft))


def build_item(draft: ItemDraft, session_email: str | None) -> WardrobeItem:
    """Build a wardrobe item from the draft.

    Raises :class:`ValueError` when no owner can be resolved or the category is
    not one of the selector options.
    """

    return WardrobeItem(
        owner_email=resolve_owner(draft.owner_email, session_email),
        name=draft.name,
        category=draft.category,
        color=draft.color,
        size=draft.size,
        image_url=draft.image_url,
        brand=draft.brand,
        price=parse_number(draft.price),
        tags=split_csv(draft.tags),
        warmth=parse_warmth(draft.warmth),
    )


def item_payload(draft: ItemDraft, session_email: str | None) -> Dict[str, Any]:
    return build_item(draft, session_email).to_payload()


def generation_payload(session_email: str, draft: GenerationDraft) -> Dict[str, Any]:
    request = OutfitGenerationRequest(
        email=session_email,
        mood=draft.mood,
        weather=validate_weather(draft.weather),
        event=draft.event,
    )
    return request.to_payload()


__all__ = [
    "build_item",
    "build_profile",
    "generation_payload",
    "item_payload",
    "profile_payload",
]
