"""Pure rendering of :class:`AppState` into a view model.

``render`` has no side effects and owns no async behaviour; the Streamlit page
draws whatever it returns and wires events back to the handlers.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from html import escape
from typing import List, Optional

from memory.ui_state import AppState
from models.challenge import Challenge
from models.outfit import GeneratedOutfit, OutfitPiece
from models.taxonomy import CATEGORIES, WEATHER_OPTIONS, WEATHER_UNSET
from models.wardrobe_item import WardrobeRecord

APP_TITLE = "Mazzura"
APP_TAGLINE = "AI-Powered Cultural Fashion OS"
FOOTER = "Cultural fashion intelligence · India-first · Emotion-aware AI"
CHALLENGES_EMPTY = "Loading challenges..."
WARDROBE_EMPTY = "No items yet. Add your first piece."
PLACEHOLDER = "—"
STATUS_POLL_SECONDS = 1

PLACEHOLDERS = {
    "email": "you@mazzura.app",
    "name": "Aisha Rao",
    "body_type": "pear, athletic, curvy",
    "skin_tone": "warm, cool, neutral",
    "preferred_colors": "black, lilac, sage",
    "vibe": "soft, bold, minimal",
    "location": "Bengaluru, IN",
    "item_name": "Oversized tee",
    "color": "black",
    "size": "M",
    "brand": "Local craft",
    "price": "1299",
    "tags": "street, monochrome",
    "warmth": "3",
    "image_url": "https://...",
    "mood": "cozy, bold, minimal",
    "event": "brunch, office, garba",
}


@dataclass(frozen=True)
class ChallengeCard:
    title: str
    prompt: str
    badge: str

    @property
    def html(self) -> str:
        """Card markup with backend text escaped."""

        return (
            f"<div class='card'><b>{escape(self.title)}</b> <span class='badge'>{escape(self.badge)}</span>"
            f"<div class='meta'>{escape(self.prompt)}</div></div>"
        )


@dataclass(frozen=True)
class WardrobeCard:
    key: str
    name: str
    subtitle: str
    image_url: Optional[str]
    thumbnail_label: str


@dataclass(frozen=True)
class OutfitPanel:
    title: str
    lines: List[str]


@dataclass(frozen=True)
class ButtonState:
    label: str
    disabled: bool = False


@dataclass(frozen=True)
class ViewModel:
    title: str
    tagline: str
    status: str
    footer: str
    session_email: str
    challenges: List[ChallengeCard]
    challenges_empty_text: Optional[str]
    outfit: Optional[OutfitPanel]
    profile_json: Optional[str]
    wardrobe: List[WardrobeCard]
    wardrobe_empty_text: Optional[str]
    owner_email_value: str
    category_options: List[str] = field(default_factory=lambda: list(CATEGORIES))
    weather_options: List[str] = field(default_factory=lambda: [WEATHER_UNSET, *WEATHER_OPTIONS])
    save_profile: ButtonState = ButtonState("Save Profile")
    fetch_profile: ButtonState = ButtonState("Fetch by Email")
    add_item: ButtonState = ButtonState("Add Item")
    view_wardrobe: ButtonState = ButtonState("View Wardrobe")
    generate: ButtonState = ButtonState("Generate")

    @property
    def status_html(self) -> str:
        return f"<p class='status'>{escape(self.status)}</p>"


def challenge_card(challenge: Challenge) -> ChallengeCard:
    return ChallengeCard(
        title=challenge.title or PLACEHOLDER,
        prompt=challenge.prompt or "",
        badge=f"+{challenge.reward_points or 0}",
    )


def outfit_line(piece: OutfitPiece) -> str:
    """``category: name · color · brand`` with empty parts left out."""

    line = f"{piece.category or PLACEHOLDER}: {piece.name or PLACEHOLDER}"
    for extra in (piece.color, piece.brand):
        if extra:
            line += f" · {extra}"
    return line


def outfit_panel(outfit: Optional[GeneratedOutfit]) -> Optional[OutfitPanel]:
    if outfit is None:
        return None
    return OutfitPanel(title=outfit.title or PLACEHOLDER, lines=[outfit_line(piece) for piece in outfit.items])


def wardrobe_card(item: WardrobeRecord, index: int) -> WardrobeCard:
    subtitle = " · ".join(value or PLACEHOLDER for value in (item.brand, item.color, item.size))
    return WardrobeCard(
        key=str(item.id) if item.id is not None else f"item-{index}",
        name=item.name or PLACEHOLDER,
        subtitle=subtitle,
        image_url=item.image_url or None,
        thumbnail_label=item.category or PLACEHOLDER,
    )


def poll_interval(probe_finished: bool) -> Optional[int]:
    """Seconds between header/challenge refreshes; ``None`` once the probe is done."""

    return None if probe_finished else STATUS_POLL_SECONDS


def render(state: AppState) -> ViewModel:
    loading = state.loading
    challenges = [challenge_card(c) for c in state.challenges]
    wardrobe = [wardrobe_card(item, idx) for idx, item in enumerate(state.wardrobe_list)]
    profile_json = (
        json.dumps(state.display_profile, indent=2, ensure_ascii=False)
        if state.display_profile is not None
        else None
    )

    return ViewModel(
        title=APP_TITLE,
        tagline=APP_TAGLINE,
        status=state.status,
        footer=FOOTER,
        session_email=state.session_email,
        challenges=challenges,
        challenges_empty_text=None if challenges else CHALLENGES_EMPTY,
        outfit=outfit_panel(state.generated_outfit),
        profile_json=profile_json,
        wardrobe=wardrobe,
        wardrobe_empty_text=None if wardrobe else WARDROBE_EMPTY,
        owner_email_value=state.item_draft.owner_email or state.session_email,
        save_profile=ButtonState("Saving..." if loading.profile else "Save Profile", loading.profile),
        fetch_profile=ButtonState("Fetch by Email", loading.profile),
        add_item=ButtonState("Add Item", loading.wardrobe),
        view_wardrobe=ButtonState("View Wardrobe", loading.wardrobe),
        generate=ButtonState("Generating..." if loading.outfit else "Generate", loading.outfit),
    )


__all__ = [
    "ButtonState",
    "ChallengeCard",
    "OutfitPanel",
    "ViewModel",
    "poll_interval",
    "WardrobeCard",
    "render",
]
