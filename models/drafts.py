"""Editable form drafts.

Every field holds the text exactly as typed; conversion to payloads happens in
:mod:`logic.payloads`.
"""

from dataclasses import dataclass

from models.taxonomy import DEFAULT_CATEGORY, WEATHER_UNSET


@dataclass(frozen=True)
class ProfileDraft:
    name: str = ""
    email: str = ""
    body_type: str = ""
    skin_tone: str = ""
    preferred_colors: str = ""
    vibe: str = ""
    location: str = ""


@dataclass(frozen=True)
class ItemDraft:
    owner_email: str = ""
    name: str = ""
    category: str = DEFAULT_CATEGORY
    color: str = ""
    size: str = ""
    image_url: str = ""
    brand: str = ""
    price: str = ""
    tags: str = ""
    warmth: str = ""


@dataclass(frozen=True)
class GenerationDraft:
    mood: str = ""
    weather: str = WEATHER_UNSET
    event: str = ""
