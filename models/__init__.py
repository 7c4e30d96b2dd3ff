"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.challenge import Challenge
from models.drafts import GenerationDraft, ItemDraft, ProfileDraft
from models.outfit import GeneratedOutfit, OutfitGenerationRequest, OutfitPiece
from models.profile import Profile
from models.wardrobe_item import WardrobeItem, WardrobeRecord

__all__ = [
    "Challenge",
    "GeneratedOutfit",
    "GenerationDraft",
    "ItemDraft",
    "OutfitGenerationRequest",
    "OutfitPiece",
    "Profile",
    "ProfileDraft",
    "WardrobeItem",
    "WardrobeRecord",
]
