"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.taxonomy import DEFAULT_CATEGORY, WARMTH_MAX, WARMTH_MIN, validate_category


@dataclass
class WardrobeItem:
    """An item about to be added to a user's closet."""

    owner_email: str
    name: str = ""
    category: str = DEFAULT_CATEGORY
    color: str = ""
    size: str = ""
    image_url: str = ""
    brand: str = ""
    price: Optional[float] = None
    tags: List[str] = field(default_factory=list)
    warmth: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate the category, and guard direct construction.

        Form input never reaches the owner or warmth checks: ``add_item``
        resolves the owner first and ``parse_warmth`` drops out-of-range text.
        They stop items built directly in code from carrying those values.
        """

        if not self.owner_email:
            raise ValueError("owner_email is required for a wardrobe item")
        self.category = validate_category(self.category)
        if self.warmth is not None and not WARMTH_MIN <= self.warmth <= WARMTH_MAX:
            raise ValueError(f"warmth must be between {WARMTH_MIN:g} and {WARMTH_MAX:g}")

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON body for ``POST /api/wardrobe``.

        Unset numeric fields are left out rather than sent as ``0`` or null.
        """

        payload: Dict[str, Any] = {
            "owner_email": self.owner_email,
            "name": self.name,
            "category": self.category,
            "color": self.color,
            "size": self.size,
            "image_url": self.image_url,
            "brand": self.brand,
            "tags": list(self.tags),
        }
        if self.price is not None:
            payload["price"] = self.price
        if self.warmth is not None:
            payload["warmth"] = self.warmth
        return payload


class WardrobeRecord(BaseModel):
    """A stored wardrobe item as listed by the backend."""

    model_config = ConfigDict(extra="allow")

    id: Union[str, int, None] = None
    owner_email: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    image_url: Optional[str] = None
    brand: Optional[str] = None
    price: Optional[float] = None
    tags: List[str] = Field(default_factory=list)
    warmth: Optional[float] = None

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return [] if value is None else value


__all__ = ["WardrobeItem", "WardrobeRecord"]
