"""Outfit generation request and result records."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.taxonomy import WEATHER_UNSET


@dataclass
class OutfitGenerationRequest:
    email: str
    mood: str = ""
    weather: str = WEATHER_UNSET
    event: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {"email": self.email, "mood": self.mood, "weather": self.weather, "event": self.event}


class OutfitPiece(BaseModel):
    model_config = ConfigDict(extra="allow")

    category: Optional[str] = None
    name: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None


class GeneratedOutfit(BaseModel):
    """Read-only outfit returned by the generator; replaced wholesale each time."""

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    items: List[OutfitPiece] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value: Any) -> Any:
        return [] if value is None else value
