"""Pydantic schemas and helpers for validating backend responses."""

from __future__ import annotations

from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

from models.challenge import Challenge
from models.outfit import GeneratedOutfit
from models.wardrobe_item import WardrobeRecord

M = TypeVar("M", bound=BaseModel)


class HealthStatus(BaseModel):
    """Body of the root health probe."""

    model_config = ConfigDict(extra="allow")

    message: str = ""


_CHALLENGE_LIST = TypeAdapter(List[Challenge])
_WARDROBE_LIST = TypeAdapter(List[WardrobeRecord])


def parse_model(schema: Type[M], payload: Any) -> M:
    """Validate a single JSON object; raises :class:`pydantic.ValidationError`."""

    return schema.model_validate(payload)


def parse_challenges(payload: Any) -> List[Challenge]:
    return _CHALLENGE_LIST.validate_python(payload)


def parse_wardrobe(payload: Any) -> List[WardrobeRecord]:
    return _WARDROBE_LIST.validate_python(payload)


def parse_outfit(payload: Any) -> GeneratedOutfit:
    return parse_model(GeneratedOutfit, payload)


__all__ = [
    "HealthStatus",
    "parse_challenges",
    "parse_model",
    "parse_outfit",
    "parse_wardrobe",
]
