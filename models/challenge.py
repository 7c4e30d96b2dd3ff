"""Community challenge record."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Challenge(BaseModel):
    """A community styling challenge listed at startup.

    The backend may send ``null`` for any field; rendering supplies fallbacks.
    """

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    prompt: Optional[str] = None
    reward_points: Optional[int] = None
