"""Event schemas published by the hook store."""

from typing import Literal

from pydantic import BaseModel
from pydantic import Field


class HooksChanged(BaseModel):
    """Published after every successful save of a hook list."""

    type: Literal["hooks_changed"] = "hooks_changed"
    context: str = Field(description="Context key whose list was saved")
    count: int = Field(description="Number of hooks after the save")
