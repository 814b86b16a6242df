from typing import Any

from pydantic import field_validator

from src.api.user.schemas import CamelModel


class SidebarConfigUpdateRequest(CamelModel):
    enabled_menu_items: list[str]
    # Counter value the writer read; see SidebarVersionStore
    version: int | None = None

    @field_validator("enabled_menu_items", mode="before")
    @classmethod
    def require_array(cls, value: Any) -> Any:
        if not isinstance(value, list):
            raise ValueError("enabledMenuItems must be an array")
        return value
