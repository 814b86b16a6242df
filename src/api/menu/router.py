"""Menu catalog endpoint."""

from typing import Any

from fastapi import APIRouter

from src.api.core.messages import APIResponse
from src.modules.sidebar.catalog import (
    AVAILABLE_MENU_ITEMS,
    CATEGORY_NAMES,
    group_by_category_ordered,
)

router = APIRouter(prefix="/menu-catalog", tags=["menu"])


class MenuCatalogResponse(APIResponse):
    categories: list[dict[str, Any]]


@router.get("", response_model=MenuCatalogResponse)
async def get_menu_catalog() -> MenuCatalogResponse:
    """Catalog entries grouped by category in display order."""
    categories = [
        {
            "category": category,
            "name": CATEGORY_NAMES.get(category, category),
            "items": [item.to_dict() for item in items],
        }
        for category, items in group_by_category_ordered(AVAILABLE_MENU_ITEMS)
    ]
    return MenuCatalogResponse.success_response(categories=categories)
