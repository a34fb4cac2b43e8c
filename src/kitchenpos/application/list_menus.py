"""Application service: List Menus use case (query)."""

from __future__ import annotations

from kitchenpos.application.dto import MenuDTO
from kitchenpos.domain.repository.menu_repository import MenuRepository


class ListMenusHandler:

    def __init__(self, menu_repo: MenuRepository) -> None:
        self._menu_repo = menu_repo

    def handle(self, displayed_only: bool = False) -> list[MenuDTO]:
        menus = self._menu_repo.list_all()
        return [
            MenuDTO(
                id=menu.id,
                name=menu.name,
                price=str(menu.price),
                floor=str(menu.floor),
                displayed=menu.displayed,
            )
            for menu in menus
            if menu.displayed or not displayed_only
        ]
