"""Per-tab search sessions and the tab set that holds them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from material_inspector.exceptions import TabIndexError
from material_inspector.search.filters import StructuredFilterConfig, apply_filters
from material_inspector.textures.models import Material, TextureRecord

NO_MATERIAL_NAME = "<no mat>"


@dataclass
class TabSession:
    """Search state for one inspector tab."""

    name: str = NO_MATERIAL_NAME
    material: Material | None = None
    search: str = ""
    filters: StructuredFilterConfig = field(default_factory=StructuredFilterConfig)
    show_filter_options: bool = False

    def assign_material(self, material: Material | None) -> None:
        self.material = material
        self.name = material.name if material is not None else NO_MATERIAL_NAME

    def visible_textures(self) -> list[TextureRecord]:
        """Return the material's textures that pass this tab's search and filters."""
        if self.material is None:
            return []
        return apply_filters(self.material.textures, self.search, self.filters)

    def duplicate(self) -> TabSession:
        """Copy this tab. The material is shared; the filters are not."""
        return TabSession(
            name=self.material.name if self.material is not None else NO_MATERIAL_NAME,
            material=self.material,
            search=self.search,
            filters=self.filters.copy(),
            show_filter_options=self.show_filter_options,
        )


class TabSet:
    """Ordered tabs with one active tab. Never empty."""

    def __init__(self, tabs: Iterable[TabSession] | None = None) -> None:
        self.tabs: list[TabSession] = list(tabs or [])
        if not self.tabs:
            self.tabs.append(TabSession())
        self.active_index = 0

    def __len__(self) -> int:
        return len(self.tabs)

    @property
    def active(self) -> TabSession:
        return self.tabs[self.active_index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.tabs):
            raise TabIndexError(index, len(self.tabs))

    def activate(self, index: int) -> None:
        self._check_index(index)
        self.active_index = index

    def add_tab(self, material: Material | None = None) -> TabSession:
        """Append a new tab and make it active."""
        tab = TabSession()
        tab.assign_material(material)
        self.tabs.append(tab)
        self.active_index = len(self.tabs) - 1
        return tab

    def open_materials(self, materials: Iterable[Material]) -> None:
        """Open one tab per material and activate the first new one."""
        first_new = len(self.tabs)
        for material in materials:
            tab = TabSession()
            tab.assign_material(material)
            self.tabs.append(tab)
        if len(self.tabs) > first_new:
            self.active_index = first_new

    def close_tab(self, index: int) -> None:
        """Close a tab. The last remaining tab cannot be closed."""
        self._check_index(index)
        if len(self.tabs) <= 1:
            return

        del self.tabs[index]
        if self.active_index >= len(self.tabs):
            self.active_index = len(self.tabs) - 1
        elif self.active_index > index:
            self.active_index -= 1

    def close_other_tabs(self, keep_index: int) -> None:
        self._check_index(keep_index)
        self.tabs = [self.tabs[keep_index]]
        self.active_index = 0

    def close_tabs_to_the_right(self, index: int) -> None:
        self._check_index(index)
        del self.tabs[index + 1 :]
        if self.active_index > index:
            self.active_index = index

    def duplicate_tab(self, index: int) -> TabSession:
        """Insert a copy of a tab right after it and make the copy active."""
        self._check_index(index)
        tab = self.tabs[index].duplicate()
        self.tabs.insert(index + 1, tab)
        self.active_index = index + 1
        return tab

    def move_tab(self, index: int, insert_index: int) -> int:
        """Move a tab so it lands before the tab at ``insert_index``.

        ``insert_index`` may equal ``len(self)`` to move the tab to the end.
        The active tab stays the same tab.

        Returns:
            The moved tab's new index.
        """
        self._check_index(index)
        if not 0 <= insert_index <= len(self.tabs):
            raise TabIndexError(insert_index, len(self.tabs))
        if insert_index in (index, index + 1):
            return index

        tab = self.tabs.pop(index)
        if insert_index > index:
            insert_index -= 1
        insert_index = min(max(insert_index, 0), len(self.tabs))
        self.tabs.insert(insert_index, tab)

        if self.active_index == index:
            self.active_index = insert_index
        elif index < self.active_index <= insert_index:
            self.active_index -= 1
        elif insert_index <= self.active_index < index:
            self.active_index += 1
        return insert_index
