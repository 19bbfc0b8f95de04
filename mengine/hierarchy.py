"""Scene hierarchy of named entities and viewport fitting."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Iterator

__all__ = ["fit_viewport", "SceneHierarchy"]


def fit_viewport(
    width: float, height: float, aspect_ratio: float
) -> tuple[float, float, float, float]:
    """Fit an image of *aspect_ratio* into a *width* x *height* region.

    Returns ``(offset_x, offset_y, display_width, display_height)``, with the
    image centred in the region and as large as it can be.
    """
    if aspect_ratio <= 0:
        raise ValueError("aspect ratio must be positive")
    if width < 0 or height < 0:
        raise ValueError("region size must not be negative")
    display_width, display_height = float(width), float(height)
    if width > height * aspect_ratio:
        # Region is too wide: limit the width.
        display_width = height * aspect_ratio
    else:
        # Region is too tall: limit the height.
        display_height = width / aspect_ratio
    return (
        (width - display_width) * 0.5,
        (height - display_height) * 0.5,
        display_width,
        display_height,
    )


@dataclass
class _Node:
    name: str
    parent: int | None = None
    children: list[int] = field(default_factory=list)


class SceneHierarchy:
    """Entities with names arranged in a parent/child tree."""

    def __init__(self) -> None:
        self._nodes: dict[int, _Node] = {}
        self._ids = count()

    def __contains__(self, entity: object) -> bool:
        return entity in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._nodes))

    def _node(self, entity: int) -> _Node:
        try:
            return self._nodes[entity]
        except KeyError:
            raise KeyError(f"Unknown entity: {entity}") from None

    def create_entity(self, name: str = "Entity") -> int:
        """Create a root entity and return its identifier."""
        entity = next(self._ids)
        self._nodes[entity] = _Node(name)
        return entity

    def name_of(self, entity: int) -> str:
        """Return the entity's name."""
        return self._node(entity).name

    def parent_of(self, entity: int) -> int | None:
        """Return the entity's parent, or ``None`` for a root."""
        return self._node(entity).parent

    def delete(self, entity: int) -> None:
        """Delete an entity and all its descendants; unknown entities are ignored."""
        node = self._nodes.get(entity)
        if node is None:
            return
        for child in list(node.children):
            if child in self._nodes:
                self.delete(child)
        if node.parent is not None and node.parent in self._nodes:
            siblings = self._nodes[node.parent].children
            self._nodes[node.parent].children = [c for c in siblings if c != entity]
        del self._nodes[entity]

    def reparent(self, entity: int, parent: int) -> None:
        """Make *entity* the last child of *parent*."""
        node = self._node(entity)
        target = self._node(parent)
        if node.parent == parent:
            return
        ancestor: int | None = parent
        while ancestor is not None:
            if ancestor == entity:
                raise ValueError("An entity cannot become a descendant of itself")
            ancestor = self._nodes[ancestor].parent
        self._detach(entity, node)
        node.parent = parent
        target.children.append(entity)

    def unparent(self, entity: int) -> None:
        """Make *entity* a root."""
        node = self._node(entity)
        self._detach(entity, node)
        node.parent = None

    def _detach(self, entity: int, node: _Node) -> None:
        if node.parent is None:
            return
        siblings = self._nodes[node.parent].children
        if entity in siblings:
            siblings.remove(entity)

    def roots(self) -> list[int]:
        """Entities without a parent, in creation order."""
        return [entity for entity, node in self._nodes.items() if node.parent is None]

    def children(self, entity: int) -> list[int]:
        """Children of *entity*, in the order they were attached."""
        return list(self._node(entity).children)