"""
Widget node base classes.

Every compiled node supports the same three operations:

- ``accept_attribute(key, value, line_number)`` while parsing ``key: value``
- ``accept_child(child, line_number)`` when a nested declaration closes
- ``render(region, substitutions, target)`` once the tree is complete

Containers own an ordered list of children and split their region among
them; leaves draw content directly and reject children.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, List, Mapping, Optional, Sequence

from ..exceptions import (
    CannotContainChildrenError,
    InvalidAttributeValueError,
    UnknownAttributeError,
)
from ..render.geometry import Direction, Region, split_region
from ..render.target import RenderTarget


@dataclass(frozen=True)
class AttributeSpec:
    """Declaration of an attribute a widget kind accepts.

    Attributes:
        name: Attribute key as written in templates
        choices: Allowed literal values (None accepts anything)
        default: Value reported before the attribute is set
        description: Human-readable description
    """

    name: str
    choices: Optional[Sequence[str]] = None
    default: Optional[str] = None
    description: str = ""

    def validate(self, value: str) -> bool:
        return self.choices is None or value in self.choices


class WidgetNode(ABC):
    """Base class for all widget kinds."""

    kind: str = "Widget"
    is_container: ClassVar[bool] = False
    attribute_specs: ClassVar[Dict[str, AttributeSpec]] = {}

    def __init__(self) -> None:
        self._attributes: Dict[str, str] = {}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} kind={self.kind!r} attributes={self._attributes!r}>"

    @property
    def attributes(self) -> Dict[str, str]:
        """Raw attribute values, defaults included."""
        values = {
            name: spec.default
            for name, spec in self.attribute_specs.items()
            if spec.default is not None
        }
        values.update(self._attributes)
        return values

    @property
    def explicit_attributes(self) -> Dict[str, str]:
        """Only the attributes set from the template, in the order set."""
        return dict(self._attributes)

    @property
    def children(self) -> List["WidgetNode"]:
        return []

    def accept_attribute(self, key: str, value: str, line_number: Optional[int] = None) -> None:
        """Validate and store an attribute.

        Raises:
            UnknownAttributeError: If ``key`` is not declared for this kind
            InvalidAttributeValueError: If ``value`` is outside the allowed set
        """
        spec = self.attribute_specs.get(key)
        if spec is None:
            raise UnknownAttributeError(line_number, self.kind, key, value)
        if not spec.validate(value):
            raise InvalidAttributeValueError(line_number, self.kind, key, value, spec.choices)
        self._attributes[key] = value

    @abstractmethod
    def accept_child(self, child: "WidgetNode", line_number: Optional[int] = None) -> None:
        """Attach ``child`` as the last child of this node."""

    @abstractmethod
    def render(
        self,
        region: Optional[Region],
        substitutions: Mapping[str, str],
        target: RenderTarget,
    ) -> None:
        """Draw this node into ``region`` (the whole target when None)."""

    def walk(self, visit: Callable[["WidgetNode", int], None], depth: int = 0) -> None:
        """Depth-first pre-order traversal."""
        visit(self, depth)
        for child in self.children:
            child.walk(visit, depth + 1)


class ContainerWidget(WidgetNode):
    """A widget that owns children and partitions its region among them."""

    is_container = True

    def __init__(self) -> None:
        super().__init__()
        self._children: List[WidgetNode] = []

    @property
    def children(self) -> List[WidgetNode]:
        return list(self._children)

    @property
    def direction(self) -> Direction:
        return Direction.VERTICAL

    def accept_child(self, child: WidgetNode, line_number: Optional[int] = None) -> None:
        self._children.append(child)

    def layout(self, region: Region) -> List[Region]:
        """Child regions, in child order."""
        return split_region(region, self.direction, len(self._children))

    def render(
        self,
        region: Optional[Region],
        substitutions: Mapping[str, str],
        target: RenderTarget,
    ) -> None:
        if region is None:
            region = target.area
        for child, child_region in zip(self._children, self.layout(region)):
            child.render(child_region, substitutions, target)


class LeafWidget(WidgetNode):
    """A widget that draws content itself and has no children."""

    def accept_child(self, child: WidgetNode, line_number: Optional[int] = None) -> None:
        raise CannotContainChildrenError(line_number, self.kind, text=f"{child.kind}:")

    @abstractmethod
    def content(self, substitutions: Mapping[str, str]) -> str:
        """The text this leaf draws."""

    def render(
        self,
        region: Optional[Region],
        substitutions: Mapping[str, str],
        target: RenderTarget,
    ) -> None:
        if region is None:
            region = target.area
        target.draw_text(region, self.content(substitutions))
