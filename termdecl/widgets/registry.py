"""
Widget registry for the template compiler.

Widget kinds register themselves with the name used in template
declarations. The parser only ever asks the registry to resolve a name; it
never special-cases a kind, so new kinds are added here without touching
the compiler.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type, TypeVar

from ..exceptions import InvalidWidgetTypeError
from .base import WidgetNode

logger = logging.getLogger(__name__)

# Type variable for widget classes
W = TypeVar("W", bound=WidgetNode)

WidgetFactory = Callable[[], WidgetNode]


@dataclass
class WidgetRegistration:
    """Registration information for a widget kind.

    Attributes:
        kind: Name used in template declarations ("Layout:")
        factory: Zero-argument constructor for a default-configured node
        container: Whether nodes of this kind accept children
        description: Human-readable description
    """

    kind: str
    factory: WidgetFactory
    container: bool = False
    description: str = ""

    def create_instance(self) -> WidgetNode:
        """Create an empty node of this kind."""
        return self.factory()


class WidgetRegistry:
    """Registry for widget kinds.

    Usage:
        # Register a widget class
        widget_registry.register("Layout", LayoutWidget)

        # Register with a factory
        widget_registry.register("Banner", lambda: ParagraphWidget(), container=False)

        # Look up and create
        node = widget_registry.resolve("Layout")
    """

    def __init__(self) -> None:
        self._widgets: Dict[str, WidgetRegistration] = {}

    def register(
        self,
        kind: str,
        factory: WidgetFactory,
        *,
        container: Optional[bool] = None,
        description: str = "",
    ) -> None:
        """Register a widget kind.

        Args:
            kind: Name used in template declarations
            factory: Zero-argument constructor (usually the widget class)
            container: Whether the kind accepts children; when omitted it is
                read from the factory's ``is_container``, or from a node the
                factory builds if it has none (e.g. a lambda)
            description: Human-readable description
        """
        if kind in self._widgets:
            logger.warning(f"Overwriting existing widget registration: {kind}")

        if container is None:
            container = getattr(factory, "is_container", None)
        if container is None:
            container = factory().is_container

        self._widgets[kind] = WidgetRegistration(
            kind=kind,
            factory=factory,
            container=container,
            description=description,
        )
        logger.debug(f"Registered widget kind: {kind}")

    def unregister(self, kind: str) -> bool:
        """Unregister a widget kind.

        Returns:
            True if the kind was unregistered, False if not found
        """
        if kind in self._widgets:
            del self._widgets[kind]
            return True
        return False

    def get(self, kind: str) -> Optional[WidgetRegistration]:
        """Get registration info for a widget kind, or None."""
        return self._widgets.get(kind)

    def resolve(self, kind: str, line_number: Optional[int] = None) -> WidgetNode:
        """Create an empty node of the named kind.

        The node's ``kind`` is the name it was resolved under, so aliases
        serialize and report errors with the name used in the template.

        Raises:
            InvalidWidgetTypeError: If the kind is not registered
        """
        registration = self._widgets.get(kind)
        if registration is None:
            raise InvalidWidgetTypeError(line_number, kind)
        node = registration.create_instance()
        node.kind = kind
        return node

    def is_container(self, kind: str) -> bool:
        registration = self._widgets.get(kind)
        return bool(registration and registration.container)

    def has(self, kind: str) -> bool:
        return kind in self._widgets

    def list_kinds(self) -> List[str]:
        """List all registered kind names, sorted."""
        return sorted(self._widgets.keys())

    def list_registrations(self) -> List[WidgetRegistration]:
        return [self._widgets[kind] for kind in self.list_kinds()]

    def decorator(
        self,
        kind: str,
        *,
        description: str = "",
    ) -> Callable[[Type[W]], Type[W]]:
        """Decorator for registering widget classes.

        Usage:
            @widget_registry.decorator("Banner", description="Large heading")
            class BannerWidget(LeafWidget):
                ...
        """

        def wrapper(cls: Type[W]) -> Type[W]:
            self.register(kind, cls, description=description)
            return cls

        return wrapper


# Global widget registry instance
widget_registry = WidgetRegistry()


def register_builtin_widgets(registry: Optional[WidgetRegistry] = None) -> WidgetRegistry:
    """Register the built-in widget kinds.

    Called when the package is imported; pass a fresh registry to build an
    isolated one (e.g. per compiler instance).
    """
    from .layout import LayoutWidget
    from .paragraph import ParagraphWidget

    registry = registry if registry is not None else widget_registry

    registry.register(
        LayoutWidget.kind,
        LayoutWidget,
        description="Container splitting its area equally among children",
    )
    registry.register(
        ParagraphWidget.kind,
        ParagraphWidget,
        description="Text with {{key}} placeholders",
    )

    logger.debug("Registered built-in widget kinds")
    return registry
