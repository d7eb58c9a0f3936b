"""The module contains the base class for widgets."""

from typing import TYPE_CHECKING

from tessera.core.constants import (
    ARIA_DISABLED_ATTRIBUTE,
    WIDGET_CLASS,
    WIDGET_DISABLED_CLASS,
    WIDGET_ENABLED_CLASS,
)
from tessera.core.element import Element

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from tessera.types import Config


class Widget(Element):
    """The class implements an element which can be disabled."""

    def __init__(self: 'Self', *, disabled: bool = False, **kwargs: 'Any') -> None:
        """Initialize a widget object."""
        super().__init__(**kwargs)

        self.disabled = False
        self.add_classes([WIDGET_CLASS])
        self._update_disabled(disabled)

    def _update_disabled(self: 'Self', disabled: bool) -> None:
        """Store the disabled state and reflect it in the classes and attributes."""
        self.disabled = bool(disabled)
        self.toggle_classes([WIDGET_DISABLED_CLASS], state=self.disabled)
        self.toggle_classes([WIDGET_ENABLED_CLASS], state=not self.disabled)
        self.set_attributes({ARIA_DISABLED_ATTRIBUTE: 'true' if self.disabled else 'false'})

    def is_disabled(self: 'Self') -> bool:
        """Check if the widget is disabled."""
        return self.disabled

    def set_disabled(self: 'Self', disabled: bool) -> 'Self':
        """Set the disabled state of the widget."""
        self._update_disabled(disabled)
        return self

    def get_config(self: 'Self', config: 'Config | None' = None) -> 'Config':
        """Return the configuration snapshot of the widget."""
        if config is None:
            config = {}

        if self.disabled:
            config['disabled'] = True

        return super().get_config(config)
