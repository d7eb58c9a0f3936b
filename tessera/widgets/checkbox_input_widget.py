"""The module contains the implementation of the checkbox input widget."""

from typing import TYPE_CHECKING

from tessera.core.tag import Tag
from tessera.widgets.base import InputWidget

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from tessera.types import Config


class CheckboxInputWidget(InputWidget):
    """The class implements the checkbox input widget."""

    def __init__(self: 'Self', *, selected: bool = False, **kwargs: 'Any') -> None:
        """Initialize a checkbox input widget object."""
        self.selected = False

        super().__init__(**kwargs)

        self.add_classes(['oo-ui-checkboxInputWidget'])
        self.set_selected(selected)

    def get_input_element(self: 'Self') -> 'Tag':
        """Return the checkbox element."""
        return Tag('input').set_attributes({'type': 'checkbox'})

    def is_selected(self: 'Self') -> bool:
        """Check if the checkbox is checked."""
        return self.selected

    def set_selected(self: 'Self', state: bool) -> 'Self':
        """Check or uncheck the checkbox."""
        self.selected = bool(state)
        if self.selected:
            self.input.set_attributes({'checked': 'checked'})
        else:
            self.input.remove_attributes(['checked'])

        return self

    def get_config(self: 'Self', config: 'Config | None' = None) -> 'Config':
        """Return the configuration snapshot of the checkbox."""
        if config is None:
            config = {}

        if self.selected:
            config['selected'] = True

        return super().get_config(config)
