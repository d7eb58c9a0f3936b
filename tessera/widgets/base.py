"""The module contains base classes for widgets from the library."""

from typing import TYPE_CHECKING

from tessera.core.constants import DEFAULT_TAB_INDEX, ID_ATTRIBUTE
from tessera.core.mixins import FlagSet, FocusOrder
from tessera.core.tag import Tag
from tessera.core.widget import Widget

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from tessera.types import Config, Flags, TabIndex


class InputWidget(Widget):
    """The class implements the base interface for the widgets
    holding a value.

    The widget is flagged itself, while the focus order is maintained
    on its input element.
    """

    def __init__(
        self: 'Self',
        *,
        name: str | None = None,
        value: 'Any | None' = None,
        flags: 'Flags' = None,
        tab_index: 'TabIndex' = DEFAULT_TAB_INDEX,
        input_id: str | None = None,
        **kwargs: 'Any',
    ) -> None:
        """Initialize an input widget object."""
        super().__init__(**kwargs)

        self.name = name
        self.value: 'Any' = ''
        self.input = self.get_input_element()

        if name is not None:
            self.input.set_attributes({'name': name})

        if input_id is not None:
            self.input.set_attributes({ID_ATTRIBUTE: input_id})

        self.flags = FlagSet(self, flags=flags)
        self.focus_order = FocusOrder(self, tab_indexed=self.input, tab_index=tab_index)

        self._update_input_disabled()
        self.add_classes(['oo-ui-inputWidget'])
        self.append_content(self.input)
        self.set_value(value)

    #
    # Private methods
    #

    def _update_input_disabled(self: 'Self') -> None:
        if self.is_disabled():
            self.input.set_attributes({'disabled': 'disabled'})
        else:
            self.input.remove_attributes(['disabled'])

    #
    # Public methods
    #

    def get_input_element(self: 'Self') -> 'Tag':
        """Return the element holding the value."""
        return Tag('input')

    def get_input_id(self: 'Self') -> str | None:
        """Return the id of the input element to be used for `<label for>`."""
        return self.focus_order.get_input_id()

    def clean_up_value(self: 'Self', value: 'Any') -> 'Any':
        """Clean up the incoming value."""
        if value is None:
            return ''

        return str(value)

    def get_value(self: 'Self') -> 'Any':
        """Return the value of the input."""
        return self.value

    def set_value(self: 'Self', value: 'Any') -> 'Self':
        """Set the value of the input."""
        self.value = self.clean_up_value(value)
        self.input.set_attributes({'value': self.value})
        return self

    def set_disabled(self: 'Self', disabled: bool) -> 'Self':
        """Set the disabled state of the widget and its input element."""
        super().set_disabled(disabled)

        self._update_input_disabled()
        self.focus_order.update_tab_index()

        return self

    def get_config(self: 'Self', config: 'Config | None' = None) -> 'Config':
        """Return the configuration snapshot of the input widget."""
        if config is None:
            config = {}

        if self.name is not None:
            config['name'] = self.name

        config['value'] = self.get_value()

        input_id = self.input.get_attribute(ID_ATTRIBUTE)
        if input_id is not None:
            config['input_id'] = input_id

        return super().get_config(config)
