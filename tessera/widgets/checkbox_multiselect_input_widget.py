"""The module contains the implementation of the multiple checkbox input widget."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from tessera.core.layout import FieldLayout
from tessera.core.tag import Tag
from tessera.widgets.base import InputWidget
from tessera.widgets.checkbox_input_widget import CheckboxInputWidget

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from tessera.types import Config
    from tessera.widgets.types import OptionDescriptor, OptionDescriptors

LOGGER = logging.getLogger(__name__)


class CheckboxMultiselectInputWidget(InputWidget):
    """The class implements the widget consisting of several checkboxes.

    The value of the widget is the list of the keys of the checked options.
    """

    def __init__(
        self: 'Self',
        *,
        options: 'OptionDescriptors' = (),
        value: 'Any | None' = None,
        **kwargs: 'Any',
    ) -> None:
        """Initialize a multiple checkbox input widget object."""
        self.fields: dict[str, FieldLayout] = {}

        super().__init__(**kwargs)

        self.set_options(options)
        # The options must be set up before the value makes sense
        self.set_value(value)
        self.add_classes(['oo-ui-checkboxMultiselectInputWidget'])

    #
    # Private methods
    #

    def _get_checkbox(self: 'Self', key: str) -> 'CheckboxInputWidget':
        return self.fields[key].get_field()

    def _build_field(self: 'Self', option: 'OptionDescriptor') -> tuple[str, 'FieldLayout']:
        key = super().clean_up_value(option.get('data', option.get('key')))
        label = option.get('label')
        checkbox = CheckboxInputWidget(
            name=self.name,
            value=key,
            disabled=self.is_disabled() or bool(option.get('disabled', False)),
        )
        field = FieldLayout(
            checkbox,
            label=key if label is None else label,
            align='inline',
        )
        return key, field

    #
    # Public methods
    #

    def get_input_element(self: 'Self') -> 'Tag':
        """Return the element which is actually unused."""
        return Tag('unused')

    def clean_up_value(self: 'Self', value: 'Any') -> list[str]:
        """Clean up the incoming value, dropping the keys of the options
        the widget doesn't have.
        """
        clean_value: list[str] = []
        if isinstance(value, str) or not isinstance(value, Sequence):
            return clean_value

        for single_value in value:
            key = super().clean_up_value(single_value)
            if key not in self.fields:
                LOGGER.debug('Dropping the unknown option %r from the value', key)
                continue

            if key not in clean_value:
                clean_value.append(key)

        return clean_value

    def get_value(self: 'Self') -> list[str]:
        """Return the keys of the checked options."""
        return list(self.value)

    def set_value(self: 'Self', value: 'Any') -> 'Self':
        """Set the value of the widget and check the corresponding checkboxes."""
        self.value = self.clean_up_value(value)

        # Uncheck all the options first, so that the old and the new
        # value never turn out to be checked simultaneously.
        for field in self.fields.values():
            field.get_field().set_selected(False)

        for key in self.value:
            self._get_checkbox(key).set_selected(True)

        return self

    def set_options(self: 'Self', options: 'OptionDescriptors') -> 'Self':
        """Set the options available for the widget.

        The checkboxes are rebuilt and the stale keys are removed
        from the value.
        """
        self.fields = {}

        self.clear_content()
        for option in options:
            key, field = self._build_field(option)
            if key in self.fields:
                LOGGER.debug('The option %r is overwritten by a later one', key)

            self.fields[key] = field

        self.append_content(*self.fields.values())

        # Re-set the value, checking the checkboxes as needed.
        self.set_value(self.get_value())

        return self

    def get_options(self: 'Self') -> list['OptionDescriptor']:
        """Return the descriptors of the current options."""
        options: 'list[OptionDescriptor]' = []
        for field in self.fields.values():
            checkbox = field.get_field()
            options.append({
                'data': checkbox.get_value(),
                'label': field.get_label(),
                'disabled': checkbox.is_disabled(),
            })

        return options

    def set_disabled(self: 'Self', disabled: bool) -> 'Self':
        """Set the disabled state of the widget and all its checkboxes."""
        super().set_disabled(disabled)

        for field in self.fields.values():
            field.get_field().set_disabled(self.is_disabled())

        return self

    def get_config(self: 'Self', config: 'Config | None' = None) -> 'Config':
        """Return the configuration snapshot of the widget."""
        if config is None:
            config = {}

        config['options'] = self.get_options()

        return super().get_config(config)
