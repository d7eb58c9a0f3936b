"""The module contains the implementation of the field layout."""

from typing import TYPE_CHECKING

from tessera.core.element import Element
from tessera.core.infusion import infuse
from tessera.core.tag import Tag

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from tessera.core.widget import Widget
    from tessera.types import Config

_ALIGNMENTS = ('left', 'right', 'top', 'inline')


class FieldLayout(Element):
    """The class implements a layout wrapping a field widget with a label.

    The label is associated with the focusable element of the widget
    if the widget provides one.
    """

    def __init__(
        self: 'Self',
        field_widget: 'Widget | Config',
        *,
        label: 'Any | None' = None,
        align: str = 'left',
        **kwargs: 'Any',
    ) -> None:
        """Initialize a field layout object. The field widget is either
        a widget or its configuration snapshot.
        """
        super().__init__(**kwargs)

        if isinstance(field_widget, dict):
            field_widget = infuse(field_widget)

        self.field_widget = field_widget
        self.label = label
        self.align = align if align in _ALIGNMENTS else 'left'

        self.label_element = Tag('label')
        if label is not None:
            self.label_element.append_content(label)

        get_input_id = getattr(field_widget, 'get_input_id', None)
        input_id = get_input_id() if get_input_id else None
        if input_id is not None:
            self.label_element.set_attributes({'for': input_id})

        self.add_classes(['oo-ui-fieldLayout', f'oo-ui-fieldLayout-align-{self.align}'])
        self.append_content(self.field_widget, self.label_element)

    def get_field(self: 'Self') -> 'Widget':
        """Return the wrapped widget."""
        return self.field_widget

    def get_label(self: 'Self') -> 'Any | None':
        """Return the label."""
        return self.label

    def get_align(self: 'Self') -> str:
        """Return the alignment of the label."""
        return self.align

    def get_config(self: 'Self', config: 'Config | None' = None) -> 'Config':
        """Return the configuration snapshot of the layout."""
        if config is None:
            config = {}

        config['field_widget'] = self.field_widget.get_config()
        config['label'] = self.label
        config['align'] = self.align

        return super().get_config(config)
