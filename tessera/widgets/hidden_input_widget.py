"""The module contains the implementation of the hidden input widget."""

from typing import TYPE_CHECKING

from tessera.core.constants import ARIA_DISABLED_ATTRIBUTE
from tessera.core.widget import Widget

if TYPE_CHECKING:
    from typing import Any

    from typing_extensions import Self

    from tessera.types import Config


class HiddenInputWidget(Widget):
    """The class implements the widget intended for creating
    'hidden'-type inputs.
    """

    tag_name = 'input'

    def __init__(self: 'Self', *, value: str = '', name: str = '', **kwargs: 'Any') -> None:
        """Initialize a hidden input widget object."""
        super().__init__(**kwargs)

        self.set_attributes({
            'type': 'hidden',
            'value': value,
            'name': name,
        })
        self.remove_attributes([ARIA_DISABLED_ATTRIBUTE])

    def get_config(self: 'Self', config: 'Config | None' = None) -> 'Config':
        """Return the configuration snapshot of the hidden input."""
        if config is None:
            config = {}

        config['value'] = self.get_attribute('value')
        config['name'] = self.get_attribute('name')

        return super().get_config(config)
