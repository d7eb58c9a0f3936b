"""The module contains the base class for all the elements which
contribute to a configuration snapshot.
"""

from typing import TYPE_CHECKING

from tessera.core.constants import ID_ATTRIBUTE, INFUSION_CLASS_KEY
from tessera.core.tag import Tag

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

    from typing_extensions import Self

    from tessera.types import Config, ConfigCallback


class Element(Tag):
    """The class implements an element which keeps the list of
    configuration contributors.

    The contributors are registered by the behaviors attached to
    the element and invoked in registration order when
    the configuration snapshot is requested.
    """

    def __init__(
        self: 'Self',
        *,
        id: str | None = None,  # noqa: A002
        classes: 'Iterable[str] | None' = None,
        data: 'Any | None' = None,
    ) -> None:
        """Initialize an element object."""
        super().__init__()

        self.config_callbacks: 'list[ConfigCallback]' = []
        self.data = data
        self.own_classes = list(classes or ())

        self.add_classes(self.own_classes)
        if id is not None:
            self.set_attributes({ID_ATTRIBUTE: id})

    def register_config_callback(self: 'Self', func: 'ConfigCallback') -> None:
        """Register a function which contributes to the configuration
        snapshot. The function accepts the config and modifies it in place.
        """
        self.config_callbacks.append(func)

    def get_data(self: 'Self') -> 'Any | None':
        """Return the element data."""
        return self.data

    def get_config(self: 'Self', config: 'Config | None' = None) -> 'Config':
        """Return the configuration snapshot of the element.

        Subclasses add their own state to the config and then pass it
        to the method of the parent class.
        """
        if config is None:
            config = {}

        for func in self.config_callbacks:
            func(config)

        cls = self.__class__
        config[INFUSION_CLASS_KEY] = f'{cls.__module__}.{cls.__qualname__}'

        element_id = self.get_id()
        if element_id is not None:
            config['id'] = element_id

        if self.own_classes:
            config['classes'] = list(self.own_classes)

        if self.data is not None:
            config['data'] = self.data

        return config
