"""The module contains facilities for rebuilding elements
from their configuration snapshots.
"""

from typing import TYPE_CHECKING

from tessera.core.constants import INFUSION_CLASS_KEY
from tessera.core.element import Element
from tessera.core.exceptions import InfusionFailed
from tessera.utils.module_loading import import_string

if TYPE_CHECKING:
    from tessera.types import Config


def infuse(config: 'Config') -> 'Element':
    """Build an element from the configuration snapshot
    returned by its `get_config` method.
    """
    kwargs = dict(config)
    try:
        class_path = kwargs.pop(INFUSION_CLASS_KEY)
    except KeyError as exc:
        msg = f"The config doesn't contain the '{INFUSION_CLASS_KEY}' key"
        raise InfusionFailed(msg) from exc

    try:
        element_class = import_string(class_path)
    except ImportError as exc:
        msg = f'Failed to import {class_path}'
        raise InfusionFailed(msg) from exc

    if not isinstance(element_class, type) or not issubclass(element_class, Element):
        msg = f'{class_path} is not a subclass of Element'
        raise InfusionFailed(msg)

    return element_class(**kwargs)
