"""The module contains the types used throughout the framework."""

from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from typing_extensions import Self

Config = dict[str, Any]

ConfigCallback = Callable[[Config], None]

Flags = str | Iterable[str] | Mapping[str, bool] | None

Func = TypeVar('Func', bound=Callable[..., Any])

TabIndex = int | str | None


class ConfigurableOwner(Protocol):
    """The class implements the type of the owners which accept
    configuration contributors.
    """

    def register_config_callback(self: 'Self', func: ConfigCallback) -> None:
        """Register a function contributing to the configuration snapshot."""
        ...


class DisableableOwner(ConfigurableOwner, Protocol):
    """The class implements the type of the owners which
    have the disabled state.
    """

    def is_disabled(self: 'Self') -> bool:
        """Return whether the owner is disabled."""
        ...
