"""The module contains the behaviors which can be attached to any element.

A behavior is held by the owning widget rather than inherited by it.
It operates on a delegate element which defaults to the owner itself.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from tessera.conf import settings
from tessera.core.constants import (
    ARIA_DISABLED_ATTRIBUTE,
    DEFAULT_TAB_INDEX,
    ID_ATTRIBUTE,
    LABELABLE_TAGS,
    TABINDEX_ATTRIBUTE,
)
from tessera.core.tag import Tag

if TYPE_CHECKING:
    from typing_extensions import Self

    from tessera.types import (
        Config,
        ConfigurableOwner,
        DisableableOwner,
        Flags,
        TabIndex,
    )

LOGGER = logging.getLogger(__name__)

_TAB_INDEX_RE = re.compile(r'-?[0-9]+')


def _normalize_flags(flags: 'Flags') -> list[tuple[str, bool]]:
    """Turn the accepted shapes of flags into a list of (name, state) pairs."""
    if isinstance(flags, str):
        return [(flags, True)]

    if isinstance(flags, Mapping):
        return [(name, bool(state)) for name, state in flags.items()]

    if isinstance(flags, Iterable):
        instructions = []
        for entry in flags:
            if isinstance(entry, str):
                instructions.append((entry, True))
            elif isinstance(entry, tuple) and len(entry) == 2:  # noqa: PLR2004
                name, state = entry
                instructions.append((name, bool(state)))
            else:
                LOGGER.debug('Ignoring the flag entry of unknown shape: %r', entry)

        return instructions

    if flags is not None:
        LOGGER.debug('Ignoring the flags of unknown shape: %r', flags)

    return []


def is_labelable(tag: 'Tag') -> bool:
    """Check if a label can be associated with the element
    (i.e., whether it can be interacted with through a `<label for="…">`).
    """
    tag_name = tag.get_tag().lower()
    if tag_name == 'input' and tag.get_attribute('type') != 'hidden':
        return True

    return tag_name in LABELABLE_TAGS


class FlagSet:
    """The class implements a set of named flags.

    A flag, when set, adds the class combined from the FLAG_CLASS_PREFIX
    setting and the flag name to the flagged element. Flags are primarily
    useful for styling.
    """

    def __init__(
        self: 'Self',
        owner: 'ConfigurableOwner',
        flagged: 'Tag | None' = None,
        flags: 'Flags' = None,
    ) -> None:
        """Initialize a flag set object."""
        self.flagged = owner if flagged is None else flagged
        self.flags: dict[str, bool] = {}

        self.set_flags(flags)

        owner.register_config_callback(self._contribute_config)

    def _contribute_config(self: 'Self', config: 'Config') -> None:
        if self.flags:
            config['flags'] = self.get_flags()

    @staticmethod
    def _get_class(flag: str) -> str:
        return f'{settings.FLAG_CLASS_PREFIX}{flag}'

    def has_flag(self: 'Self', flag: str) -> bool:
        """Check if the flag is set."""
        return flag in self.flags

    def get_flags(self: 'Self') -> list[str]:
        """Return the names of all the flags set."""
        return list(self.flags)

    def clear_flags(self: 'Self') -> 'Self':
        """Clear all the flags."""
        remove = [self._get_class(flag) for flag in self.flags]

        self.flagged.remove_classes(remove)
        self.flags = {}

        return self

    def set_flags(self: 'Self', flags: 'Flags') -> 'Self':
        """Add and remove flags.

        The flags are either a name of a flag to add, an iterable of them,
        or a mapping from flag names to the boolean set/remove instructions.
        The flagged element receives one call to add the classes and
        one call to remove them.
        """
        add = []
        remove = []
        for flag, state in _normalize_flags(flags):
            if state:
                if flag not in self.flags:
                    self.flags[flag] = True
                    add.append(self._get_class(flag))
            elif flag in self.flags:
                del self.flags[flag]
                remove.append(self._get_class(flag))

        self.flagged.add_classes(add).remove_classes(remove)

        return self


class FocusOrder:
    """The class implements the support of the sequential focus navigation
    using the tabindex attribute.
    """

    def __init__(
        self: 'Self',
        owner: 'DisableableOwner',
        tab_indexed: 'Tag | None' = None,
        tab_index: 'TabIndex' = DEFAULT_TAB_INDEX,
    ) -> None:
        """Initialize a focus order object.

        Use 0 as tab_index to keep the default ordering, -1 to prevent
        tab focusing and None to suppress the tabindex attribute.
        """
        self.owner = owner
        self.tab_indexed = owner if tab_indexed is None else tab_indexed
        self.tab_index: int | None = None

        self.set_tab_index(tab_index)

        owner.register_config_callback(self._contribute_config)

    def _contribute_config(self: 'Self', config: 'Config') -> None:
        if self.tab_index != DEFAULT_TAB_INDEX:
            config['tab_index'] = self.tab_index

    @staticmethod
    def _clean_tab_index(tab_index: 'TabIndex') -> int | None:
        if tab_index is None or isinstance(tab_index, bool):
            return None

        tab_index = str(tab_index)
        return int(tab_index) if _TAB_INDEX_RE.fullmatch(tab_index) else None

    def set_tab_index(self: 'Self', tab_index: 'TabIndex') -> 'Self':
        """Set the tab index value, or None for no tab index."""
        tab_index = self._clean_tab_index(tab_index)

        if self.tab_index != tab_index:
            self.tab_index = tab_index
            self.update_tab_index()

        return self

    def update_tab_index(self: 'Self') -> 'Self':
        """Update the tabindex attribute in case of changes to the tab index
        or the disabled state.
        """
        disabled = self.owner.is_disabled()
        if self.tab_index is not None:
            # Do not index over disabled elements
            self.tab_indexed.set_attributes({
                TABINDEX_ATTRIBUTE: -1 if disabled else self.tab_index,
            })
            if disabled:
                # Screen readers do not inherit this from the parent elements
                self.tab_indexed.set_attributes({ARIA_DISABLED_ATTRIBUTE: 'true'})
            else:
                self.tab_indexed.remove_attributes([ARIA_DISABLED_ATTRIBUTE])
        else:
            self.tab_indexed.remove_attributes([TABINDEX_ATTRIBUTE, ARIA_DISABLED_ATTRIBUTE])

        return self

    def get_tab_index(self: 'Self') -> int | None:
        """Return the tab index value."""
        return self.tab_index

    def get_input_id(self: 'Self') -> str | None:
        """Return the id of the focusable element to be used for `<label for>`.

        If the element already has an id then it's returned, otherwise
        a unique id is generated, set on the element, and returned.
        """
        if not is_labelable(self.tab_indexed):
            return None

        element_id = self.tab_indexed.get_attribute(ID_ATTRIBUTE)
        if element_id is None:
            element_id = Tag.generate_element_id()
            self.tab_indexed.set_attributes({ID_ATTRIBUTE: element_id})

        return element_id
