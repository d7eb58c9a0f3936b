"""The module contains the implementation of the element abstraction
the widgets and their behaviors operate on.
"""

from typing import TYPE_CHECKING

from tessera.conf import settings
from tessera.core.constants import ID_ATTRIBUTE

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from typing import Any

    from typing_extensions import Self


class Tag:
    """The class implements an element with a tag name, classes,
    attributes and content.
    """

    element_id = 0

    tag_name = 'div'

    def __init__(self: 'Self', tag: str | None = None) -> None:
        """Initialize a tag object."""
        self.tag = tag or self.tag_name
        self.classes: list[str] = []
        self.attributes: 'dict[str, Any]' = {}
        self.content: 'list[Any]' = []

    def __repr__(self: 'Self') -> str:
        """Return a system representation of a tag."""
        return f'<{self.__class__.__name__} {self.tag!r}>'

    #
    # Public methods
    #

    @staticmethod
    def generate_element_id() -> str:
        """Generate a unique id for an element."""
        Tag.element_id += 1
        return f'{settings.ELEMENT_ID_PREFIX}{Tag.element_id}'

    def get_tag(self: 'Self') -> str:
        """Return the tag name."""
        return self.tag

    def add_classes(self: 'Self', classes: 'Iterable[str]') -> 'Self':
        """Add the classes which are not applied yet."""
        for class_name in classes:
            if class_name not in self.classes:
                self.classes.append(class_name)

        return self

    def remove_classes(self: 'Self', classes: 'Iterable[str]') -> 'Self':
        """Remove the classes."""
        removed = set(classes)
        self.classes = [class_name for class_name in self.classes if class_name not in removed]
        return self

    def toggle_classes(self: 'Self', classes: 'Iterable[str]', *, state: bool) -> 'Self':
        """Add or remove the classes depending on the state."""
        if state:
            return self.add_classes(classes)

        return self.remove_classes(classes)

    def has_class(self: 'Self', class_name: str) -> bool:
        """Check if the class is applied."""
        return class_name in self.classes

    def get_classes(self: 'Self') -> list[str]:
        """Return the applied classes."""
        return list(self.classes)

    def set_attributes(self: 'Self', attributes: 'Mapping[str, Any]') -> 'Self':
        """Set the attributes, overwriting the existing values."""
        self.attributes.update(attributes)
        return self

    def remove_attributes(self: 'Self', names: 'Iterable[str]') -> 'Self':
        """Remove the attributes. Missing attributes are ignored."""
        for name in names:
            self.attributes.pop(name, None)

        return self

    def get_attribute(self: 'Self', name: str) -> 'Any | None':
        """Return the value of the attribute or None if it's not set."""
        return self.attributes.get(name)

    def get_id(self: 'Self') -> str | None:
        """Return the id attribute."""
        return self.get_attribute(ID_ATTRIBUTE)

    def append_content(self: 'Self', *content: 'Any') -> 'Self':
        """Append the content to the end of the element."""
        self.content.extend(content)
        return self

    def clear_content(self: 'Self') -> 'Self':
        """Remove all the content of the element."""
        self.content = []
        return self

    def get_content(self: 'Self') -> list['Any']:
        """Return the content of the element."""
        return list(self.content)
