"""The module contains types intended for use in the widgets only."""

from typing import Any, TypedDict


class OptionDescriptor(TypedDict, total=False):
    """The class represents an option of a widget consisting of
    several toggle controls.
    """

    data: Any
    key: Any
    label: Any
    disabled: bool


OptionDescriptors = list[OptionDescriptor] | tuple[OptionDescriptor, ...]
