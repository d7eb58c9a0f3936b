"""The package contains a widget library built on top of
the core behaviors.
"""

__all__ = (
    'CheckboxInputWidget',
    'CheckboxMultiselectInputWidget',
    'HiddenInputWidget',
    'InputWidget',
)

from tessera.widgets.base import InputWidget
from tessera.widgets.checkbox_input_widget import CheckboxInputWidget
from tessera.widgets.checkbox_multiselect_input_widget import CheckboxMultiselectInputWidget
from tessera.widgets.hidden_input_widget import HiddenInputWidget
