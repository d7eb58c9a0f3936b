"""The module contains the constants used in the core."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Final

ARIA_DISABLED_ATTRIBUTE: 'Final' = 'aria-disabled'

ID_ATTRIBUTE: 'Final' = 'id'

TABINDEX_ATTRIBUTE: 'Final' = 'tabindex'

# Use 0 to keep the natural document order,
# -1 to prevent tab focusing and None to suppress the attribute.
DEFAULT_TAB_INDEX: 'Final' = 0

INFUSION_CLASS_KEY: 'Final' = '_'

# See https://html.spec.whatwg.org/multipage/forms.html#category-label
LABELABLE_TAGS: 'Final' = frozenset({
    'button',
    'meter',
    'output',
    'progress',
    'select',
    'textarea',
})

WIDGET_CLASS = 'oo-ui-widget'

WIDGET_DISABLED_CLASS = 'oo-ui-widget-disabled'

WIDGET_ENABLED_CLASS = 'oo-ui-widget-enabled'
