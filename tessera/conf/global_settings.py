"""
Default Tessera settings. Override these using the module specified via
the TESSERA_SETTINGS_MODULE environment variable.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any

# The prefix used to generate the ids of elements
# which need to be associated with a label.
ELEMENT_ID_PREFIX = 'ooui-php-'

# The prefix combined with a flag name to get the class
# applied to a flagged element.
FLAG_CLASS_PREFIX = 'oo-ui-flaggedElement-'

LOGGING: dict[str, 'Any'] = {}
