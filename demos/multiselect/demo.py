"""The demo shows how the multiple checkbox widget keeps its value in sync
with the options.
"""

import json
import os

import tessera
from tessera.core.infusion import infuse
from tessera.widgets import CheckboxMultiselectInputWidget


def main():
    """Runs the demo."""

    os.environ.setdefault('TESSERA_SETTINGS_MODULE', 'demos.multiselect.settings')
    tessera.setup()

    widget = CheckboxMultiselectInputWidget(
        name='toppings',
        options=[
            {'data': 'cheese', 'label': 'Cheese'},
            {'data': 'ham', 'label': 'Ham'},
            {'data': 'olives', 'label': 'Olives', 'disabled': True},
        ],
        value=['cheese', 'ham', 'pineapple'],
        flags=['primary'],
    )
    print('Value:', widget.get_value())

    widget.set_options([{'data': 'ham', 'label': 'Ham'}, {'data': 'onion', 'label': 'Onion'}])
    print('Value after replacing the options:', widget.get_value())

    config = json.dumps(widget.get_config(), indent=2)
    print(config)

    infused = infuse(json.loads(config))
    print('Infused value:', infused.get_value())


if __name__ == '__main__':
    main()
