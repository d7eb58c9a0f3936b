"""The module contains the tests for the focus order behavior."""

# ruff: noqa: ANN101, ANN201

from tessera.core.mixins import FocusOrder
from tessera.core.tag import Tag
from tessera.test.base import BaseTestCase
from tessera.widgets import CheckboxInputWidget
from tests.base import DummyOwner, RecordingTag


class FocusOrderTests(BaseTestCase):
    """The class implements the tests for the focus order behavior."""

    def setUp(self):
        """Create an owner and an element to be focused."""
        super().setUp()

        self.owner = DummyOwner()
        self.tab_indexed = RecordingTag('input')

    def _toggle_disabled(self, focus_order, disabled):
        self.owner.disabled = disabled
        focus_order.update_tab_index()

    def test_default_tab_index(self):
        """Tests the case when the tab index is not specified."""
        focus_order = FocusOrder(self.owner, self.tab_indexed)

        self.assertEqual(focus_order.get_tab_index(), 0)
        self.assertEqual(self.tab_indexed.get_attribute('tabindex'), 0)
        self.assertIsNone(self.tab_indexed.get_attribute('aria-disabled'))
        self.assertNotIn('tab_index', self.owner.get_config())

    def test_owner_is_tab_indexed_by_default(self):
        """Tests the case when no tab indexed element is specified."""
        FocusOrder(self.owner, tab_index=3)

        self.assertEqual(self.owner.get_attribute('tabindex'), 3)

    def test_coercing_tab_index(self):
        """Tests the coercion of the tab index values."""
        cases = [
            ('5', 5),
            ('-1', -1),
            (7, 7),
            ('007', 7),
            ('abc', None),
            ('5.5', None),
            (5.5, None),
            ('', None),
            (' 5', None),
            (True, None),
            (None, None),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                focus_order = FocusOrder(self.owner, Tag('input'), tab_index=value)
                self.assertEqual(focus_order.get_tab_index(), expected)

    def test_disabled_owner_is_skipped(self):
        """Tests that the effective tab index is -1 while the owner is disabled
        and the stored value survives toggling the disabled state.
        """
        for tab_index in (-3, 0, 5):
            with self.subTest(tab_index=tab_index):
                self.owner.disabled = False
                focus_order = FocusOrder(self.owner, self.tab_indexed, tab_index)

                self._toggle_disabled(focus_order, disabled=True)
                self.assertEqual(self.tab_indexed.get_attribute('tabindex'), -1)
                self.assertEqual(self.tab_indexed.get_attribute('aria-disabled'), 'true')
                self.assertEqual(focus_order.get_tab_index(), tab_index)

                self._toggle_disabled(focus_order, disabled=False)
                self.assertEqual(self.tab_indexed.get_attribute('tabindex'), tab_index)
                self.assertIsNone(self.tab_indexed.get_attribute('aria-disabled'))
                self.assertEqual(focus_order.get_tab_index(), tab_index)

    def test_removing_tab_index(self):
        """Tests the case when None is passed as the tab index."""
        for disabled in (False, True):
            with self.subTest(disabled=disabled):
                self.owner.disabled = disabled
                focus_order = FocusOrder(self.owner, self.tab_indexed, 5)
                focus_order.set_tab_index(None)

                self.assertIsNone(focus_order.get_tab_index())
                self.assertNotIn('tabindex', self.tab_indexed.attributes)
                self.assertNotIn('aria-disabled', self.tab_indexed.attributes)

    def test_same_value_is_not_reapplied(self):
        """Tests that setting the same tab index again doesn't touch the element."""
        focus_order = FocusOrder(self.owner, self.tab_indexed, 5)
        self.tab_indexed.calls.clear()

        focus_order.set_tab_index('5')
        focus_order.set_tab_index(5)

        self.assertEqual(self.tab_indexed.calls, [])

    def test_config_contribution(self):
        """Tests that the tab index gets into the config only if
        it differs from the default one.
        """
        focus_order = FocusOrder(self.owner, self.tab_indexed)

        focus_order.set_tab_index(-1)
        self.assertEqual(self.owner.get_config()['tab_index'], -1)

        focus_order.set_tab_index(None)
        config = self.owner.get_config()
        self.assertIn('tab_index', config)
        self.assertIsNone(config['tab_index'])

    def test_input_id_of_non_labelable_element(self):
        """Tests that no id is generated for an element a label
        can't be associated with.
        """
        for tag, attributes in [('div', {}), ('span', {}), ('input', {'type': 'hidden'})]:
            with self.subTest(tag=tag):
                element = RecordingTag(tag).set_attributes(attributes)
                focus_order = FocusOrder(self.owner, element, None)
                element.calls.clear()

                self.assertIsNone(focus_order.get_input_id())
                self.assertEqual(element.calls, [])
                self.assertIsNone(element.get_attribute('id'))

    def test_input_id_is_generated_once(self):
        """Tests the case when the labelable element has no id."""
        focus_order = FocusOrder(self.owner, self.tab_indexed)

        input_id = focus_order.get_input_id()

        self.assertEqual(input_id, 'tessera-1')
        self.assertEqual(focus_order.get_input_id(), input_id)
        self.assertEqual(self.tab_indexed.get_attribute('id'), input_id)

    def test_input_id_of_labelable_tags(self):
        """Tests the case-insensitive detection of labelable elements."""
        for tag in ('BUTTON', 'meter', 'output', 'Progress', 'select', 'textarea', 'input'):
            with self.subTest(tag=tag):
                focus_order = FocusOrder(self.owner, Tag(tag))
                self.assertIsNotNone(focus_order.get_input_id())

    def test_existing_input_id(self):
        """Tests the case when the labelable element already has an id."""
        self.tab_indexed.set_attributes({'id': 'name-input'})
        focus_order = FocusOrder(self.owner, self.tab_indexed)

        self.assertEqual(focus_order.get_input_id(), 'name-input')

    def test_input_widget_updates_tab_index(self):
        """Tests that an input widget refreshes the tab index of its
        input element when its disabled state changes.
        """
        widget = CheckboxInputWidget(tab_index=2)

        widget.set_disabled(True)
        self.assertEqual(widget.input.get_attribute('tabindex'), -1)
        self.assertEqual(widget.input.get_attribute('aria-disabled'), 'true')
        self.assertEqual(widget.input.get_attribute('disabled'), 'disabled')

        widget.set_disabled(False)
        self.assertEqual(widget.input.get_attribute('tabindex'), 2)
        self.assertIsNone(widget.input.get_attribute('aria-disabled'))
        self.assertIsNone(widget.input.get_attribute('disabled'))
        self.assertEqual(widget.focus_order.get_tab_index(), 2)
