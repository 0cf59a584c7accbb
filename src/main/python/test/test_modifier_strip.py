import unittest

from editor.modifier_strip import modifier_buttons, toggle_modifier


class TestModifierStrip(unittest.TestCase):

    def test_toggle_left(self):
        self.assertEqual(toggle_modifier(0x00, 1, False), 0x02)
        self.assertEqual(toggle_modifier(0x02, 0, False), 0x03)
        self.assertEqual(toggle_modifier(0x03, 1, False), 0x01)

    def test_toggle_right_sets_flag(self):
        self.assertEqual(toggle_modifier(0x00, 1, True), 0x12)
        self.assertEqual(toggle_modifier(0x12, 0, True), 0x13)

    def test_right_flag_dropped_with_last_modifier(self):
        self.assertEqual(toggle_modifier(0x12, 1, True), 0x00)
        self.assertEqual(toggle_modifier(0x12, 1, False), 0x00)

    def test_result_within_five_bits(self):
        for mask in range(32):
            for bit in range(4):
                for right in (False, True):
                    self.assertLessEqual(toggle_modifier(mask, bit, right), 0x1F)

    def test_buttons_no_modifiers(self):
        buttons = modifier_buttons(0x00)
        self.assertEqual([b.label for b in buttons],
                         ["LCtl", "LSft", "LAlt", "LGui", "RCtl", "RSft", "RAlt", "RGui"])
        self.assertTrue(all(b.enabled for b in buttons))
        self.assertFalse(any(b.active for b in buttons))

    def test_buttons_one_side_at_a_time(self):
        buttons = modifier_buttons(0x12)
        left, right = buttons[:4], buttons[4:]
        self.assertFalse(any(b.enabled for b in left))
        self.assertTrue(all(b.enabled for b in right))
        self.assertEqual([b.label for b in right if b.active], ["RSft"])

        buttons = modifier_buttons(0x05)
        left, right = buttons[:4], buttons[4:]
        self.assertEqual([b.label for b in left if b.active], ["LCtl", "LAlt"])
        self.assertFalse(any(b.enabled for b in right))
