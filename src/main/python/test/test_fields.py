import unittest

from keycodes.fields import build_lm_keycode, build_lt_keycode, build_mod_mask_keycode, build_mod_tap_keycode, \
    build_sht_keycode, extract_basic_key, extract_inner_byte, extract_lm_layer, extract_lm_mod, extract_lt_layer, \
    extract_mod_mask, replace_inner_byte
from keycodes.ranges import classify, WrapperKind


class TestFields(unittest.TestCase):

    def test_mod_mask_round_trip(self):
        for mask in range(1, 32):
            for key in range(256):
                code = build_mod_mask_keycode(mask, key)
                self.assertIs(classify(code), WrapperKind.MOD_MASK)
                self.assertEqual(extract_mod_mask(code), mask)
                self.assertEqual(extract_basic_key(code), key)

    def test_mod_tap_round_trip(self):
        for mask in range(1, 32):
            for key in range(256):
                code = build_mod_tap_keycode(mask, key)
                if classify(code) is not WrapperKind.MOD_TAP:
                    # right control alone lands in the layer-mod block
                    self.assertIn(mask, (0x10, 0x11))
                    continue
                self.assertEqual(extract_mod_mask(code), mask)
                self.assertEqual(extract_basic_key(code), key)

    def test_degeneration(self):
        for key in range(256):
            self.assertEqual(build_mod_mask_keycode(0, key), key)
            self.assertEqual(build_mod_tap_keycode(0, key), key)

    def test_layer_tap_round_trip(self):
        self.assertEqual(build_lt_keycode(2, 4), 0x4204)
        self.assertEqual(extract_lt_layer(0x4204), 2)
        self.assertEqual(extract_basic_key(0x4204), 4)
        for layer in range(16):
            for key in range(256):
                code = build_lt_keycode(layer, key)
                self.assertIs(classify(code), WrapperKind.LAYER_TAP)
                self.assertEqual(extract_lt_layer(code), layer)
                self.assertEqual(extract_basic_key(code), key)

    def test_layer_mod_round_trip(self):
        self.assertEqual(build_lm_keycode(0, 0), 0x7000)
        self.assertEqual(build_lm_keycode(0, 2), 0x7002)
        self.assertEqual(extract_lm_mod(0x7002), 2)
        # layer 1 lands on bit 5, right-hand flag keeps bit 4
        self.assertEqual(build_lm_keycode(1, 0x10), 0x7030)
        self.assertEqual(extract_lm_layer(0x7030), 1)
        for layer in range(16):
            for mod in range(32):
                code = build_lm_keycode(layer, mod)
                self.assertIs(classify(code), WrapperKind.LAYER_MOD)
                self.assertEqual(extract_lm_layer(code), layer)
                self.assertEqual(extract_lm_mod(code), mod)

    def test_hold_tap(self):
        self.assertEqual(build_sht_keycode(0x04), 0x5604)
        self.assertIs(classify(build_sht_keycode(0xEF)), WrapperKind.HOLD_TAP)
        # the top of the block holds the swap-hands action keys
        self.assertIs(classify(build_sht_keycode(0xF0)), WrapperKind.UNKNOWN)

    def test_inputs_are_truncated(self):
        self.assertEqual(build_lt_keycode(0x12, 0x104), 0x4204)
        self.assertEqual(build_mod_mask_keycode(0x22, 0x104), 0x0204)
        self.assertEqual(build_lm_keycode(0x11, 0x22), build_lm_keycode(1, 2))
        self.assertEqual(build_sht_keycode(0x104), 0x5604)

    def test_inner_byte(self):
        self.assertEqual(extract_inner_byte(0x5104), 0x04)
        self.assertEqual(replace_inner_byte(0x5104, 0x2C), 0x512C)
        self.assertEqual(replace_inner_byte(0x5104, 0x12C), 0x512C)
        self.assertEqual(extract_inner_byte(0x7032), 0x32)
        self.assertEqual(replace_inner_byte(0x0704, 0x05), 0x0705)
