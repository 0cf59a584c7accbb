import unittest

from keycodes.keycodes import build_catalog
from keycodes.resolver import KeycodeResolver, hex_keycode


class FakeKeyboard:

    layers = 4
    macro_count = 16
    tap_dance_count = 0

    def __init__(self):
        self.supported_features = set([
            "caps_word", "layer_lock", "repeat_key",
        ])


def keyboard_resolver(keyboard):
    return KeycodeResolver(build_catalog(keyboard.layers, keyboard.macro_count, keyboard.tap_dance_count,
                                         keyboard.supported_features))


class TestKeycode(unittest.TestCase):

    def _test_serialize(self, resolver):
        covered = 0

        # at a minimum, we should be able to deserialize/serialize everything
        for x in range(2 ** 16):
            s = resolver.serialize(x)
            d = resolver.deserialize(s)
            self.assertEqual(d, x, "{} serialized into {} deserialized into {}".format(x, s, d))
            if s != hex_keycode(x):
                covered += 1
        print("[layers={}] {}/{} covered keycodes, which is {:.4f}%".format(
            len(resolver.catalog.category("layers")), covered, 2 ** 16, 100 * covered / 2 ** 16))

    def test_serialize(self):
        self._test_serialize(keyboard_resolver(FakeKeyboard()))

    def test_serialize_full_catalog(self):
        self._test_serialize(KeycodeResolver(build_catalog()))

    def test_normalize(self):
        resolver = keyboard_resolver(FakeKeyboard())
        self.assertEqual(resolver.normalize("KC_PERC"), "LSFT(KC_5)")
        self.assertEqual(resolver.normalize("KC_ENT"), "KC_ENTER")
        self.assertEqual(resolver.normalize("KC_LCTL"), "KC_LCTRL")
        self.assertEqual(resolver.normalize(0x0204), "LSFT(KC_A)")

    def test_deserialize(self):
        resolver = keyboard_resolver(FakeKeyboard())
        self.assertEqual(resolver.deserialize(0x1234), 0x1234)
        self.assertEqual(resolver.deserialize("KC_A"), 0x04)
        self.assertEqual(resolver.deserialize("not a keycode"), 0)

    def test_smaller_keyboard_falls_back_to_hex(self):
        resolver = keyboard_resolver(FakeKeyboard())
        # MO(4) exists in firmware but not on a 4-layer keyboard
        self.assertEqual(resolver.serialize(0x5104), "0x5104")
        self.assertEqual(resolver.serialize(0x5103), "MO(3)")
        self.assertEqual(resolver.serialize(0x4404), "0x4404")
        self.assertEqual(resolver.serialize(0x4304), "LT3(KC_A)")
