import json
import struct

import pytest

from keymap import Keymap


@pytest.fixture
def keymap(resolver):
    return Keymap(layers=2, rows=2, cols=3, encoder_count=1, resolver=resolver)


def make_buffer(codes):
    return b"".join(struct.pack(">H", code) for code in codes)


def test_load_buffer(keymap):
    codes = [0x0004, 0x0005, 0x0204, 0x4104, 0x7002, 0x8000,
             0x0001, 0x0000, 0x5101, 0x6104, 0x5604, 0x0029]
    keymap.load_buffer(make_buffer(codes))
    assert keymap.layout[(0, 0, 0)] == "KC_A"
    assert keymap.layout[(0, 0, 2)] == "LSFT(KC_A)"
    assert keymap.layout[(0, 1, 0)] == "LT1(KC_A)"
    assert keymap.layout[(0, 1, 1)] == "LM0(MOD_LSFT)"
    assert keymap.layout[(0, 1, 2)] == "0x8000"
    assert keymap.layout[(1, 0, 2)] == "MO(1)"
    assert keymap.key_code(1, 1, 2) == 0x0029
    assert keymap.to_buffer() == make_buffer(codes)


def test_load_buffer_wrong_size(keymap):
    with pytest.raises(RuntimeError):
        keymap.load_buffer(b"\x00" * 10)


def test_set_key(keymap):
    keymap.set_key(0, 1, 2, "KC_PERC")
    assert keymap.layout[(0, 1, 2)] == "LSFT(KC_5)"
    keymap.set_key(1, 0, 0, 0x4204)
    assert keymap.key_code(1, 0, 0) == 0x4204
    assert keymap.key_code(1, 1, 1) == 0
    with pytest.raises(IndexError):
        keymap.set_key(2, 0, 0, "KC_A")
    with pytest.raises(IndexError):
        keymap.key_code(0, 2, 0)


def test_set_encoder(keymap):
    keymap.set_encoder(1, 0, 1, "KC_VOLU")
    assert keymap.encoder_layout[(1, 0, 1)] == "KC_VOLU"
    assert keymap.encoder_code(1, 0, 1) == 0xA9
    assert keymap.encoder_code(0, 0, 0) == 0
    with pytest.raises(IndexError):
        keymap.set_encoder(0, 1, 0, "KC_A")
    with pytest.raises(IndexError):
        keymap.set_encoder(0, 0, 2, "KC_A")


def test_save_layout(keymap):
    keymap.set_key(0, 0, 0, "KC_A")
    keymap.set_encoder(0, 0, 0, "KC_VOLD")
    data = json.loads(keymap.save_layout().decode("utf-8"))
    assert data["version"] == 1
    assert data["layout"][0][0] == ["KC_A", -1, -1]
    assert data["layout"][1][1] == [-1, -1, -1]
    assert data["encoder_layout"] == [[["KC_VOLD", -1]], [[-1, -1]]]


def test_restore_layout(keymap, resolver):
    data = {
        "version": 1,
        "layout": [
            [["KC_B", 0x0204, -1], ["LT1(KC_A)", "KC_NOT_REAL", "0x1234"], ["KC_C", "KC_C", "KC_C"]],
            [["KC_ENT", 4, 5]],
            [["KC_A"]],
        ],
        "encoder_layout": [[["KC_VOLU", 0xAA]], [[-1, "KC_MUTE"]]],
    }
    keymap.restore_layout(json.dumps(data).encode("utf-8"))
    assert keymap.layout[(0, 0, 0)] == "KC_B"
    assert keymap.layout[(0, 0, 1)] == "LSFT(KC_A)"
    assert (0, 0, 2) not in keymap.layout
    assert keymap.layout[(0, 1, 0)] == "LT1(KC_A)"
    assert keymap.layout[(0, 1, 1)] == "KC_NO"
    assert keymap.layout[(0, 1, 2)] == resolver.serialize(0x1234)
    assert keymap.layout[(1, 0, 0)] == "KC_ENTER"
    # rows and layers beyond the matrix are skipped
    assert (0, 2, 0) not in keymap.layout
    assert (2, 0, 0) not in keymap.layout
    assert keymap.encoder_layout[(0, 0, 0)] == "KC_VOLU"
    assert keymap.encoder_layout[(0, 0, 1)] == "KC_VOLD"
    assert (1, 0, 0) not in keymap.encoder_layout
    assert keymap.encoder_layout[(1, 0, 1)] == "KC_MUTE"


def test_restore_warns_on_unknown_name(keymap, caplog):
    data = {"layout": [[["KC_NOT_REAL"]]], "encoder_layout": []}
    keymap.restore_layout(json.dumps(data).encode("utf-8"))
    assert "KC_NOT_REAL" in caplog.text


def test_save_restore(keymap, resolver):
    keymap.load_buffer(make_buffer(range(0x4000, 0x4000 + 12)))
    keymap.set_encoder(1, 0, 0, "MO(1)")
    saved = keymap.save_layout()

    restored = Keymap(layers=2, rows=2, cols=3, encoder_count=1, resolver=resolver)
    restored.restore_layout(saved)
    assert restored.layout == keymap.layout
    assert restored.encoder_layout == keymap.encoder_layout
    assert restored.to_buffer() == keymap.to_buffer()
