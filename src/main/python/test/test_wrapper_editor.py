import pytest

from editor.wrapper_editor import HoldTapMode, KeyEditSession, LayerModMode, LayerTapMode, ModMaskMode, ModTapMode, \
    NoWrapper, mode_from_keycode
from keycodes.fields import build_lm_keycode
from keycodes.ranges import WrapperKind


@pytest.fixture
def session(qtbot, resolver):
    def make(keycode, **kwargs):
        emitted = []
        s = KeyEditSession(keycode, resolver=resolver, **kwargs)
        s.keycode_changed.connect(emitted.append)
        s.emitted = emitted
        return s
    return make


@pytest.mark.parametrize("code, mode", [
    (0x0004, NoWrapper()),
    (0x5104, NoWrapper()),
    (0x0204, ModMaskMode(0x02)),
    (0x6104, ModTapMode(0x01)),
    (0x4304, LayerTapMode(3)),
    (0x5604, HoldTapMode()),
    (0x7043, LayerModMode(2, 0x03)),
])
def test_mode_from_keycode(code, mode):
    assert mode_from_keycode(code) == mode


def test_initial_state(session):
    s = session(0x4304)
    assert s.mode == LayerTapMode(3)
    assert s.selected_layer == 3
    assert s.show_layer_selector()
    assert not s.show_modifier_strip()

    s = session(0x4304, mask_only=True)
    assert s.mode == NoWrapper()
    assert not s.show_mode_buttons()


def test_leaving_layer_mod_never_leaks_modifier(session):
    # MOD_LGUI sits where a basic key would, and 0x08 would read as KC_E
    s = session(build_lm_keycode(1, 0x08))
    s.switch_mode(WrapperKind.LAYER_MOD)
    assert s.emitted == [0x0000]
    assert s.mode == NoWrapper()

    s = session(build_lm_keycode(1, 0x08))
    s.switch_mode(WrapperKind.LAYER_TAP)
    assert s.emitted == [0x4100]
    s = session(build_lm_keycode(1, 0x08))
    s.switch_mode(WrapperKind.MOD_MASK)
    assert s.emitted == [0x0000]
    assert s.mode == ModMaskMode(0)


def test_toggle_off_keeps_basic_key(session):
    s = session(0x0204)
    s.switch_mode(WrapperKind.MOD_MASK)
    assert s.emitted == [0x0004]
    assert s.mode == NoWrapper()


def test_toggle_off_without_change_emits_nothing(session):
    s = session(0x0004)
    s.switch_mode(WrapperKind.MOD_MASK)
    assert s.emitted == [0x0004]
    s.switch_mode(WrapperKind.MOD_MASK)
    assert s.emitted == [0x0004]
    assert s.mode == NoWrapper()


def test_mask_kept_between_mask_modes(session):
    s = session(0x0304)
    s.switch_mode(WrapperKind.MOD_TAP)
    assert s.emitted == [0x6304]
    assert s.mode == ModTapMode(0x03)
    s.switch_mode(WrapperKind.MOD_MASK)
    assert s.emitted[-1] == 0x0304


def test_mask_dropped_from_other_modes(session):
    s = session(0x4304)
    s.switch_mode(WrapperKind.MOD_TAP)
    assert s.emitted == [0x0004]
    assert s.mode == ModTapMode(0)
    s.set_mod_mask(0x02)
    assert s.emitted[-1] == 0x6204


def test_switch_to_layer_modes_use_selected_layer(session):
    s = session(0x0004)
    s.switch_mode(WrapperKind.LAYER_TAP)
    assert s.emitted == [0x4004]
    s.set_layer(5)
    assert s.emitted[-1] == 0x4504
    s.switch_mode(WrapperKind.LAYER_MOD)
    assert s.emitted[-1] == build_lm_keycode(5, 0)
    assert s.mode == LayerModMode(5, 0)
    s.set_mod_mask(0x12)
    assert s.emitted[-1] == build_lm_keycode(5, 0x12)
    s.set_layer(7)
    assert s.emitted[-1] == build_lm_keycode(7, 0x12)


def test_hold_tap(session):
    s = session(0x0204)
    s.switch_mode(WrapperKind.HOLD_TAP)
    assert s.emitted == [0x5604]
    assert s.mode == HoldTapMode()


def test_set_layer_out_of_range_ignored(session):
    s = session(0x4304, layers=4)
    s.set_layer(4)
    s.set_layer(-1)
    assert s.emitted == []
    assert s.selected_layer == 3


def test_set_mod_mask_ignored_without_strip(session):
    s = session(0x4304)
    s.set_mod_mask(0x02)
    assert s.emitted == []


def test_select_keycode_wraps_by_mode(session):
    s = session(0x0204)
    s.select_keycode("KC_B")
    assert s.emitted == [0x0205]

    s = session(0x4304)
    s.select_keycode("KC_B")
    assert s.emitted == [0x4305]

    s = session(0x5604)
    s.select_keycode("KC_B")
    assert s.emitted == [0x5605]

    s = session(build_lm_keycode(2, 0))
    s.select_keycode("MOD_LSFT")
    assert s.emitted == [build_lm_keycode(2, 0x02)]
    assert s.mode == LayerModMode(2, 0x02)

    s = session(0x0004)
    s.select_keycode("MO(1)")
    assert s.emitted == [0x5101]


def test_mask_only_replaces_inner_byte(session):
    s = session(0x5104, mask_only=True)
    assert s.keycode & 0xFF == 0x04
    s.select_keycode("KC_SPACE")
    assert s.emitted == [0x512C]
    s.apply_inner_byte(0x04)
    assert s.emitted[-1] == 0x5104
    s.switch_mode(WrapperKind.LAYER_TAP)
    assert s.emitted[-1] == 0x5104


def test_apply_raw_rederives_mode(session):
    s = session(0x0004)
    s.apply_raw(0x4604)
    assert s.mode == LayerTapMode(6)
    assert s.selected_layer == 6
    s.apply_raw(0x0004)
    assert s.mode == NoWrapper()
    assert s.selected_layer == 6


def test_search_keycode_hides_layer_mod(session):
    s = session(build_lm_keycode(1, 0x08))
    assert s.search_keycode == 0
    s = session(0x0204)
    assert s.search_keycode == 0x0204


def test_signals(qtbot, resolver):
    s = KeyEditSession(0x0204, resolver=resolver)
    with qtbot.waitSignal(s.mode_changed, timeout=1000) as blocker:
        s.switch_mode(WrapperKind.MOD_TAP)
    assert blocker.args == [ModTapMode(0x02)]
    with qtbot.waitSignal(s.keycode_changed, timeout=1000) as blocker:
        s.set_mod_mask(0x03)
    assert blocker.args == [0x6304]
    assert s.serialize() == "C_S_T(KC_A)"
