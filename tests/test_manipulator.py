# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""Tests for the colour manipulator state machine."""

import logging

import pytest

from colour_math.edit import (
    ColourManipulator,
    ManipulatorConfig,
    ManipulatorState,
    Outcome,
    RotationPolicy,
    ScalarPolicy,
)
from colour_math.schema import HCV, ONE, RGB, U8, U64, Hue, Prop, UFDRNumber


def _hcv(red, green, blue):
    return RGB.from_floats([red, green, blue]).to_hcv()


class TestSetAndState:

    def test_defaults(self):
        m = ColourManipulator()
        assert m.hcv == HCV.WHITE
        assert m.state is ManipulatorState.GREY
        assert m.saved_hue is None
        assert not m.clamped
        assert m.rotation_policy is RotationPolicy.FAVOUR_CHROMA

    def test_set_hcv(self):
        m = ColourManipulator()
        assert m.set_hcv(HCV.RED)
        assert m.state is ManipulatorState.HAS_HUE
        assert m.saved_hue == Hue.RED
        assert not m.set_hcv(HCV.RED)

    def test_grey_keeps_saved_hue(self):
        m = ColourManipulator(hcv=HCV.CYAN)
        m.set_hcv(HCV.BLACK)
        assert m.state is ManipulatorState.GREY
        assert m.saved_hue == Hue.CYAN

    def test_set_rgb(self):
        m = ColourManipulator()
        assert m.set_rgb(RGB(0, 0, 255, U8))
        assert m.hcv == HCV.BLUE
        assert m.rgb(U8) == RGB(0, 0, 255, U8)

    def test_config(self):
        config = ManipulatorConfig(clamped=True, rotation_policy=RotationPolicy.FAVOUR_VALUE)
        m = ColourManipulator(config)
        assert m.clamped
        assert m.rotation_policy is RotationPolicy.FAVOUR_VALUE

    def test_same_colour_from_rgb_is_not_a_change(self):
        m = ColourManipulator(hcv=_hcv(0.6, 0.4, 0.3))
        assert m.decr_chroma(0.07)
        assert m.hcv.canonical() == HCV.from_props(*m.hcv.to_props())
        assert not m.set_rgb(m.rgb(U64))

    def test_logs_changes(self, caplog):
        m = ColourManipulator()
        with caplog.at_level(logging.DEBUG, logger="colour_math.edit.manipulator"):
            m.set_hcv(HCV.RED)
        assert "set" in caplog.text


class TestDecrChroma:

    def test_grey_is_noop(self):
        assert not ColourManipulator().decr_chroma(0.1)

    def test_reduces_chroma(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.decr_chroma(0.25)
        assert float(m.hcv.chroma) == pytest.approx(0.75)
        assert m.hcv.sum == UFDRNumber.ONE
        assert m.hcv.hue == Hue.RED

    def test_to_grey_saves_hue(self):
        m = ColourManipulator(hcv=HCV.MAGENTA)
        assert m.decr_chroma(1.0)
        assert m.state is ManipulatorState.GREY
        assert m.hcv.chroma == Prop.ZERO
        assert m.hcv.sum == UFDRNumber.TWO
        assert m.saved_hue == Hue.MAGENTA

    def test_oversized_delta_is_clamped(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.decr_chroma(5.0)
        assert m.state is ManipulatorState.GREY

    def test_zero_delta(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert not m.decr_chroma(0.0)


class TestIncrChroma:

    def test_full_chroma_is_noop(self):
        assert not ColourManipulator(hcv=HCV.RED).incr_chroma(0.1)

    def test_black_is_noop(self):
        m = ColourManipulator(hcv=HCV.BLACK)
        assert not m.incr_chroma(0.5)
        assert m.hcv == HCV.BLACK

    def test_grey_restores_saved_hue(self):
        m = ColourManipulator(hcv=HCV.BLUE)
        m.decr_chroma(1.0)
        assert m.incr_chroma(0.25)
        assert m.hcv.hue == Hue.BLUE
        assert float(m.hcv.chroma) == pytest.approx(0.25)
        assert m.hcv.sum == UFDRNumber.ONE

    def test_grey_without_history_uses_default(self):
        m = ColourManipulator(hcv=HCV.grey(0.5))
        assert m.incr_chroma(0.1)
        assert m.hcv.hue == Hue.RED

    def test_configured_default_hue(self):
        m = ColourManipulator(ManipulatorConfig(default_hue=Hue.GREEN), hcv=HCV.grey(0.5))
        assert m.incr_chroma(0.1)
        assert m.hcv.hue == Hue.GREEN

    def test_unclamped_moves_sum(self):
        m = ColourManipulator(hcv=HCV.WHITE)
        assert m.incr_chroma(0.5)
        assert float(m.hcv.chroma) == pytest.approx(0.5)
        assert float(m.hcv.sum) == pytest.approx(2.0)
        assert m.hcv.hue == Hue.RED

    def test_unclamped_reaches_full_chroma(self):
        m = ColourManipulator(hcv=HCV.grey(0.5))
        assert m.incr_chroma(1.0)
        assert m.hcv == HCV.RED

    def test_clamped_stops_at_max_chroma(self):
        m = ColourManipulator(ManipulatorConfig(clamped=True), hcv=HCV.grey(5.0 / 6.0))
        total = m.hcv.sum
        assert m.incr_chroma(1.0)
        assert m.hcv.chroma == Hue.RED.max_chroma_for_sum(total)
        assert float(m.hcv.chroma) == pytest.approx(0.25)
        assert m.hcv.sum == total
        assert not m.incr_chroma(0.1)

    def test_clamped_white_is_noop(self):
        m = ColourManipulator(ManipulatorConfig(clamped=True), hcv=HCV.WHITE)
        assert not m.incr_chroma(0.5)

    def test_incr_then_decr_restores_chroma(self):
        m = ColourManipulator(hcv=_hcv(0.6, 0.4, 0.3))
        original = m.hcv
        assert m.incr_chroma(0.1)
        assert m.decr_chroma(0.1)
        assert m.hcv.chroma.approx_eq(original.chroma)
        assert m.hcv == original


class TestValue:

    def test_grey_lightens(self):
        m = ColourManipulator(hcv=HCV.grey(0.5))
        assert m.incr_value(0.1)
        assert float(m.hcv.value) == pytest.approx(0.6)

    def test_limits(self):
        assert not ColourManipulator(hcv=HCV.WHITE).incr_value(0.1)
        assert not ColourManipulator(hcv=HCV.BLACK).decr_value(0.1)

    def test_clamped_keeps_chroma(self):
        m = ColourManipulator(ManipulatorConfig(clamped=True), hcv=HCV.RED)
        assert not m.incr_value(0.1)
        assert m.hcv == HCV.RED

    def test_unclamped_trades_chroma(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.incr_value(0.1)
        assert float(m.hcv.sum) == pytest.approx(1.3)
        assert float(m.hcv.chroma) == pytest.approx(0.85)
        assert m.hcv.hue == Hue.RED

    def test_darken_to_black(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.decr_value(1.0)
        assert m.hcv == HCV.BLACK
        assert m.state is ManipulatorState.GREY
        assert m.saved_hue == Hue.RED

    def test_compatible_change_keeps_chroma(self):
        m = ColourManipulator(hcv=_hcv(0.6, 0.4, 0.3))
        chroma = m.hcv.chroma
        assert m.incr_value(0.05)
        assert m.hcv.chroma == chroma


class TestRotate:

    def test_grey_is_noop(self):
        assert not ColourManipulator(hcv=HCV.grey(0.3)).rotate(30.0)

    def test_primary_to_primary(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.rotate(120.0)
        assert m.hcv == HCV.GREEN
        assert m.saved_hue == Hue.GREEN

    @pytest.mark.parametrize("angle", [0.0, 360.0, -720.0])
    def test_unchanged_hue_is_noop(self, angle):
        m = ColourManipulator(hcv=HCV.RED)
        assert not m.rotate(angle)

    @pytest.mark.parametrize("angle", [10.0, 50.0, 137.5, -95.0])
    def test_rotation_roundtrip(self, angle):
        m = ColourManipulator(hcv=_hcv(0.5, 0.4, 0.3))
        original = m.hcv
        assert m.rotate(angle)
        assert m.hcv.chroma == original.chroma
        assert m.rotate(-angle)
        assert m.hcv.hue_angle == pytest.approx(original.hue_angle, abs=1e-9)
        assert m.hcv == original

    def test_favour_chroma_moves_sum(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.rotate(60.0)
        assert m.hcv == HCV.YELLOW

    def test_favour_value_reduces_chroma(self):
        config = ManipulatorConfig(rotation_policy=RotationPolicy.FAVOUR_VALUE)
        m = ColourManipulator(config, hcv=HCV.RED)
        assert m.rotate(60.0)
        assert m.hcv.hue == Hue.YELLOW
        assert m.hcv.sum == UFDRNumber.ONE
        assert float(m.hcv.chroma) == pytest.approx(0.5)

    def test_policy_can_change(self):
        m = ColourManipulator(hcv=HCV.RED)
        m.rotation_policy = RotationPolicy.FAVOUR_VALUE
        m.rotate(60.0)
        assert m.hcv.sum == UFDRNumber.ONE


class TestOutcome:

    def test_changed(self):
        assert Outcome.OK.changed
        assert Outcome.CLAMPED.changed
        assert Outcome.ACCOMMODATED.changed
        assert not Outcome.NO_CHANGE.changed
        assert not Outcome.REJECTED.changed


class TestSetChroma:

    def test_compatible(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_chroma(Prop.HALF) is Outcome.OK
        assert m.hcv.chroma == Prop.HALF
        assert m.hcv.sum == UFDRNumber.ONE

    def test_same_chroma(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_chroma(Prop.ONE) is Outcome.NO_CHANGE

    def test_zero_makes_grey(self):
        m = ColourManipulator(hcv=HCV.BLUE)
        assert m.set_chroma(Prop.ZERO) is Outcome.OK
        assert m.state is ManipulatorState.GREY
        assert m.saved_hue == Hue.BLUE

    def test_grey_to_zero(self):
        assert ColourManipulator().set_chroma(Prop.ZERO) is Outcome.NO_CHANGE

    def test_reject(self):
        m = ColourManipulator(hcv=_hcv(0.9, 0.8, 0.8))
        original = m.hcv
        assert m.set_chroma(Prop.ONE, ScalarPolicy.REJECT) is Outcome.REJECTED
        assert m.hcv == original

    def test_clamp(self):
        m = ColourManipulator(hcv=_hcv(0.9, 0.8, 0.8))
        total = m.hcv.sum
        assert m.set_chroma(Prop.ONE, ScalarPolicy.CLAMP) is Outcome.CLAMPED
        assert m.hcv.sum == total
        assert m.hcv.chroma == m.hcv.hue.max_chroma_for_sum(total)
        assert float(m.hcv.chroma) == pytest.approx(0.25)
        assert m.set_chroma(Prop.ONE, ScalarPolicy.CLAMP) is Outcome.NO_CHANGE

    def test_accommodate(self):
        m = ColourManipulator(hcv=_hcv(0.9, 0.8, 0.8))
        assert m.set_chroma(Prop.ONE, ScalarPolicy.ACCOMMODATE) is Outcome.ACCOMMODATED
        assert m.hcv == HCV.RED

    def test_grey_takes_saved_hue(self):
        m = ColourManipulator(hcv=HCV.GREEN)
        m.set_chroma(Prop.ZERO)
        assert m.set_chroma(Prop.HALF, ScalarPolicy.REJECT) is Outcome.OK
        assert m.hcv.hue == Hue.GREEN

    def test_grey_reject(self):
        m = ColourManipulator(hcv=HCV.WHITE)
        assert m.set_chroma(Prop.HALF, ScalarPolicy.REJECT) is Outcome.REJECTED
        assert m.hcv == HCV.WHITE

    def test_policy_follows_clamped(self):
        m = ColourManipulator(ManipulatorConfig(clamped=True), hcv=_hcv(0.9, 0.8, 0.8))
        assert m.set_chroma(Prop.ONE) is Outcome.CLAMPED
        m = ColourManipulator(hcv=_hcv(0.9, 0.8, 0.8))
        assert m.set_chroma(Prop.ONE) is Outcome.ACCOMMODATED


class TestSetSum:

    def test_grey(self):
        m = ColourManipulator()
        assert m.set_sum(UFDRNumber.ONE) is Outcome.OK
        assert m.state is ManipulatorState.GREY
        assert m.hcv.sum == UFDRNumber.ONE

    def test_compatible(self):
        m = ColourManipulator(hcv=_hcv(0.6, 0.4, 0.3))
        chroma = m.hcv.chroma
        total = UFDRNumber.from_float(1.5)
        assert m.set_sum(total) is Outcome.OK
        assert m.hcv.sum == total
        assert m.hcv.chroma == chroma

    def test_same_sum(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_sum(UFDRNumber.ONE) is Outcome.NO_CHANGE

    def test_invalid_sum(self):
        with pytest.raises(ValueError, match="Sum"):
            ColourManipulator().set_sum(UFDRNumber(3 * ONE + 1))

    def test_reject(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_sum(UFDRNumber.TWO, ScalarPolicy.REJECT) is Outcome.REJECTED
        assert m.hcv == HCV.RED

    def test_clamp(self):
        m = ColourManipulator(hcv=_hcv(0.9, 0.8, 0.8))
        chroma = m.hcv.chroma
        assert m.set_sum(UFDRNumber.THREE, ScalarPolicy.CLAMP) is Outcome.CLAMPED
        assert m.hcv.chroma == chroma
        assert m.hcv.sum == m.hcv.hue.sum_range_for_chroma(chroma)[1]

    def test_clamp_at_limit(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_sum(UFDRNumber.TWO, ScalarPolicy.CLAMP) is Outcome.NO_CHANGE

    def test_accommodate(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_sum(UFDRNumber.TWO, ScalarPolicy.ACCOMMODATE) is Outcome.ACCOMMODATED
        assert m.hcv.sum == UFDRNumber.TWO
        assert float(m.hcv.chroma) == pytest.approx(0.5)

    def test_accommodate_to_grey(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_sum(UFDRNumber.ZERO, ScalarPolicy.ACCOMMODATE) is Outcome.ACCOMMODATED
        assert m.hcv == HCV.BLACK
        assert m.saved_hue == Hue.RED


class TestSetHue:

    def test_grey_only_saves_hue(self):
        m = ColourManipulator(hcv=HCV.grey(0.5))
        assert m.set_hue(Hue.BLUE) is Outcome.NO_CHANGE
        assert m.state is ManipulatorState.GREY
        assert m.saved_hue == Hue.BLUE
        assert m.incr_chroma(0.1)
        assert m.hcv.hue == Hue.BLUE

    def test_same_hue(self):
        assert ColourManipulator(hcv=HCV.RED).set_hue(Hue.RED) is Outcome.NO_CHANGE

    def test_compatible(self):
        m = ColourManipulator(hcv=_hcv(0.5, 0.4, 0.4))
        original = m.hcv
        assert m.set_hue(Hue.GREEN) is Outcome.OK
        assert m.hcv.hue == Hue.GREEN
        assert m.hcv.chroma == original.chroma
        assert m.hcv.sum == original.sum

    def test_favour_chroma(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_hue(Hue.CYAN, RotationPolicy.FAVOUR_CHROMA) is Outcome.ACCOMMODATED
        assert m.hcv == HCV.CYAN
        assert m.saved_hue == Hue.CYAN

    def test_favour_value(self):
        m = ColourManipulator(hcv=HCV.RED)
        assert m.set_hue(Hue.CYAN, RotationPolicy.FAVOUR_VALUE) is Outcome.CLAMPED
        assert m.hcv.hue == Hue.CYAN
        assert m.hcv.sum == UFDRNumber.ONE
        assert float(m.hcv.chroma) == pytest.approx(0.5)

    def test_policy_defaults_to_rotation_policy(self):
        config = ManipulatorConfig(rotation_policy=RotationPolicy.FAVOUR_VALUE)
        m = ColourManipulator(config, hcv=HCV.RED)
        assert m.set_hue(Hue.CYAN) is Outcome.CLAMPED
