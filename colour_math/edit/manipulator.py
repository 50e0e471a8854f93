# Copyright (c) 2026 Colour Math
# SPDX-License-Identifier: MIT

"""
Colour manipulator.

A stateful editor over one HCV value. Chroma, value and hue edits keep the
colour inside the RGB cube.

Editing is built on three absolute setters:
- set_chroma(chroma, policy): new chroma at the current hue and sum
- set_sum(total, policy): new sum at the current hue and chroma
- set_hue(hue, policy): new hue at the current chroma and sum

When the requested scalar does not fit, a ScalarPolicy decides what gives
way (CLAMP the request, ACCOMMODATE it by moving the other scalar, or
REJECT it), and the setter reports what happened as an Outcome. The
relative edits (incr/decr chroma and value, rotate) call the setters with
the policy implied by ``clamped`` and report a plain bool.

The live colour is either chromatic (HAS_HUE) or GREY. Taking chroma down
to zero drops the hue from the live colour but keeps it as ``saved_hue``,
so a later chroma increase brings the same hue back.

Not thread-safe: use one manipulator per edit session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from colour_math.schema import HCV, RGB, Hue, LightLevel, Prop, UFDRNumber

logger = logging.getLogger(__name__)

Delta = Union[Prop, float]


class RotationPolicy(Enum):
    """What to preserve when a new hue cannot keep both chroma and sum."""
    FAVOUR_CHROMA = "favour_chroma"  # keep chroma, move the sum
    FAVOUR_VALUE = "favour_value"    # keep the sum, reduce chroma


class ScalarPolicy(Enum):
    """What to do when a requested chroma or sum does not fit."""
    CLAMP = "clamp"              # move the request to the nearest value that fits
    ACCOMMODATE = "accommodate"  # keep the request, move the other scalar
    REJECT = "reject"            # leave the colour alone


class Outcome(Enum):
    """Result of an absolute set operation."""
    OK = "ok"
    CLAMPED = "clamped"
    ACCOMMODATED = "accommodated"
    NO_CHANGE = "no_change"
    REJECTED = "rejected"

    @property
    def changed(self) -> bool:
        return self in (Outcome.OK, Outcome.CLAMPED, Outcome.ACCOMMODATED)


class ManipulatorState(Enum):
    """Live state of the edited colour."""
    HAS_HUE = "has_hue"
    GREY = "grey"


@dataclass(frozen=True)
class ManipulatorConfig:
    """Configuration for a ColourManipulator."""

    # Clamped mode never trades value for chroma: chroma increases stop at
    # the maximum for the current sum, and value edits keep chroma intact.
    # Unclamped mode moves the sum (or lowers chroma) to make room.
    clamped: bool = False

    rotation_policy: RotationPolicy = RotationPolicy.FAVOUR_CHROMA

    # Hue given to a grey that has never had one when chroma is added
    default_hue: Hue = Hue.RED


def _clamp_sum(total: UFDRNumber, bounds: tuple[UFDRNumber, UFDRNumber]) -> UFDRNumber:
    low, high = bounds
    return min(max(total, low), high)


class ColourManipulator:
    """
    Stateful HCV editor.

    Args:
        config: Manipulator settings (uses defaults if None)
        hcv: Initial colour (WHITE if None)
    """

    def __init__(
        self,
        config: Optional[ManipulatorConfig] = None,
        hcv: Optional[HCV] = None,
    ) -> None:
        config = config or ManipulatorConfig()
        self.clamped = config.clamped
        self.rotation_policy = config.rotation_policy
        self._default_hue = config.default_hue
        self._hcv = HCV.WHITE
        self._saved_hue: Optional[Hue] = None
        if hcv is not None:
            self.set_hcv(hcv)

    # -- State ----------------------------------------------------------------

    @property
    def hcv(self) -> HCV:
        return self._hcv

    def rgb(self, level: Optional[LightLevel] = None) -> RGB:
        return self._hcv.to_rgb(level)

    @property
    def state(self) -> ManipulatorState:
        if self._hcv.hue is None:
            return ManipulatorState.GREY
        return ManipulatorState.HAS_HUE

    @property
    def saved_hue(self) -> Optional[Hue]:
        """Last hue the colour had (kept while the colour is grey)."""
        return self._saved_hue

    def _scalar_policy(self, policy: Optional[ScalarPolicy] = None) -> ScalarPolicy:
        if policy is not None:
            return policy
        return ScalarPolicy.CLAMP if self.clamped else ScalarPolicy.ACCOMMODATE

    def _update(self, hcv: HCV, operation: str) -> bool:
        """
        Store ``hcv`` if it differs from the live colour.

        Setters keep the live hue while chroma or sum changes, so the stored
        HCV need not be ``canonical()``: its position can sit a few raw units
        from the one its own RGB triple would give. Comparisons against
        colours from elsewhere go through ``canonical()`` (see ``set_hcv``).
        """
        if hcv == self._hcv:
            return False
        logger.debug("%s: %s -> %s", operation, self._hcv, hcv)
        self._hcv = hcv
        if hcv.hue is not None:
            self._saved_hue = hcv.hue
        return True

    def _apply(self, hcv: HCV, operation: str, outcome: Outcome) -> Outcome:
        if self._update(hcv, operation):
            return outcome
        return Outcome.NO_CHANGE

    def set_hcv(self, hcv: HCV) -> bool:
        """
        Replace the colour; a hue, if any, becomes the saved hue.

        Returns False when ``hcv`` is the same colour as the live one, even
        if the two differ in their stored hue position.
        """
        if hcv.hue is not None:
            self._saved_hue = hcv.hue
        if hcv.canonical() == self._hcv.canonical():
            return False
        return self._update(hcv, "set")

    def set_rgb(self, rgb: RGB) -> bool:
        return self.set_hcv(rgb.to_hcv())

    # -- Absolute setters -----------------------------------------------------

    def set_chroma(self, chroma: Delta, policy: Optional[ScalarPolicy] = None) -> Outcome:
        """
        Set chroma at the current sum.

        A grey takes its saved hue (or the configured default). Chroma zero
        turns the colour grey and keeps the hue in ``saved_hue``. When the
        chroma does not fit the current sum:
        - CLAMP raises chroma only as far as the sum allows
        - ACCOMMODATE keeps the chroma and moves the sum into its range
        - REJECT changes nothing

        ``policy`` defaults to CLAMP when the manipulator is clamped,
        otherwise ACCOMMODATE.
        """
        chroma = Prop.coerce(chroma)
        policy = self._scalar_policy(policy)
        current = self._hcv
        if current.hue is None and chroma == Prop.ZERO:
            return Outcome.NO_CHANGE
        hue = current.hue or self._saved_hue or self._default_hue
        if chroma == Prop.ZERO:
            self._saved_hue = hue
            return self._apply(HCV(None, Prop.ZERO, current.sum), "set_chroma", Outcome.OK)
        if hue.is_compatible(chroma, current.sum):
            return self._apply(HCV(hue, chroma, current.sum), "set_chroma", Outcome.OK)
        if policy is ScalarPolicy.REJECT:
            return Outcome.REJECTED
        if policy is ScalarPolicy.CLAMP:
            bound = hue.max_chroma_for_sum(current.sum)
            if bound <= current.chroma:
                return Outcome.NO_CHANGE
            return self._apply(HCV(hue, bound, current.sum), "set_chroma", Outcome.CLAMPED)
        total = _clamp_sum(current.sum, hue.sum_range_for_chroma(chroma))
        return self._apply(HCV(hue, chroma, total), "set_chroma", Outcome.ACCOMMODATED)

    def set_sum(self, total: UFDRNumber, policy: Optional[ScalarPolicy] = None) -> Outcome:
        """
        Set the sum (3 * value) at the current chroma.

        Greys simply move along the grey axis. When the chroma does not fit
        the new sum:
        - CLAMP keeps chroma and stops the sum at the chroma's range
        - ACCOMMODATE keeps the sum and lowers chroma (possibly to grey)
        - REJECT changes nothing

        Raises:
            ValueError: Sum outside [0, 3]
        """
        if not total.is_valid_sum():
            raise ValueError(f"Sum must be 0-3, got {total.to_float()}")
        policy = self._scalar_policy(policy)
        current = self._hcv
        hue = current.hue
        if hue is None:
            return self._apply(HCV(None, Prop.ZERO, total), "set_sum", Outcome.OK)
        if hue.is_compatible(current.chroma, total):
            return self._apply(HCV(hue, current.chroma, total), "set_sum", Outcome.OK)
        if policy is ScalarPolicy.REJECT:
            return Outcome.REJECTED
        if policy is ScalarPolicy.CLAMP:
            total = _clamp_sum(total, hue.sum_range_for_chroma(current.chroma))
            return self._apply(HCV(hue, current.chroma, total), "set_sum", Outcome.CLAMPED)
        chroma = hue.max_chroma_for_sum(total)
        if chroma == Prop.ZERO:
            self._saved_hue = hue
            return self._apply(HCV(None, Prop.ZERO, total), "set_sum", Outcome.ACCOMMODATED)
        return self._apply(HCV(hue, chroma, total), "set_sum", Outcome.ACCOMMODATED)

    def set_hue(self, hue: Hue, policy: Optional[RotationPolicy] = None) -> Outcome:
        """
        Give the colour a new hue.

        On a grey only ``saved_hue`` changes (the colour stays grey and the
        result is NO_CHANGE). When chroma and sum do not fit the new hue,
        FAVOUR_CHROMA moves the sum (ACCOMMODATED) and FAVOUR_VALUE lowers
        chroma (CLAMPED). ``policy`` defaults to ``rotation_policy``.
        """
        policy = policy or self.rotation_policy
        current = self._hcv
        if current.hue is None:
            self._saved_hue = hue
            return Outcome.NO_CHANGE
        if hue == current.hue:
            return Outcome.NO_CHANGE
        if hue.is_compatible(current.chroma, current.sum):
            hcv, outcome = HCV(hue, current.chroma, current.sum), Outcome.OK
        elif policy is RotationPolicy.FAVOUR_CHROMA:
            total = _clamp_sum(current.sum, hue.sum_range_for_chroma(current.chroma))
            hcv, outcome = HCV(hue, current.chroma, total), Outcome.ACCOMMODATED
        else:
            chroma = hue.max_chroma_for_sum(current.sum)
            if chroma == Prop.ZERO:
                hcv = HCV(None, Prop.ZERO, current.sum)
            else:
                hcv = HCV(hue, chroma, current.sum)
            outcome = Outcome.CLAMPED
        self._saved_hue = hue
        return self._apply(hcv, "set_hue", outcome)

    # -- Chroma ---------------------------------------------------------------

    def decr_chroma(self, delta: Delta) -> bool:
        """
        Reduce chroma by ``delta`` (clamped to [0, 1]), stopping at grey.

        Reaching zero chroma clears the live hue; it stays in ``saved_hue``.
        """
        current = self._hcv
        if current.hue is None:
            return False
        chroma = (current.chroma - Prop.coerce(delta)).clamp_to_prop()
        return self.set_chroma(chroma).changed

    def incr_chroma(self, delta: Delta) -> bool:
        """
        Increase chroma by ``delta`` (clamped to [0, 1]).

        A grey regains its saved hue (or the configured default). Black has
        no room for chroma and is left alone. In clamped mode chroma stops at
        the maximum for the current sum; otherwise chroma may reach 1 and the
        sum moves into the new chroma's valid range.
        """
        current = self._hcv
        if current.chroma == Prop.ONE or current.sum == UFDRNumber.ZERO:
            return False
        chroma = (current.chroma + Prop.coerce(delta)).clamp_to_prop()
        return self.set_chroma(chroma).changed

    # -- Value ----------------------------------------------------------------

    def decr_value(self, delta: Delta) -> bool:
        """
        Darken by ``delta`` (the sum drops by 3 * delta, stopping at 0).

        Clamped mode keeps chroma and stops at the chroma's minimum sum;
        otherwise chroma is reduced as needed.
        """
        current = self._hcv.sum
        if current == UFDRNumber.ZERO:
            return False
        step = Prop.coerce(delta) * 3
        total = current - step if step < current else UFDRNumber.ZERO
        return self.set_sum(total).changed

    def incr_value(self, delta: Delta) -> bool:
        """Lighten by ``delta`` (the sum rises by 3 * delta, stopping at 3)."""
        current = self._hcv.sum
        if current == UFDRNumber.THREE:
            return False
        total = min(current + Prop.coerce(delta) * 3, UFDRNumber.THREE)
        return self.set_sum(total).changed

    # -- Hue ------------------------------------------------------------------

    def rotate(self, degrees: float) -> bool:
        """
        Rotate the hue by ``degrees`` (greys are left alone).

        FAVOUR_CHROMA keeps chroma and moves the sum into the new hue's range;
        FAVOUR_VALUE keeps the sum and lowers chroma to the new hue's maximum.
        """
        current = self._hcv
        if current.hue is None:
            return False
        return self.set_hue(current.hue.rotated(degrees)).changed
