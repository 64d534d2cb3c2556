"""
Spacing Scale Calculator - Gap and padding multipliers from pressure
"""

from dataclasses import dataclass

from utils.number_utils import clamp
from .layout_options import SmartSpacingScales
from .pressure import Pressure


@dataclass(frozen=True)
class SpacingRule:
    """Sensitivity and bounds for one spacing multiplier"""
    shrink: float
    floor: float
    grow: float
    ceiling: float

    def apply(self, pressure: Pressure) -> float:
        if pressure.is_overflowing:
            return clamp(1 - pressure.overflow * self.shrink, self.floor, 1.0)
        return clamp(1 + pressure.breathing * self.grow, 1.0, self.ceiling)


HERO_GAP_RULE = SpacingRule(shrink=0.30, floor=0.74, grow=0.08, ceiling=1.10)
SCHEDULE_GAP_RULE = SpacingRule(shrink=0.35, floor=0.68, grow=0.12, ceiling=1.08)
FOOTER_GAP_RULE = SpacingRule(shrink=0.25, floor=0.76, grow=0.06, ceiling=1.08)
TIME_PADDING_RULE = SpacingRule(shrink=0.28, floor=0.70, grow=0.05, ceiling=1.05)
LOGO_PADDING_RULE = SpacingRule(shrink=0.22, floor=0.75, grow=0.04, ceiling=1.06)


def compute_spacing_scales(pressure: Pressure) -> SmartSpacingScales:
    """
    Compute all spacing multipliers

    Args:
        pressure: Overflow/breathing signals

    Returns:
        SmartSpacingScales (schedule_gap and card_padding share one value)
    """
    schedule_gap = SCHEDULE_GAP_RULE.apply(pressure)
    return SmartSpacingScales(
        hero_gap=HERO_GAP_RULE.apply(pressure),
        schedule_gap=schedule_gap,
        card_padding=schedule_gap,
        footer_gap=FOOTER_GAP_RULE.apply(pressure),
        time_padding=TIME_PADDING_RULE.apply(pressure),
        logo_padding=LOGO_PADDING_RULE.apply(pressure),
    )
