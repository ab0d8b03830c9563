"""Single-screen exercises: color picker, counter, temperature and tip.

Pure logic with no I/O. Text inputs follow the screens' lenient parsing:
anything that isn't a number counts as zero.
"""

from __future__ import annotations

from dataclasses import dataclass

CHANNEL_MIN = 0
CHANNEL_MAX = 255

TIP_PERCENTAGES = (15.0, 18.0, 20.0)
DEFAULT_TIP_PERCENTAGE = 18.0


def parse_amount(text: str) -> float:
    """Parse a number typed into a text field; unparsable input is 0."""
    try:
        return float(text)
    except (TypeError, ValueError):
        return 0.0


# =============================================================================
# Color picker
# =============================================================================


def clamp_channel(value: float) -> int:
    """Round to the slider step and clamp into 0-255."""
    return max(CHANNEL_MIN, min(CHANNEL_MAX, round(value)))


@dataclass(frozen=True)
class RGBColor:
    """An sRGB color with 0-255 integer channels."""

    red: int = 0
    green: int = 0
    blue: int = 0

    @classmethod
    def from_sliders(cls, red: float, green: float, blue: float) -> RGBColor:
        """Build from raw slider values, clamping each channel."""
        return cls(clamp_channel(red), clamp_channel(green), clamp_channel(blue))

    @property
    def normalized(self) -> tuple[float, float, float]:
        """Channels scaled to 0.0-1.0."""
        return (self.red / CHANNEL_MAX, self.green / CHANNEL_MAX, self.blue / CHANNEL_MAX)

    @property
    def hex(self) -> str:
        """``#RRGGBB`` form."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


# =============================================================================
# Counter
# =============================================================================


@dataclass
class Counter:
    """Integer counter with increment, decrement and reset."""

    count: int = 0

    def increment(self) -> int:
        self.count += 1
        return self.count

    def decrement(self) -> int:
        self.count -= 1
        return self.count

    def reset(self) -> int:
        self.count = 0
        return self.count

    @property
    def tone(self) -> str:
        """Display tone: positive, negative or neutral."""
        if self.count > 0:
            return "positive"
        if self.count < 0:
            return "negative"
        return "neutral"


# =============================================================================
# Temperature converter
# =============================================================================


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 9 / 5 + 32


def format_conversion(celsius_text: str) -> str:
    """Render the converter line, e.g. ``21.0 °C is 69.8 °F``."""
    celsius = parse_amount(celsius_text)
    return f"{celsius:.1f} °C is {c_to_f(celsius):.1f} °F"


# =============================================================================
# Tip calculator
# =============================================================================


@dataclass(frozen=True)
class TipBreakdown:
    """Bill, tip and total for one calculation."""

    bill: float
    percentage: float
    tip: float
    total: float

    def lines(self) -> list[str]:
        """Display lines with two decimals."""
        return [
            f"Bill Amount: {self.bill:.2f}",
            f"Tip Amount: {self.tip:.2f}",
            f"Total Amount: {self.total:.2f}",
        ]


def calculate_tip(bill_text: str, percentage: float = DEFAULT_TIP_PERCENTAGE) -> TipBreakdown:
    """
    Compute tip and total for a bill typed as text.

    Args:
        bill_text: Raw bill amount input.
        percentage: One of ``TIP_PERCENTAGES``.

    Raises:
        ValueError: If ``percentage`` isn't an offered option.
    """
    if percentage not in TIP_PERCENTAGES:
        msg = f"Tip percentage must be one of {TIP_PERCENTAGES}, got {percentage}"
        raise ValueError(msg)
    bill = parse_amount(bill_text)
    tip = bill * (percentage / 100)
    return TipBreakdown(bill=bill, percentage=percentage, tip=tip, total=bill + tip)
