"""Tests for the single-screen exercises."""

from __future__ import annotations

import pytest

from learning_projects.exercises import (
    Counter,
    RGBColor,
    c_to_f,
    calculate_tip,
    clamp_channel,
    format_conversion,
    parse_amount,
)


class TestParseAmount:
    """Lenient text-field parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("42", 42.0), ("3.5", 3.5), ("-7", -7.0), ("", 0.0), ("abc", 0.0), ("1,000", 0.0)],
    )
    def test_parse(self, text: str, expected: float) -> None:
        """Numbers parse; anything else is zero."""
        assert parse_amount(text) == expected


class TestColor:
    """Color picker channels."""

    def test_defaults_black(self) -> None:
        """All channels start at zero."""
        assert RGBColor().hex == "#000000"

    def test_hex(self) -> None:
        """Hex is upper-case #RRGGBB."""
        assert RGBColor(255, 128, 0).hex == "#FF8000"

    @pytest.mark.parametrize(("value", "expected"), [(-5, 0), (300, 255), (127.6, 128), (0, 0)])
    def test_clamp(self, value: float, expected: int) -> None:
        """Values are rounded and clamped to 0-255."""
        assert clamp_channel(value) == expected

    def test_from_sliders_clamps(self) -> None:
        """Slider values are clamped per channel."""
        color = RGBColor.from_sliders(-1, 256, 10.2)
        assert (color.red, color.green, color.blue) == (0, 255, 10)

    def test_normalized(self) -> None:
        """Normalized channels are scaled to 0-1."""
        assert RGBColor(255, 0, 51).normalized == pytest.approx((1.0, 0.0, 0.2))


class TestCounter:
    """Counter operations and tone."""

    def test_increment_decrement(self) -> None:
        """Increment and decrement move by one."""
        counter = Counter()
        counter.increment()
        counter.increment()
        counter.decrement()
        assert counter.count == 1
        assert counter.tone == "positive"

    def test_negative(self) -> None:
        """Below zero reads as negative."""
        counter = Counter()
        counter.decrement()
        assert counter.count == -1
        assert counter.tone == "negative"

    def test_reset(self) -> None:
        """Reset returns to zero."""
        counter = Counter(count=9)
        assert counter.reset() == 0
        assert counter.tone == "neutral"


class TestTemperature:
    """Celsius to Fahrenheit."""

    @pytest.mark.parametrize(("c", "f"), [(0, 32), (100, 212), (-40, -40), (37, 98.6)])
    def test_c_to_f(self, c: float, f: float) -> None:
        """Known conversion points."""
        assert c_to_f(c) == pytest.approx(f)

    def test_format(self) -> None:
        """Display uses one decimal."""
        assert format_conversion("21") == "21.0 °C is 69.8 °F"

    def test_format_invalid_is_zero(self) -> None:
        """Unparsable input converts as 0 °C."""
        assert format_conversion("warm") == "0.0 °C is 32.0 °F"


class TestTip:
    """Tip calculator."""

    def test_default_eighteen_percent(self) -> None:
        """The default tip is 18 percent."""
        breakdown = calculate_tip("50")
        assert breakdown.percentage == 18.0
        assert breakdown.tip == pytest.approx(9.0)
        assert breakdown.total == pytest.approx(59.0)

    @pytest.mark.parametrize(("pct", "tip"), [(15.0, 15.0), (20.0, 20.0)])
    def test_options(self, pct: float, tip: float) -> None:
        """Each offered percentage applies."""
        assert calculate_tip("100", pct).tip == pytest.approx(tip)

    def test_unoffered_percentage(self) -> None:
        """Other percentages raise ValueError."""
        with pytest.raises(ValueError):
            calculate_tip("100", 25.0)

    def test_invalid_bill_is_zero(self) -> None:
        """An empty bill gives a zero total."""
        breakdown = calculate_tip("")
        assert breakdown.total == 0

    def test_lines(self) -> None:
        """Display lines for bill, tip and total."""
        assert calculate_tip("42.5", 20.0).lines() == [
            "Bill Amount: 42.50",
            "Tip Amount: 8.50",
            "Total Amount: 51.00",
        ]
