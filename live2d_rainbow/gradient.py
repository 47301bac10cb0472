from typing import Tuple

from pydantic import BaseModel, Field, model_validator

SEGMENT_COUNT: int = 7

# Index the cycle wraps back to after the last segment; segment 0 only plays once.
LOOP_START_SEGMENT: int = 1

CHANNEL_SCALE: float = 255.0

DEFAULT_MIN_VALUE: float = 0.0

DEFAULT_MAX_VALUE: float = 255.0


class GradientRange(BaseModel):
    """The channel values the rainbow swings between, on a 0-255 scale."""

    min_value: float = Field(DEFAULT_MIN_VALUE, ge=0.0)
    max_value: float = Field(DEFAULT_MAX_VALUE, gt=0.0)

    @model_validator(mode="after")
    def check_order(self) -> "GradientRange":
        if self.min_value > self.max_value:
            raise ValueError(
                f"min_value ({self.min_value}) must not exceed max_value ({self.max_value})"
            )
        return self


def lerp(a: float, b: float, t: float) -> float:
    """Linearly interpolate from a to b. t is not clamped."""
    return a + (b - a) * t


def segment_endpoints(
    index: int, gradient: GradientRange
) -> Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]:
    """Return the (start, end) pair of each channel for a segment."""
    lo = gradient.min_value
    hi = gradient.max_value
    table = {
        # white to red
        0: ((hi, hi), (hi, lo), (hi, lo)),
        # red to yellow
        1: ((hi, hi), (lo, hi), (lo, lo)),
        # yellow to green
        2: ((hi, lo), (hi, hi), (lo, lo)),
        # green to cyan
        3: ((lo, lo), (hi, hi), (lo, hi)),
        # cyan to blue
        4: ((lo, lo), (hi, lo), (hi, hi)),
        # blue to magenta
        5: ((lo, hi), (lo, lo), (hi, hi)),
        # magenta to red
        6: ((hi, hi), (lo, lo), (hi, lo)),
    }
    if index not in table:
        raise ValueError(
            f"Segment index {index} is out of range (0-{SEGMENT_COUNT - 1})."
        )
    return table[index]


def segment_color(
    index: int, ratio: float, gradient: GradientRange
) -> Tuple[float, float, float]:
    """Interpolate the RGB triple (0-255 scale) at `ratio` through a segment."""
    red, green, blue = segment_endpoints(index, gradient)
    return (
        lerp(red[0], red[1], ratio),
        lerp(green[0], green[1], ratio),
        lerp(blue[0], blue[1], ratio),
    )


def next_segment(index: int) -> int:
    """Advance a segment index, wrapping the last segment back to the loop start."""
    index += 1
    if index >= SEGMENT_COUNT:
        return LOOP_START_SEGMENT
    return index


def normalize(rgb: Tuple[float, float, float]) -> Tuple[float, float, float]:
    """Scale a 0-255 triple down to the roughly 0-1 range the host expects."""
    return (
        rgb[0] / CHANNEL_SCALE,
        rgb[1] / CHANNEL_SCALE,
        rgb[2] / CHANNEL_SCALE,
    )
