import copy
import logging
from enum import Enum
from typing import Any, Iterator, List, Optional

from colorzero import Color
from pydantic import ConfigDict, Field, field_validator

from live2d_rainbow.gradient import (
    SEGMENT_COUNT,
    GradientRange,
    next_segment,
    normalize,
    segment_color,
)
from live2d_rainbow.model import ColorFactory, ModelRegistry, MultiplyColor, Target

logger = logging.getLogger(__name__)

DEFAULT_LOOP_SECONDS: float = 1.8

# Colored legs per loop; segment 0 (white to red) is a lead-in outside the loop.
SEGMENTS_PER_LOOP: int = SEGMENT_COUNT - 1


class ResetStrategy(str, Enum):
    """What color a target gets back when cycling stops."""

    CAPTURED = "captured"
    NEUTRAL = "neutral"


class TargetKind(str, Enum):
    PART = "part"
    DRAWABLE = "drawable"


class CyclerConfig(GradientRange):
    """Tuning for the rainbow: value range, loop speed and restore behaviour."""

    model_config = ConfigDict(frozen=True)

    loop_seconds: float = Field(DEFAULT_LOOP_SECONDS, gt=0.0)
    reset_strategy: ResetStrategy = ResetStrategy.CAPTURED
    neutral_color: str = "white"

    @field_validator("neutral_color")
    @classmethod
    def check_neutral_color(cls, value: str) -> str:
        Color(value)
        return value

    @property
    def segment_duration(self) -> float:
        """Seconds spent on each color transition."""
        return self.loop_seconds / SEGMENTS_PER_LOOP

    @staticmethod
    def vivid(loop_seconds: float = DEFAULT_LOOP_SECONDS) -> "CyclerConfig":
        """Saturated primaries, restoring each target's own color."""
        return CyclerConfig(
            min_value=0.0,
            max_value=255.0,
            loop_seconds=loop_seconds,
            reset_strategy=ResetStrategy.CAPTURED,
        )

    @staticmethod
    def soft(loop_seconds: float = DEFAULT_LOOP_SECONDS) -> "CyclerConfig":
        """Pastel, over-bright palette, restoring everything to white."""
        return CyclerConfig(
            min_value=180.0,
            max_value=300.0,
            loop_seconds=loop_seconds,
            reset_strategy=ResetStrategy.NEUTRAL,
        )


class Binding:
    """A registered target and the color it is restored to."""

    def __init__(self, target: Target, reset_color: Any, kind: TargetKind):
        self.target = target
        self.reset_color = reset_color
        self.kind = kind

    def restore(self) -> None:
        self.target.multiply_color = self.reset_color

    def __repr__(self) -> str:
        return f"Binding({self.kind.value} {self.target.id!r})"


class GradientCycler:
    """Cycles the multiply color of registered targets through a rainbow.

    The cycler is driven entirely by `tick`, which the host calls once per
    frame with the current time in seconds. Targets are borrowed from the
    model registry and are never created or destroyed here.
    """

    def __init__(
        self,
        model: ModelRegistry,
        config: Optional[CyclerConfig] = None,
        color_factory: Optional[ColorFactory] = None,
    ):
        self.model = model
        self.config = config or CyclerConfig()
        self.color_factory: ColorFactory = color_factory or MultiplyColor.from_rgb
        self._bindings: List[Binding] = []
        self._segment_index: int = 0
        self._transition_time: Optional[float] = None

    @property
    def bindings(self) -> List[Binding]:
        return list(self._bindings)

    @property
    def target_ids(self) -> List[str]:
        return [b.target.id for b in self._bindings]

    @property
    def segment_index(self) -> int:
        return self._segment_index

    @property
    def segment_duration(self) -> float:
        return self.config.segment_duration

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, target_id: object) -> bool:
        return any(b.target.id == target_id for b in self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self.bindings)

    def register(self, target_id: str) -> bool:
        """Register a part or, failing that, a drawable with the given id."""
        if self._is_duplicate(target_id, "Target"):
            return False
        part = self.model.find_part(target_id)
        if part is not None:
            return self._bind(part, TargetKind.PART)
        drawable = self.model.find_drawable(target_id)
        if drawable is not None:
            return self._bind(drawable, TargetKind.DRAWABLE)
        logger.warning('Target with ID "%s" not found.', target_id)
        return False

    def register_part(self, part_id: str) -> bool:
        """Register a part to be recolored."""
        if self._is_duplicate(part_id, "Part"):
            return False
        part = self.model.find_part(part_id)
        if part is None:
            logger.warning('Part with ID "%s" not found.', part_id)
            return False
        return self._bind(part, TargetKind.PART)

    def register_drawable(self, drawable_id: str) -> bool:
        """Register an art mesh to be recolored."""
        if self._is_duplicate(drawable_id, "Drawable"):
            return False
        drawable = self.model.find_drawable(drawable_id)
        if drawable is None:
            logger.warning('Drawable with ID "%s" not found.', drawable_id)
            return False
        return self._bind(drawable, TargetKind.DRAWABLE)

    def tick(self, now: float) -> Any:
        """Advance the phase clock to `now` and recolor every target.

        Returns a copy of the color written to the targets.
        """
        if self._transition_time is None:
            self._transition_time = now

        duration = self.segment_duration
        elapsed = now - self._transition_time
        if elapsed >= duration:
            # The clock restarts at `now`; only this frame sees the overshoot.
            elapsed -= duration
            self._transition_time = now
            self._segment_index = next_segment(self._segment_index)

        ratio = elapsed / duration
        red, green, blue = normalize(
            segment_color(self._segment_index, ratio, self.config)
        )
        # One color object per target.
        for binding in self._bindings:
            binding.target.multiply_color = self.color_factory(red, green, blue)
        return self.color_factory(red, green, blue)

    def reset(self) -> None:
        """Put every target's color back and forget all bindings."""
        for binding in self._bindings:
            binding.restore()
        logger.debug("Restored %d target(s).", len(self._bindings))
        self._bindings.clear()
        self._segment_index = 0
        self._transition_time = None

    def _is_duplicate(self, target_id: str, label: str) -> bool:
        if target_id in self:
            logger.warning('%s with ID "%s" is already added.', label, target_id)
            return True
        return False

    def _bind(self, target: Target, kind: TargetKind) -> bool:
        self._bindings.append(Binding(target, self._reset_color_for(target, kind), kind))
        logger.debug("Registered %s %r.", kind.value, target.id)
        return True

    def _reset_color_for(self, target: Target, kind: TargetKind) -> Any:
        if self.config.reset_strategy is ResetStrategy.NEUTRAL:
            return self.color_factory(*Color(self.config.neutral_color).rgb)
        if kind is TargetKind.DRAWABLE:
            return copy.copy(getattr(target, "moc_multiply_color", target.multiply_color))
        return copy.copy(target.multiply_color)
