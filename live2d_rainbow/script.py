import logging
import time
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from pydantic import BaseModel, Field

from live2d_rainbow.cycler import CyclerConfig, GradientCycler
from live2d_rainbow.model import ColorFactory, ModelRegistry

logger = logging.getLogger(__name__)


class ScriptSettings(BaseModel):
    """Which targets to recolor, and how."""

    parts: List[str] = Field(default_factory=list)
    drawables: List[str] = Field(default_factory=list)
    cycler: CyclerConfig = Field(default_factory=CyclerConfig)


def load_settings(path: Union[str, Path]) -> ScriptSettings:
    """Read script settings from a JSON file."""
    text = Path(path).read_text(encoding="utf-8")
    settings = ScriptSettings.model_validate_json(text)
    logger.info(
        "Loaded settings from %s: %d part(s), %d drawable(s).",
        path,
        len(settings.parts),
        len(settings.drawables),
    )
    return settings


class RainbowScript:
    """Host lifecycle hooks around a single GradientCycler."""

    def __init__(
        self,
        model: ModelRegistry,
        settings: Optional[ScriptSettings] = None,
        color_factory: Optional[ColorFactory] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.settings = settings or ScriptSettings()
        self.clock = clock
        self.cycler = GradientCycler(model, self.settings.cycler, color_factory)

    def on_enable(self) -> None:
        for part_id in self.settings.parts:
            self.cycler.register_part(part_id)
        for drawable_id in self.settings.drawables:
            self.cycler.register_drawable(drawable_id)
        logger.info("Rainbow enabled on %d target(s).", len(self.cycler))

    def on_disable(self) -> None:
        self.cycler.reset()
        logger.info("Rainbow disabled.")

    def update(self, params: Any = None) -> Any:
        return self.cycler.tick(self.clock())
