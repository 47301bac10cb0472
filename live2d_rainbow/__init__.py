from live2d_rainbow.cycler import CyclerConfig, GradientCycler, ResetStrategy
from live2d_rainbow.model import Drawable, Live2DModel, MultiplyColor, Part
from live2d_rainbow.script import RainbowScript, ScriptSettings, load_settings
from live2d_rainbow.logging_config import setup_logging
