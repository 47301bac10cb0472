from typing import Any, Callable, Iterable, List, Optional, Protocol, Tuple

from colorzero import Color, RGB
from pydantic import BaseModel


class MultiplyColor(BaseModel):
    """A multiply color as the host applies it over a texture.

    Components are nominally 0-1. They are not clamped: values above 1 brighten
    the element and a late frame can push a channel slightly out of range.
    """

    red: float
    green: float
    blue: float

    @staticmethod
    def from_rgb(red: float, green: float, blue: float) -> "MultiplyColor":
        return MultiplyColor(red=red, green=green, blue=blue)

    @staticmethod
    def from_color(color: Color) -> "MultiplyColor":
        """Create a MultiplyColor object from a Color object."""
        color_rgb: RGB = color.rgb
        return MultiplyColor(red=color_rgb[0], green=color_rgb[1], blue=color_rgb[2])

    @staticmethod
    def white() -> "MultiplyColor":
        return MultiplyColor.from_color(Color("white"))

    def as_tuple(self) -> Tuple[float, float, float]:
        """Return the color as a tuple."""
        return self.red, self.green, self.blue


ColorFactory = Callable[[float, float, float], Any]


class Target(Protocol):
    """A host-owned element whose multiply color can be changed."""

    @property
    def id(self) -> str: ...

    multiply_color: Any


class ModelRegistry(Protocol):
    """Lookup of host-owned parts and drawables by id."""

    def find_part(self, part_id: str) -> Optional[Target]: ...

    def find_drawable(self, drawable_id: str) -> Optional[Target]: ...


class Part:
    """A named group of drawables in the model."""

    def __init__(self, id: str, multiply_color: Optional[MultiplyColor] = None):
        self._id = id
        self.multiply_color = multiply_color or MultiplyColor.white()

    @property
    def id(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"Part({self._id!r})"


class Drawable:
    """A single art mesh. Remembers the multiply color authored in the model file."""

    def __init__(self, id: str, moc_multiply_color: Optional[MultiplyColor] = None):
        self._id = id
        self._moc_multiply_color = moc_multiply_color or MultiplyColor.white()
        self.multiply_color = self._moc_multiply_color.model_copy()

    @property
    def id(self) -> str:
        return self._id

    @property
    def moc_multiply_color(self) -> MultiplyColor:
        return self._moc_multiply_color

    def __repr__(self) -> str:
        return f"Drawable({self._id!r})"


class Live2DModel:
    """In-memory stand-in for the host's loaded model."""

    def __init__(
        self, part_ids: Iterable[str] = (), drawable_ids: Iterable[str] = ()
    ):
        self.parts: List[Part] = [Part(i) for i in part_ids]
        self.drawables: List[Drawable] = [Drawable(i) for i in drawable_ids]

    def add_part(self, part: Part) -> Part:
        self.parts.append(part)
        return part

    def add_drawable(self, drawable: Drawable) -> Drawable:
        self.drawables.append(drawable)
        return drawable

    def find_part(self, part_id: str) -> Optional[Part]:
        return next((p for p in self.parts if p.id == part_id), None)

    def find_drawable(self, drawable_id: str) -> Optional[Drawable]:
        return next((d for d in self.drawables if d.id == drawable_id), None)

    def get_model_state(self) -> List[Tuple[str, Any]]:
        """Get the current multiply color of every part and drawable."""
        return [(t.id, t.multiply_color) for t in [*self.parts, *self.drawables]]
