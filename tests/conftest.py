import pytest

from live2d_rainbow.model import Drawable, Live2DModel, MultiplyColor, Part


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def model():
    model = Live2DModel(part_ids=["PartHairFront", "PartHairBack"])
    model.add_part(Part("PartEarL", MultiplyColor.from_rgb(0.5, 0.5, 0.5)))
    model.add_drawable(Drawable("ArtMesh243", MultiplyColor.from_rgb(0.9, 0.8, 0.7)))
    return model


@pytest.fixture
def clock():
    return FakeClock()
