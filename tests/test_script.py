import json
import logging

import pytest
from pydantic import ValidationError

from live2d_rainbow.cycler import CyclerConfig, ResetStrategy
from live2d_rainbow.script import RainbowScript, ScriptSettings, load_settings


@pytest.fixture
def settings():
    return ScriptSettings(
        parts=["PartHairFront", "PartHairBack", "PartMissing"],
        drawables=["ArtMesh243"],
    )


def test_on_enable_registers_targets(model, settings, caplog):
    script = RainbowScript(model, settings)
    with caplog.at_level(logging.WARNING):
        script.on_enable()
    assert script.cycler.target_ids == ["PartHairFront", "PartHairBack", "ArtMesh243"]
    assert 'Part with ID "PartMissing" not found.' in caplog.text


def test_enable_twice_keeps_targets_unique(model, settings):
    script = RainbowScript(model, settings)
    script.on_enable()
    script.on_enable()
    assert len(script.cycler) == 3


def test_update_ticks_with_clock(model, settings, clock):
    script = RainbowScript(model, settings, clock=clock)
    script.on_enable()
    script.update({"ParamAngleX": 0.0})
    clock.advance(0.3)
    color = script.update()
    assert script.cycler.segment_index == 1
    assert model.find_part("PartHairFront").multiply_color == color


def test_on_disable_restores(model, settings, clock):
    script = RainbowScript(model, settings, clock=clock)
    script.on_enable()
    script.update()
    clock.advance(0.5)
    script.update()
    script.on_disable()
    assert len(script.cycler) == 0
    assert model.find_drawable("ArtMesh243").multiply_color.as_tuple() == (0.9, 0.8, 0.7)
    assert model.find_part("PartHairFront").multiply_color.as_tuple() == (1.0, 1.0, 1.0)


def test_default_settings():
    settings = ScriptSettings()
    assert settings.parts == []
    assert settings.cycler == CyclerConfig()


def test_load_settings(tmp_path):
    path = tmp_path / "rainbow.json"
    path.write_text(
        json.dumps(
            {
                "parts": ["PartHairFront"],
                "cycler": {
                    "min_value": 180,
                    "max_value": 300,
                    "reset_strategy": "neutral",
                },
            }
        ),
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.parts == ["PartHairFront"]
    assert settings.drawables == []
    assert settings.cycler.max_value == 300
    assert settings.cycler.reset_strategy is ResetStrategy.NEUTRAL
    assert settings.cycler.loop_seconds == 1.8


def test_load_settings_rejects_bad_config(tmp_path):
    path = tmp_path / "rainbow.json"
    path.write_text('{"cycler": {"loop_seconds": -1}}', encoding="utf-8")
    with pytest.raises(ValidationError):
        load_settings(path)
