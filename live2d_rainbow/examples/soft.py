from live2d_rainbow.logging_config import setup_logging
from live2d_rainbow.model import Live2DModel
from live2d_rainbow.script import RainbowScript, load_settings
from pathlib import Path
import asyncio
import logging


async def main():
    setup_logging(logging.DEBUG)
    settings = load_settings(Path(__file__).with_name("soft.json"))
    model = Live2DModel(part_ids=settings.parts, drawable_ids=settings.drawables)

    script = RainbowScript(model, settings)
    script.on_enable()

    try:
        # Run for two loops, then restore the model
        for _ in range(int(settings.cycler.loop_seconds * 2 * 30)):
            script.update()
            await asyncio.sleep(1 / 30)
    finally:
        script.on_disable()

    for target_id, color in model.get_model_state():
        print(target_id, color.as_tuple())


if __name__ == "__main__":
    asyncio.run(main())
