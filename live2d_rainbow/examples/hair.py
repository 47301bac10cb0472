from live2d_rainbow.logging_config import setup_logging
from live2d_rainbow.model import Live2DModel
from live2d_rainbow.script import RainbowScript, ScriptSettings
import asyncio

HAIR_PARTS = [
    "PartHairSideL",
    "PartHairSideR",
    "PartHairAho",
    "PartHairFront",
    "PartEarL",
    "PartEarR",
    "PartHairBackL",
    "PartBraidsL",
    "PartHairBackR",
    "PartBraidsR",
    "PartHairBack",
]


async def main():
    setup_logging()
    model = Live2DModel(part_ids=HAIR_PARTS, drawable_ids=["ArtMesh243"])

    script = RainbowScript(
        model,
        ScriptSettings(parts=HAIR_PARTS, drawables=["ArtMesh243"]),
    )
    script.on_enable()

    try:
        # Run indefinitely until keyboard interrupt, 30 frames a second
        while True:
            color = script.update()
            print(f"{color.red:.3f} {color.green:.3f} {color.blue:.3f}", end="\r")
            await asyncio.sleep(1 / 30)
    except KeyboardInterrupt:
        pass
    finally:
        script.on_disable()


if __name__ == "__main__":
    asyncio.run(main())
