import pytest
import sys
from pathlib import Path
from PIL import Image, ImageDraw

# Add src to sys.path so we can import sheet_composer
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from sheet_composer.composer.imaging import PillowBackend


class RecordingBackend(PillowBackend):
    """PillowBackend that records the name of every primitive called."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = []

    def size(self, image):
        self.calls.append("size")
        return super().size(image)

    def crop(self, image, area):
        self.calls.append("crop")
        return super().crop(image, area)

    def resize(self, image, width, height, resample=None):
        self.calls.append("resize")
        return super().resize(image, width, height, resample)

    def rotate(self, image, degrees, *, fill=None):
        self.calls.append("rotate")
        return super().rotate(image, degrees, fill=fill)

    def new_canvas(self, width, height, background):
        self.calls.append("new_canvas")
        return super().new_canvas(width, height, background)

    def draw_at(self, canvas, tile, top_left):
        self.calls.append("draw_at")
        super().draw_at(canvas, tile, top_left)


# Common test fixtures
@pytest.fixture
def photo():
    """300x200 RGB source: red square top-left, blue elsewhere."""
    img = Image.new("RGB", (300, 200), color=(0, 0, 255))
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, 99, 99), fill=(255, 0, 0))
    return img


@pytest.fixture
def backend():
    return PillowBackend()


@pytest.fixture
def recording_backend():
    return RecordingBackend()
