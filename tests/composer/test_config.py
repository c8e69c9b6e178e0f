"""
Unit tests for ComposerConfig.
"""
import pytest
from PIL import Image

from sheet_composer.core import (
    A4,
    PASSPORT_PHOTO,
    CropArea,
    ComposerError,
    CropOutOfBounds,
    ImageFormat,
    InvalidFormat,
    SheetFormat,
)
from sheet_composer.composer import ComposerConfig


@pytest.fixture
def crop():
    return CropArea(0, 0, 100, 100)


class TestComposerConfig:

    def test_defaults(self, crop):
        config = ComposerConfig(crop_area=crop)

        assert config.sheet_format == A4
        assert config.image_format == PASSPORT_PHOTO
        assert config.background_color == "white"
        assert config.resample == Image.Resampling.BICUBIC
        assert not config.rotation.rotates_tile
        assert not config.rotation.rotates_output

    def test_rotation_spec(self, crop):
        config = ComposerConfig(crop_area=crop, tile_rotation_degrees=90, output_rotation_degrees=-1)

        assert config.rotation.tile_degrees == 90
        assert config.rotation.rotates_tile
        assert not config.rotation.rotates_output

    def test_with_overrides_returns_new_config(self, crop):
        config = ComposerConfig(crop_area=crop)

        rotated = config.with_overrides(output_rotation_degrees=90)

        assert rotated.output_rotation_degrees == 90
        assert config.output_rotation_degrees == 0.0

    def test_is_immutable(self, crop):
        config = ComposerConfig(crop_area=crop)

        with pytest.raises(AttributeError):
            config.background_color = "black"


class TestValidation:

    def test_crop_must_be_crop_area(self):
        with pytest.raises(CropOutOfBounds):
            ComposerConfig(crop_area=(0, 0, 100, 100))

    def test_sheet_and_image_formats_not_interchangeable(self, crop):
        with pytest.raises(InvalidFormat, match="sheet_format"):
            ComposerConfig(crop_area=crop, sheet_format=ImageFormat(210, 297))
        with pytest.raises(InvalidFormat, match="image_format"):
            ComposerConfig(crop_area=crop, image_format=SheetFormat(51, 51))

    def test_unknown_background_color(self, crop):
        with pytest.raises(ValueError, match="Unknown background_color"):
            ComposerConfig(crop_area=crop, background_color="not-a-color")

    def test_tuple_background_color_accepted(self, crop):
        assert ComposerConfig(crop_area=crop, background_color=(10, 20, 30)).background_color == (10, 20, 30)

    def test_non_finite_rotation(self, crop):
        with pytest.raises(ValueError, match="finite"):
            ComposerConfig(crop_area=crop, tile_rotation_degrees=float("nan"))

    def test_unknown_resample_filter(self, crop):
        with pytest.raises(ValueError, match="resample"):
            ComposerConfig(crop_area=crop, resample=99)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"tile_rotation_degrees": "90"},
            {"output_rotation_degrees": float("inf")},
            {"background_color": "not-a-color"},
            {"resample": 42},
        ],
    )
    def test_argument_checks_are_plain_value_errors(self, crop, overrides):
        with pytest.raises(ValueError) as excinfo:
            ComposerConfig(crop_area=crop, **overrides)

        assert not isinstance(excinfo.value, ComposerError)
