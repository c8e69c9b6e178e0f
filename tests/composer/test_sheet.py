"""
Tests for composer.sheet.ImageSheet
"""
import pytest

from sheet_composer.core import CHINESE_VISA_PHOTO, CropOutOfBounds, SheetFormat
from sheet_composer.composer import ComposerConfig, ImageSheet


def test_create_populates_images(photo):
    sheet = ImageSheet.from_image(photo)
    sheet.set_crop_area(0, 0, 100, 100)

    output = sheet.create()

    assert output is sheet.output_image
    assert output.size == (410, 579)
    assert sheet.cropped_image.size == (100, 100)
    assert sheet.plan.tile_count == 20


def test_setters_chain(photo):
    output = (
        ImageSheet.from_image(photo)
        .set_sheet_format(SheetFormat.custom(200, 300))
        .set_image_format(CHINESE_VISA_PHOTO)
        .set_crop_area(0, 0, 76, 96)
        .set_background_color("black")
        .create()
    )

    # 200 // 38 = 5 columns, 300 // 48 = 6 rows
    assert output.getpixel((0, 0)) == (0, 0, 0)


def test_output_rotation(photo):
    sheet = ImageSheet.from_image(photo).set_crop_area(0, 0, 100, 100)
    sheet.set_output_image_rotation(90)

    assert sheet.create().size == (579, 410)


def test_cropped_image_rotation(photo):
    sheet = ImageSheet.from_image(photo).set_crop_area(0, 0, 100, 60)
    sheet.set_cropped_image_rotation(90)

    sheet.create()

    assert sheet.cropped_image.size == (60, 100)


def test_to_config(photo):
    sheet = ImageSheet.from_image(photo).set_crop_area(10, 10, 60, 60)
    sheet.set_cropped_image_rotation(45)

    config = sheet.to_config()

    assert isinstance(config, ComposerConfig)
    assert config.crop_area.size == (50, 50)
    assert config.tile_rotation_degrees == 45


def test_create_without_crop_area_raises(photo):
    with pytest.raises(CropOutOfBounds, match="No crop area"):
        ImageSheet.from_image(photo).create()


def test_failed_create_leaves_no_output(photo):
    sheet = ImageSheet.from_image(photo).set_crop_area(0, 0, 400, 100)

    with pytest.raises(CropOutOfBounds):
        sheet.create()

    assert sheet.output_image is None
    assert sheet.cropped_image is None


def test_failed_rerun_clears_previous_output(photo):
    sheet = ImageSheet.from_image(photo).set_crop_area(0, 0, 100, 100)
    sheet.create()
    sheet.set_crop_area(0, 0, 400, 100)

    with pytest.raises(CropOutOfBounds):
        sheet.create()

    assert sheet.output_image is None
    assert sheet.cropped_image is None
    assert sheet.plan is None
    assert sheet.result is None
