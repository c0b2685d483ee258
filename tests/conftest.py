"""
Shared fixtures for the photo_vars test suite.
File: tests/conftest.py
"""

import json

from datetime import datetime

import pytest

from photo_vars.core.metadata import ImageMetadata
from photo_vars.core.system_context import SystemContext
from photo_vars.substitution.placeholders import build_substitution_list


def make_image(**overrides) -> ImageMetadata:
    """A raw file from a holiday import with typical EXIF data."""
    values = dict(
        path="/photos/2024/holiday",
        filename="IMG_0001.CR2",
        film_roll="holiday",
        id=42,
        duplicate_index=0,
        width=6000,
        height=4000,
        p_width=5990,
        p_height=3990,
        final_width=1920,
        final_height=1280,
        exif_datetime_taken="2024:05:17 14:03:09",
        exif_iso=400.0,
        exif_exposure=0.004,
        exif_exposure_bias=-0.7,
        exif_aperture=5.6,
        exif_focal_length=35.0,
        exif_focus_distance=2.5,
        exif_maker="Canon",
        exif_model="EOS R5",
        rating=3,
        red=True,
        blue=True,
        description="Sunset over the bay",
        creator="Jane Doe",
        rights="CC-BY",
    )
    values.update(overrides)
    return ImageMetadata(**values)


@pytest.fixture
def image() -> ImageMetadata:
    return make_image()


@pytest.fixture
def context() -> SystemContext:
    return SystemContext(
        username="jdoe",
        home_dir="/home/jdoe",
        pictures_dir="/home/jdoe/Pictures",
        desktop_dir="/home/jdoe/Desktop",
        app_version="4.6.1",
        now=datetime(2024, 6, 1, 9, 5, 7),
    )


@pytest.fixture
def registry(image, context):
    return build_substitution_list(image, 7, context=context)


@pytest.fixture
def metadata_file(tmp_path):
    """The image fixture written out as a JSON metadata file."""
    path = tmp_path / "image.json"
    path.write_text(json.dumps({
        "path": "/photos/2024/holiday",
        "filename": "IMG_0001.CR2",
        "exif_datetime_taken": "2024:05:17 14:03:09",
        "rating": 3,
        "title": "Café",
        "red": True,
        "camera_serial": "ignored",
    }), encoding="utf-8")
    return path
