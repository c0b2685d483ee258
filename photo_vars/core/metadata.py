"""
Image metadata record consumed by the substitution engine.
File: photo_vars/core/metadata.py

The record mirrors what a photo library exposes for one image: file
location, pixel dimensions at several pipeline stages, EXIF capture data,
GPS position, rating, colour labels and free-text rights fields.
"""

import json
import logging

from pathlib import Path
from dataclasses import dataclass, fields
from typing import Any, Optional, Union

from photo_vars.core.exceptions import MetadataError


logger = logging.getLogger(__name__)


COLOR_LABELS = ('red', 'yellow', 'green', 'blue', 'purple')


@dataclass
class ImageMetadata:
    """Metadata for a single image. Any field may be left unset."""
    # Location
    path: str = ""                            # folder containing the file
    filename: str = ""                        # file name with extension
    film_roll: str = ""                       # film roll (import collection) name
    id: Optional[int] = None

    # Duplicates
    duplicate_index: Optional[int] = None
    version_name: str = ""

    # Dimensions: sensor, processed raw, final (cropped/exported)
    width: Optional[int] = None
    height: Optional[int] = None
    p_width: Optional[int] = None
    p_height: Optional[int] = None
    final_width: Optional[int] = None
    final_height: Optional[int] = None

    # Capture data
    exif_datetime_taken: str = ""            # "YYYY:MM:DD HH:MM:SS[.fraction]"
    exif_iso: Optional[float] = None
    exif_exposure: Optional[float] = None    # seconds
    exif_exposure_bias: Optional[float] = None
    exif_aperture: Optional[float] = None
    exif_focal_length: Optional[float] = None
    exif_focus_distance: Optional[float] = None
    exif_maker: str = ""
    exif_model: str = ""

    # GPS
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    elevation: Optional[float] = None

    # Rating and colour labels
    rating: Optional[int] = None
    red: bool = False
    yellow: bool = False
    green: bool = False
    blue: bool = False
    purple: bool = False

    # Free text
    title: str = ""
    description: str = ""
    creator: str = ""
    publisher: str = ""
    rights: str = ""

    @property
    def color_labels(self) -> list[str]:
        """Names of the colour labels set on this image, in label order."""
        return [label for label in COLOR_LABELS if getattr(self, label)]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ImageMetadata':
        """
        Build a record from a plain mapping, ignoring keys it does not know.

        Raises:
            MetadataError: If data is not a mapping
        """
        if not isinstance(data, dict):
            raise MetadataError(type(data).__name__,
                                f"Image metadata must be an object, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.debug("Ignoring unknown metadata keys: %s", ", ".join(unknown))

        return cls(**{key: value for key, value in data.items() if key in known})


def load_metadata(source: Union[str, Path]) -> ImageMetadata:
    """
    Load an image metadata record from a JSON file.

    Args:
        source: Path to a JSON file holding one metadata object

    Returns:
        ImageMetadata built from the file

    Raises:
        MetadataError: If the file cannot be read or parsed
    """
    source = Path(source)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except OSError as e:
        raise MetadataError(source, f"Cannot read metadata file {source}: {e}") from e
    except json.JSONDecodeError as e:
        raise MetadataError(source, f"Invalid JSON in {source}: {e}") from e

    return ImageMetadata.from_dict(data)


# End of file #
