"""
Placeholder names and the per-call placeholder registry.
File: photo_vars/substitution/placeholders.py

A registry maps every known placeholder name to its string value for one
image. It is built fresh for each substitution call from the image metadata,
the caller's sequence number and a SystemContext, and is owned by that call.
"""

import logging

from typing import Any, Iterator, Optional
from collections.abc import Mapping

from photo_vars.core.filepath import get_filetype
from photo_vars.core.metadata import ImageMetadata
from photo_vars.core.system_context import SystemContext
from photo_vars.substitution.substitution_regex_patterns import EXIF_DATETIME_RGX


logger = logging.getLogger(__name__)


PLACEHOLDERS = (
    "ROLL.NAME",
    "FILE.FOLDER",
    "FILE.NAME",
    "FILE.EXTENSION",
    "ID",
    "VERSION",
    "VERSION.IF.MULTI",     # Not implemented
    "VERSION.NAME",
    "DARKTABLE.VERSION",
    "DARKTABLE.NAME",       # Not implemented
    "SEQUENCE",
    "WIDTH.SENSOR",
    "HEIGHT.SENSOR",
    "WIDTH.RAW",
    "HEIGHT.RAW",
    "WIDTH.CROP",
    "HEIGHT.CROP",
    "WIDTH.EXPORT",
    "HEIGHT.EXPORT",
    "WIDTH.MAX",            # Not implemented
    "HEIGHT.MAX",           # Not implemented
    "YEAR",
    "MONTH",
    "DAY",
    "HOUR",
    "MINUTE",
    "SECOND",
    "MSEC",                 # Not implemented
    "EXIF.YEAR",
    "EXIF.MONTH",
    "EXIF.DAY",
    "EXIF.HOUR",
    "EXIF.MINUTE",
    "EXIF.SECOND",
    "EXIF.MSEC",
    "EXIF.DATE.REGIONAL",   # Not implemented
    "EXIF.TIME.REGIONAL",   # Not implemented
    "EXIF.ISO",
    "EXIF.EXPOSURE",
    "EXIF.EXPOSURE.BIAS",
    "EXIF.APERTURE",
    "EXIF.FOCAL.LENGTH",
    "EXIF.FOCUS.DISTANCE",
    "LONGITUDE",
    "LATITUDE",
    "ALTITUDE",
    "STARS",
    "RATING.ICONS",         # Not implemented
    "LABELS",
    "LABELS.ICONS",         # Not implemented
    "MAKER",
    "MODEL",
    "TITLE",
    "DESCRIPTION",
    "CREATOR",
    "PUBLISHER",
    "RIGHTS",
    "TAGS",                 # Not implemented
    "CATEGORY",             # Not implemented
    "SIDECAR.TXT",          # Not implemented
    "FOLDER.PICTURES",
    "FOLDER.HOME",
    "FOLDER.DESKTOP",
    "OPENCL.ACTIVATED",     # Not implemented
    "USERNAME",
    "NL",
    "JOBCODE",              # Not implemented
)

NOT_IMPLEMENTED = frozenset({
    "VERSION.IF.MULTI",
    "DARKTABLE.NAME",
    "WIDTH.MAX",
    "HEIGHT.MAX",
    "MSEC",
    "EXIF.DATE.REGIONAL",
    "EXIF.TIME.REGIONAL",
    "RATING.ICONS",
    "LABELS.ICONS",
    "TAGS",
    "CATEGORY",
    "SIDECAR.TXT",
    "OPENCL.ACTIVATED",
    "JOBCODE",
})

LEGACY_ALIASES = {
    "HOME": "FOLDER.HOME",
    "PICTURES.FOLDER": "FOLDER.PICTURES",
    "DESKTOP": "FOLDER.DESKTOP",
}


def canonical_name(name: str) -> str:
    """
    Rewrite legacy placeholder spellings to their current names.

    Underscores become dots, then HOME, PICTURES.FOLDER and DESKTOP are
    mapped to FOLDER.HOME, FOLDER.PICTURES and FOLDER.DESKTOP.
    """
    name = name.replace("_", ".")
    return LEGACY_ALIASES.get(name, name)


class PlaceholderRegistry(Mapping):
    """
    Mapping of placeholder name -> string value for one image.

    Every name in PLACEHOLDERS has an entry; reserved names hold "". Values
    cannot be set one by one, but clear() resets them all to "".
    """

    def __init__(self, values: Optional[dict[str, str]] = None):
        self._values = {name: "" for name in PLACEHOLDERS}
        if values:
            self._values.update(
                (name, value) for name, value in values.items() if name in self._values
            )

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self):
        filled = sum(1 for value in self._values.values() if value)
        return f"PlaceholderRegistry({len(self._values)} names, {filled} with values)"

    def clear(self) -> None:
        """Reset every value to the empty string."""
        for name in self._values:
            self._values[name] = ""


def _text(value: Any) -> str:
    """Render a metadata value as placeholder text; None becomes ""."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _format_number(template: str, value: Optional[float]) -> str:
    if value is None:
        return ""
    try:
        return template % value
    except (TypeError, ValueError):
        logger.debug("Cannot format %r with %r", value, template)
        return ""


def format_exposure(exposure: Optional[float]) -> str:
    """
    Format an exposure time in seconds.

    Examples:
        0.004 -> "1/250"
        0.5   -> "1/2"
        2.0   -> "2"
    """
    if exposure is None:
        return ""
    try:
        exposure = float(exposure)
    except (TypeError, ValueError):
        return ""
    if exposure <= 0:
        return ""
    if exposure < 1:
        return "1/%.0f" % (1.0 / exposure)
    return "%g" % exposure


def parse_exif_datetime(taken: str) -> dict[str, str]:
    """
    Split an EXIF capture timestamp into its parts.

    Args:
        taken: Timestamp like "2024:06:01 14:30:05" or "2024:06:01 14:30:05.250"

    Returns:
        Dictionary keyed by EXIF.YEAR ... EXIF.MSEC; all values are "" when
        the timestamp cannot be parsed, EXIF.MSEC is "0" when there is no fraction
    """
    keys = ("EXIF.YEAR", "EXIF.MONTH", "EXIF.DAY",
            "EXIF.HOUR", "EXIF.MINUTE", "EXIF.SECOND", "EXIF.MSEC")

    match = EXIF_DATETIME_RGX.fullmatch((taken or "").strip())
    if not match:
        if taken:
            logger.debug("Unrecognised capture timestamp: %r", taken)
        return {key: "" for key in keys}

    parts = list(match.groups())
    if parts[6] is None:
        parts[6] = "0"
    return dict(zip(keys, parts))


def build_substitution_list(image: ImageMetadata,
                            sequence: Any,
                            username: Optional[str] = None,
                            pic_folder: Optional[str] = None,
                            home: Optional[str] = None,
                            desktop: Optional[str] = None,
                            context: Optional[SystemContext] = None) -> PlaceholderRegistry:
    """
    Build the placeholder registry for one image.

    Args:
        image: Metadata of the image being processed
        sequence: Sequence number assigned by the caller
        username: User name (derived from the environment if not supplied)
        pic_folder: Pictures folder (derived if not supplied)
        home: Home folder (derived if not supplied)
        desktop: Desktop folder (derived if not supplied)
        context: Prebuilt SystemContext; the four overrides above still win

    Returns:
        A new PlaceholderRegistry owned by the caller
    """
    if context is None:
        context = SystemContext.from_environment(
            username=username, pictures_dir=pic_folder, home_dir=home, desktop_dir=desktop
        )
    else:
        context = SystemContext(
            username=username if username is not None else context.username,
            home_dir=home if home is not None else context.home_dir,
            pictures_dir=pic_folder if pic_folder is not None else context.pictures_dir,
            desktop_dir=desktop if desktop is not None else context.desktop_dir,
            app_version=context.app_version,
            now=context.now,
        )

    now = context.now
    logger.debug("home folder is %s", context.home_dir)
    logger.debug("image date time taken is %s", image.exif_datetime_taken)

    values = {
        "ROLL.NAME": _text(image.film_roll),
        "FILE.FOLDER": _text(image.path),
        "FILE.NAME": _text(image.filename),
        "FILE.EXTENSION": get_filetype(image.filename or ""),
        "ID": _text(image.id),
        "VERSION": _text(image.duplicate_index),
        "VERSION.NAME": _text(image.version_name),
        "DARKTABLE.VERSION": _text(context.app_version),
        "SEQUENCE": _text(sequence),
        "WIDTH.SENSOR": _text(image.width),
        "HEIGHT.SENSOR": _text(image.height),
        "WIDTH.RAW": _text(image.p_width),
        "HEIGHT.RAW": _text(image.p_height),
        "WIDTH.CROP": _text(image.final_width),
        "HEIGHT.CROP": _text(image.final_height),
        "WIDTH.EXPORT": _text(image.final_width),
        "HEIGHT.EXPORT": _text(image.final_height),
        "YEAR": "%4d" % now.year,
        "MONTH": "%02d" % now.month,
        "DAY": "%02d" % now.day,
        "HOUR": "%02d" % now.hour,
        "MINUTE": "%02d" % now.minute,
        "SECOND": "%02d" % now.second,
        "EXIF.ISO": _format_number("%d", image.exif_iso),
        "EXIF.EXPOSURE": format_exposure(image.exif_exposure),
        "EXIF.EXPOSURE.BIAS": _text(image.exif_exposure_bias),
        "EXIF.APERTURE": _format_number("%.1f", image.exif_aperture),
        "EXIF.FOCAL.LENGTH": _format_number("%.0f", image.exif_focal_length),
        "EXIF.FOCUS.DISTANCE": _text(image.exif_focus_distance),
        "LONGITUDE": _text(image.longitude),
        "LATITUDE": _text(image.latitude),
        "ALTITUDE": _text(image.elevation),
        "STARS": _text(image.rating),
        "LABELS": ",".join(image.color_labels),
        "MAKER": _text(image.exif_maker),
        "MODEL": _text(image.exif_model),
        "TITLE": _text(image.title),
        "DESCRIPTION": _text(image.description),
        "CREATOR": _text(image.creator),
        "PUBLISHER": _text(image.publisher),
        "RIGHTS": _text(image.rights),
        "FOLDER.PICTURES": _text(context.pictures_dir),
        "FOLDER.HOME": _text(context.home_dir),
        "FOLDER.DESKTOP": _text(context.desktop_dir),
        "USERNAME": _text(context.username),
        "NL": "\n",
    }
    values.update(parse_exif_datetime(image.exif_datetime_taken))

    registry = PlaceholderRegistry(values)
    for name in PLACEHOLDERS:
        logger.debug("setting %s to %r", name, registry[name])
    return registry


# End of file #
