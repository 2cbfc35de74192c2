"""Human readable rendering of EXIF values.

A value is rendered together with the other fields of its directory, since
several tags only make sense next to a companion tag: ``XResolution`` needs
``ResolutionUnit``, ``GPSLatitude`` needs ``GPSLatitudeRef`` and so on.
"""

from __future__ import annotations

import string
from typing import Any, Callable, Dict, Mapping

from PIL.TiffImagePlugin import IFDRational

RESOLUTION_UNITS = {1: "", 2: "pixels per inch", 3: "pixels per centimeter"}
FOCAL_PLANE_UNITS = {
    1: "",
    2: "pixels per inch",
    3: "pixels per centimeter",
    4: "pixels per millimeter",
    5: "pixels per micrometer",
}
GPS_SPEED_UNITS = {"K": "km/h", "M": "mph", "N": "knots"}
GPS_DISTANCE_UNITS = {"K": "km", "M": "mi", "N": "nautical miles"}

SIMPLE_UNITS = {
    "ExposureTime": "s",
    "FocalLength": "mm",
    "FocalLengthIn35mmFilm": "mm",
    "ShutterSpeedValue": "EV",
    "ApertureValue": "EV",
    "BrightnessValue": "EV",
    "ExposureBiasValue": "EV",
    "MaxApertureValue": "EV",
    "SubjectDistance": "m",
    "GPSImgDirection": "degrees",
    "GPSTrack": "degrees",
    "GPSDestBearing": "degrees",
}

ENUMERATIONS: Dict[str, Dict[int, str]] = {
    "Orientation": {
        1: "top-left",
        2: "top-right",
        3: "bottom-right",
        4: "bottom-left",
        5: "left-top",
        6: "right-top",
        7: "right-bottom",
        8: "left-bottom",
    },
    "ResolutionUnit": {1: "none", 2: "inch", 3: "cm"},
    "FocalPlaneResolutionUnit": {1: "none", 2: "inch", 3: "cm", 4: "mm", 5: "μm"},
    "YCbCrPositioning": {1: "centered", 2: "co-sited"},
    "ColorSpace": {1: "sRGB", 0xFFFF: "uncalibrated"},
    "Compression": {1: "uncompressed", 6: "JPEG (old-style)", 7: "JPEG"},
    "ExposureProgram": {
        0: "not defined",
        1: "manual",
        2: "normal program",
        3: "aperture priority",
        4: "shutter priority",
        5: "creative program",
        6: "action program",
        7: "portrait mode",
        8: "landscape mode",
    },
    "MeteringMode": {
        0: "unknown",
        1: "average",
        2: "center-weighted average",
        3: "spot",
        4: "multi-spot",
        5: "pattern",
        6: "partial",
        255: "other",
    },
    "LightSource": {
        0: "unknown",
        1: "daylight",
        2: "fluorescent",
        3: "tungsten",
        4: "flash",
        9: "fine weather",
        10: "cloudy weather",
        11: "shade",
        17: "standard light A",
        18: "standard light B",
        19: "standard light C",
        255: "other",
    },
    "SensingMethod": {
        1: "not defined",
        2: "one-chip color area sensor",
        3: "two-chip color area sensor",
        4: "three-chip color area sensor",
        5: "color sequential area sensor",
        7: "trilinear sensor",
        8: "color sequential linear sensor",
    },
    "WhiteBalance": {0: "auto", 1: "manual"},
    "ExposureMode": {0: "auto exposure", 1: "manual exposure", 2: "auto bracket"},
    "SceneCaptureType": {0: "standard", 1: "landscape", 2: "portrait", 3: "night scene"},
}

VERSION_TAGS = {"ExifVersion", "FlashPixVersion", "InteroperabilityVersion"}

GPS_COORDINATE_REFS = {
    "GPSLatitude": "GPSLatitudeRef",
    "GPSLongitude": "GPSLongitudeRef",
    "GPSDestLatitude": "GPSDestLatitudeRef",
    "GPSDestLongitude": "GPSDestLongitudeRef",
}

# 8-byte character code header of UserComment
USER_COMMENT_CODES = {
    b"ASCII\x00\x00\x00": "ascii",
    b"UNICODE\x00": "utf-16",
    b"JIS\x00\x00\x00\x00\x00": "shift_jis",
}

# Windows Explorer tags, stored as UTF-16LE in BYTE arrays
XP_TAGS = {"XPTitle", "XPComment", "XPAuthor", "XPKeywords", "XPSubject"}

_PRINTABLE = set(string.printable.encode("ascii")) - set(b"\t\n\r\x0b\x0c")


def format_number(value: Any) -> str:
    if isinstance(value, IFDRational):
        if value.denominator == 0:
            return "undefined"
        if value.denominator == 1:
            return str(value.numerator)
        return f"{float(value):.6g}"
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


def format_text(value: str) -> str:
    text = value.rstrip("\x00").replace("\r", "\\r").replace("\n", "\\n")
    return '"' + text + '"'


def format_bytes(value: bytes, max_binary_bytes: int = 32) -> str:
    stripped = value.rstrip(b"\x00")
    if not stripped:
        return '""'
    if all(b in _PRINTABLE for b in stripped):
        return '"' + stripped.decode("ascii") + '"'
    if len(value) > max_binary_bytes:
        return f"0x{value[:max_binary_bytes].hex()}... ({len(value)} bytes)"
    return f"0x{value.hex()}"


def format_scalar(value: Any, max_binary_bytes: int = 32) -> str:
    if isinstance(value, str):
        return format_text(value)
    if isinstance(value, bytes):
        return format_bytes(value, max_binary_bytes)
    if isinstance(value, (tuple, list)):
        return ", ".join(format_scalar(v, max_binary_bytes) for v in value)
    return format_number(value)


def _as_int(value: Any) -> int | None:
    if isinstance(value, bytes):
        return value[0] if value else None
    if isinstance(value, (tuple, list)):
        return _as_int(value[0]) if value else None
    if isinstance(value, IFDRational):
        if value.denominator == 0:
            return None
        return int(float(value))
    if isinstance(value, int):
        return value
    return None


def _as_ref(value: Any) -> str:
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="replace")
    if isinstance(value, str):
        return value.rstrip("\x00").strip().upper()
    return ""


def _with_unit(text: str, unit: str) -> str:
    return f"{text} {unit}" if unit else text


def _enumerated(tag_name: str, value: Any) -> str:
    code = _as_int(value)
    if code is None:
        return format_scalar(value)
    return ENUMERATIONS[tag_name].get(code, f"unknown ({code})")


def _flash(value: Any) -> str:
    code = _as_int(value)
    if code is None:
        return format_scalar(value)
    text = "fired" if code & 0x01 else "not fired"
    if code & 0x40:
        text += ", red-eye reduction"
    return text


def _exposure_time(value: Any) -> str:
    if isinstance(value, IFDRational) and value.denominator:
        numerator, denominator = value.numerator, value.denominator
        if numerator == 1:
            return f"1/{denominator} s"
        if 0 < numerator < denominator and denominator % numerator == 0:
            return f"1/{denominator // numerator} s"
    return _with_unit(format_number(value), "s")


def _version(value: Any) -> str:
    if isinstance(value, bytes) and len(value) == 4 and value.isdigit():
        text = value.decode("ascii")
        return f"{int(text[:2])}.{text[2:]}"
    return format_scalar(value)


def _gps_version(value: Any) -> str:
    if isinstance(value, bytes):
        return ".".join(str(b) for b in value)
    if isinstance(value, (tuple, list)):
        return ".".join(format_number(v) for v in value)
    return format_scalar(value)


def _user_comment(value: Any, max_binary_bytes: int) -> str:
    if isinstance(value, bytes) and len(value) >= 8:
        encoding = USER_COMMENT_CODES.get(value[:8])
        if encoding is not None:
            return format_text(value[8:].decode(encoding, errors="replace"))
        if value[:8] == b"\x00" * 8:
            return format_bytes(value[8:], max_binary_bytes)
    return format_scalar(value, max_binary_bytes)


def _xp_text(value: Any, max_binary_bytes: int) -> str:
    if isinstance(value, str):
        return format_text(value)
    if isinstance(value, (tuple, list)) and all(isinstance(v, int) and 0 <= v < 256 for v in value):
        value = bytes(value)
    if isinstance(value, bytes) and len(value) % 2 == 0:
        try:
            text = value.decode("utf-16-le")
        except UnicodeDecodeError:
            return format_bytes(value, max_binary_bytes)
        return format_text(text)
    return format_scalar(value, max_binary_bytes)


def _coordinate(value: Any, ref: str) -> str:
    if isinstance(value, (tuple, list)) and len(value) == 3:
        degrees, minutes, seconds = (format_number(v) for v in value)
        text = f"{degrees} deg {minutes} min {seconds} sec"
    else:
        text = format_scalar(value)
    return _with_unit(text, ref)


def _timestamp(value: Any) -> str:
    if isinstance(value, (tuple, list)) and len(value) == 3:
        hours, minutes = _as_int(value[0]), _as_int(value[1])
        if hours is not None and minutes is not None:
            seconds = format_number(value[2])
            if "." not in seconds and seconds.isdigit():
                seconds = seconds.zfill(2)
            return f"{hours:02d}:{minutes:02d}:{seconds}"
    return format_scalar(value)


def _resolution(value: Any, unit_code: Any, units: Mapping[int, str]) -> str:
    # 2 (inch) is the EXIF default when the unit tag is absent
    code = _as_int(unit_code) if unit_code is not None else 2
    unit = units.get(code, "") if code is not None else ""
    return _with_unit(format_number(value), unit)


def _altitude(value: Any, ref: Any) -> str:
    text = f"{format_number(value)} m"
    if _as_int(ref) == 1:
        text += " below sea level"
    return text


Formatter = Callable[[Any, Mapping[str, Any]], str]

CONTEXTUAL: Dict[str, Formatter] = {
    "XResolution": lambda v, ctx: _resolution(v, ctx.get("ResolutionUnit"), RESOLUTION_UNITS),
    "YResolution": lambda v, ctx: _resolution(v, ctx.get("ResolutionUnit"), RESOLUTION_UNITS),
    "FocalPlaneXResolution": lambda v, ctx: _resolution(
        v, ctx.get("FocalPlaneResolutionUnit"), FOCAL_PLANE_UNITS
    ),
    "FocalPlaneYResolution": lambda v, ctx: _resolution(
        v, ctx.get("FocalPlaneResolutionUnit"), FOCAL_PLANE_UNITS
    ),
    "GPSAltitude": lambda v, ctx: _altitude(v, ctx.get("GPSAltitudeRef")),
    "GPSSpeed": lambda v, ctx: _with_unit(
        format_number(v), GPS_SPEED_UNITS.get(_as_ref(ctx.get("GPSSpeedRef", "K")), "")
    ),
    "GPSDestDistance": lambda v, ctx: _with_unit(
        format_number(v),
        GPS_DISTANCE_UNITS.get(_as_ref(ctx.get("GPSDestDistanceRef", "K")), ""),
    ),
}


def format_value(
    tag_name: str,
    value: Any,
    context: Mapping[str, Any],
    max_binary_bytes: int = 32,
) -> str:
    """Render ``value`` of ``tag_name`` using the sibling fields in ``context``."""
    if tag_name in CONTEXTUAL:
        return CONTEXTUAL[tag_name](value, context)
    if tag_name in GPS_COORDINATE_REFS:
        return _coordinate(value, _as_ref(context.get(GPS_COORDINATE_REFS[tag_name])))
    if tag_name in ENUMERATIONS:
        return _enumerated(tag_name, value)
    if tag_name == "Flash":
        return _flash(value)
    if tag_name == "ExposureTime":
        return _exposure_time(value)
    if tag_name == "FNumber":
        return f"f/{format_number(value)}"
    if tag_name in SIMPLE_UNITS:
        return _with_unit(format_scalar(value, max_binary_bytes), SIMPLE_UNITS[tag_name])
    if tag_name in VERSION_TAGS:
        return _version(value)
    if tag_name == "GPSVersionID":
        return _gps_version(value)
    if tag_name == "GPSTimeStamp":
        return _timestamp(value)
    if tag_name == "UserComment":
        return _user_comment(value, max_binary_bytes)
    if tag_name in XP_TAGS:
        return _xp_text(value, max_binary_bytes)
    return format_scalar(value, max_binary_bytes)
