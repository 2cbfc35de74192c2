"""Tests for contextual EXIF value rendering."""

from PIL.TiffImagePlugin import IFDRational

from exif_shell.extraction.value_formatter import format_bytes, format_number, format_value


class TestFormatNumber:
    def test_whole_rational_renders_as_integer(self):
        assert format_number(IFDRational(72, 1)) == "72"

    def test_fractional_rational_renders_as_decimal(self):
        assert format_number(IFDRational(14, 5)) == "2.8"

    def test_zero_denominator(self):
        assert format_number(IFDRational(1, 0)) == "undefined"

    def test_plain_int(self):
        assert format_number(3) == "3"


class TestResolution:
    def test_uses_sibling_resolution_unit(self):
        context = {"ResolutionUnit": 3}
        assert format_value("XResolution", IFDRational(28, 1), context) == "28 pixels per centimeter"

    def test_defaults_to_inch_without_unit_tag(self):
        assert format_value("YResolution", IFDRational(72, 1), {}) == "72 pixels per inch"

    def test_no_unit(self):
        context = {"ResolutionUnit": 1}
        assert format_value("XResolution", IFDRational(1, 1), context) == "1"

    def test_focal_plane_uses_its_own_unit(self):
        context = {"ResolutionUnit": 2, "FocalPlaneResolutionUnit": 4}
        assert (
            format_value("FocalPlaneXResolution", IFDRational(100, 1), context)
            == "100 pixels per millimeter"
        )


class TestCameraValues:
    def test_exposure_time_as_fraction(self):
        assert format_value("ExposureTime", IFDRational(1, 60), {}) == "1/60 s"

    def test_exposure_time_reduces_fraction(self):
        assert format_value("ExposureTime", IFDRational(10, 1250), {}) == "1/125 s"

    def test_long_exposure(self):
        assert format_value("ExposureTime", IFDRational(2, 1), {}) == "2 s"

    def test_fnumber(self):
        assert format_value("FNumber", IFDRational(14, 5), {}) == "f/2.8"

    def test_focal_length(self):
        assert format_value("FocalLength", IFDRational(50, 1), {}) == "50 mm"

    def test_flash(self):
        assert format_value("Flash", 0x01, {}) == "fired"
        assert format_value("Flash", 0x10, {}) == "not fired"
        assert format_value("Flash", 0x41, {}) == "fired, red-eye reduction"

    def test_enumeration(self):
        assert format_value("Orientation", 6, {}) == "right-top"
        assert format_value("MeteringMode", 5, {}) == "pattern"

    def test_unknown_enumeration_code(self):
        assert format_value("Orientation", 42, {}) == "unknown (42)"

    def test_version(self):
        assert format_value("ExifVersion", b"0230", {}) == "2.30"


class TestGps:
    def test_coordinate_with_ref(self):
        value = (IFDRational(35, 1), IFDRational(39, 1), IFDRational(523, 10))
        context = {"GPSLatitudeRef": "N"}
        assert format_value("GPSLatitude", value, context) == "35 deg 39 min 52.3 sec N"

    def test_altitude_below_sea_level(self):
        context = {"GPSAltitudeRef": b"\x01"}
        assert format_value("GPSAltitude", IFDRational(12, 1), context) == "12 m below sea level"

    def test_altitude_above_sea_level(self):
        assert format_value("GPSAltitude", IFDRational(12, 1), {"GPSAltitudeRef": 0}) == "12 m"

    def test_speed_uses_ref(self):
        assert format_value("GPSSpeed", IFDRational(30, 1), {"GPSSpeedRef": "N"}) == "30 knots"

    def test_version_id(self):
        assert format_value("GPSVersionID", b"\x02\x03\x00\x00", {}) == "2.3.0.0"

    def test_timestamp(self):
        value = (IFDRational(9, 1), IFDRational(5, 1), IFDRational(7, 1))
        assert format_value("GPSTimeStamp", value, {}) == "09:05:07"


class TestGenericValues:
    def test_text_is_quoted_and_trimmed(self):
        assert format_value("Make", "Canon\x00", {}) == '"Canon"'

    def test_text_newlines_are_escaped(self):
        assert format_value("ImageDescription", "a\nb", {}) == '"a\\nb"'

    def test_printable_bytes_are_quoted(self):
        assert format_bytes(b"R98\x00") == '"R98"'

    def test_binary_is_truncated(self):
        data = bytes(range(1, 101))
        text = format_bytes(data, max_binary_bytes=4)
        assert text == "0x01020304... (100 bytes)"

    def test_sequence(self):
        assert format_value("BitsPerSample", (8, 8, 8), {}) == "8, 8, 8"

    def test_user_comment_with_ascii_header(self):
        assert format_value("UserComment", b"ASCII\x00\x00\x00hello", {}) == '"hello"'


class TestWindowsTags:
    def test_title_bytes_are_utf16(self):
        value = "Sunset".encode("utf-16-le") + b"\x00\x00"

        assert format_value("XPTitle", value, {}) == '"Sunset"'

    def test_keywords_as_byte_tuple(self):
        value = tuple("café;beach".encode("utf-16-le"))

        assert format_value("XPKeywords", value, {}) == '"café;beach"'

    def test_odd_length_stays_binary(self):
        assert format_value("XPComment", b"\x01\x02\x03", {}) == "0x010203"
