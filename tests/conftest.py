"""Shared fixtures: small JPEG files written with Pillow."""

import os
from pathlib import Path

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PIL import Image
from PIL.TiffImagePlugin import IFDRational

EXIF_IFD = 0x8769
GPS_IFD = 0x8825
INTEROP_IFD = 0xA005
XP_TITLE = 0x9C9B


def write_jpeg(path: Path, exif: Image.Exif | None = None) -> Path:
    image = Image.new("RGB", (16, 16), (200, 120, 40))
    if exif is None:
        image.save(path, "JPEG")
    else:
        image.save(path, "JPEG", exif=exif)
    return path


def camera_exif() -> Image.Exif:
    exif = Image.Exif()
    exif[271] = "Canon"
    exif[272] = "EOS 5D"
    exif[274] = 6
    exif[282] = IFDRational(72, 1)
    exif[283] = IFDRational(72, 1)
    exif[296] = 2
    exif[EXIF_IFD] = {
        33434: IFDRational(1, 60),
        33437: IFDRational(28, 10),
        36864: b"0230",
        37386: IFDRational(50, 1),
        INTEROP_IFD: {1: "R98"},
        41986: 0,
    }
    exif[GPS_IFD] = {
        0: b"\x02\x03\x00\x00",
        1: "N",
        2: (IFDRational(35, 1), IFDRational(39, 1), IFDRational(52, 1)),
        5: b"\x00",
        6: IFDRational(120, 1),
    }
    exif[XP_TITLE] = "Sunset".encode("utf-16-le") + b"\x00\x00"
    return exif


@pytest.fixture
def exif_jpeg(tmp_path: Path) -> Path:
    """JPEG with IFD0, Exif and GPS directories."""
    return write_jpeg(tmp_path / "camera.jpg", camera_exif())


@pytest.fixture
def plain_jpeg(tmp_path: Path) -> Path:
    """JPEG without any EXIF segment."""
    return write_jpeg(tmp_path / "plain.jpg")


@pytest.fixture
def garbage_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"this is not an image at all")
    return path


@pytest.fixture
def missing_path(tmp_path: Path) -> Path:
    return tmp_path / "does-not-exist.jpg"


@pytest.fixture
def make_jpeg(tmp_path: Path):
    """Factory writing ``name`` under tmp_path, with the camera EXIF by default."""

    def _make(name: str, with_exif: bool = True) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        return write_jpeg(path, camera_exif() if with_exif else None)

    return _make
