"""Tests for path handling and error translation in MetadataReader."""

import struct
from pathlib import Path

import pytest
from PIL import Image

from exif_shell.errors import MalformedContainerError, PathNotFoundError
from exif_shell.extraction.metadata_reader import MetadataReader
from exif_shell.models.metadata_field import MetadataField


class FailingParser:
    def __init__(self, exc):
        self.exc = exc

    def parse(self, data):
        raise self.exc


class TestMetadataReader:
    def test_reads_fields(self, exif_jpeg):
        fields = MetadataReader().read(exif_jpeg)

        assert fields
        assert all(isinstance(f, MetadataField) for f in fields)

    def test_iter_fields_matches_read(self, exif_jpeg):
        reader = MetadataReader()

        assert list(reader.iter_fields(exif_jpeg)) == reader.read(exif_jpeg)

    def test_missing_path(self, missing_path):
        with pytest.raises(PathNotFoundError) as excinfo:
            MetadataReader().read(missing_path)

        assert excinfo.value.path == missing_path
        assert excinfo.value.kind == "not_found"

    def test_directory_is_not_a_readable_file(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            MetadataReader().read(tmp_path)

    def test_unreadable_file(self, exif_jpeg, mocker):
        mocker.patch.object(Path, "read_bytes", side_effect=PermissionError(13, "Permission denied"))

        with pytest.raises(PathNotFoundError, match="Permission denied"):
            MetadataReader().read(exif_jpeg)

    def test_garbage_is_malformed(self, garbage_file):
        with pytest.raises(MalformedContainerError) as excinfo:
            MetadataReader().read(garbage_file)

        assert excinfo.value.kind == "malformed"

    @pytest.mark.parametrize(
        "exc",
        [
            struct.error("unpack requires a buffer"),
            SyntaxError("not a TIFF file"),
            Image.DecompressionBombError("Image size exceeds limit"),
        ],
    )
    def test_parser_errors_are_malformed(self, exif_jpeg, exc):
        reader = MetadataReader(FailingParser(exc))

        with pytest.raises(MalformedContainerError) as excinfo:
            reader.read(exif_jpeg)

        assert excinfo.value.__cause__ is exc

    def test_empty_container_is_not_an_error(self, plain_jpeg):
        assert MetadataReader().read(plain_jpeg) == []
