from .bridge.commands import GREETING_TEMPLATE, greet
from .bridge.registry import CommandRegistry, default_registry
from .config import ExtractorSettings
from .errors import (
	BridgeError,
	CommandInvocationError,
	CommandRegistrationError,
	ExtractorError,
	MalformedContainerError,
	PathNotFoundError,
	UnknownCommandError,
)
from .extraction.exif_metadata_parser import ExifMetadataParser
from .extraction.extractor_service import MetadataExtractorService, export_json, write_report
from .extraction.image_finder import ImageFinder
from .extraction.metadata_parser import MetadataParser
from .extraction.metadata_reader import MetadataReader
from .models.extraction_result import BatchReport, ExtractionResult
from .models.metadata_field import MetadataField

__all__ = [
	"GREETING_TEMPLATE",
	"greet",
	"CommandRegistry",
	"default_registry",
	"ExtractorSettings",
	"BridgeError",
	"CommandInvocationError",
	"CommandRegistrationError",
	"ExtractorError",
	"MalformedContainerError",
	"PathNotFoundError",
	"UnknownCommandError",
	"ExifMetadataParser",
	"MetadataExtractorService",
	"export_json",
	"write_report",
	"ImageFinder",
	"MetadataParser",
	"MetadataReader",
	"BatchReport",
	"ExtractionResult",
	"MetadataField",
]
