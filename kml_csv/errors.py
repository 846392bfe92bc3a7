"""Errors raised while converting KML/KMZ uploads to CSV"""


class ConversionError(Exception):
    """Base class for every conversion failure"""


class UnsupportedFormatError(ConversionError):
    """File name is neither .kml nor .kmz"""

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(
            f"Unsupported file format: {filename}. Please use .kml or .kmz files."
        )


class ParseError(ConversionError):
    """KML text is not well-formed XML"""


class ArchiveError(ConversionError):
    """KMZ bytes are not a readable ZIP archive"""


class FileReadError(ConversionError, OSError):
    """Uploaded file could not be read"""
