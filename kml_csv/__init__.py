"""KML/KMZ placemark attributes to fixed-schema CSV"""

from .archive import bundle_results, read_kml_entries
from .csv_encoder import encode_rows, encode_table, quote_field
from .dispatcher import (
    ConversionResult,
    convert_batch,
    convert_file,
    convert_kml_text,
    read_upload,
    strip_suffix,
)
from .errors import (
    ArchiveError,
    ConversionError,
    FileReadError,
    ParseError,
    UnsupportedFormatError,
)
from .extractor import KMLExtractor, KMLTable, decode_kml_bytes, parse_kml_to_table
from .schema import CSV_MIME_TYPE, HEADER

__version__ = '1.0.0'
