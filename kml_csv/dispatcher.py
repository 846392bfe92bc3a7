"""
Routes uploaded files to the right conversion path.

``.kmz`` files are unpacked and every KML entry converted; ``.kml`` files are
converted directly. A batch is all-or-nothing: the first failure propagates
and results already produced for earlier files are dropped.
"""

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterable, List, Tuple

from .archive import read_kml_entries
from .csv_encoder import encode_table
from .errors import FileReadError, UnsupportedFormatError
from .extractor import decode_kml_bytes, parse_kml_to_table
from .schema import CSV_MIME_TYPE, CSV_SUFFIX, KML_SUFFIX, KMZ_SUFFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """One CSV produced from one KML document"""
    name: str
    original_name: str
    row_count: int
    csv_bytes: bytes

    @property
    def download_name(self) -> str:
        return self.name + CSV_SUFFIX

    @property
    def mime_type(self) -> str:
        return CSV_MIME_TYPE


def strip_suffix(name: str, suffix: str) -> str:
    """Drop a trailing suffix, compared case-insensitively"""
    if suffix and name.lower().endswith(suffix.lower()):
        return name[:-len(suffix)]
    return name


def convert_kml_text(kml_content: str, name: str, original_name: str) -> ConversionResult:
    """Extract and encode one KML document"""
    table = parse_kml_to_table(kml_content, original_name)
    logger.info("Converted %s from %s: %d record(s)", name, original_name, table.row_count)
    return ConversionResult(
        name=name,
        original_name=original_name,
        row_count=table.row_count,
        csv_bytes=encode_table(table),
    )


def convert_kmz(data: bytes, filename: str) -> List[ConversionResult]:
    return [
        convert_kml_text(text, strip_suffix(entry_name, KML_SUFFIX), filename)
        for entry_name, text in read_kml_entries(data, filename)
    ]


def convert_kml(data: bytes, filename: str) -> List[ConversionResult]:
    text = decode_kml_bytes(data)
    return [convert_kml_text(text, strip_suffix(filename, KML_SUFFIX), filename)]


def convert_file(filename: str, data: bytes) -> List[ConversionResult]:
    """Convert one uploaded file, dispatching on its extension"""
    lowered = filename.lower()
    if lowered.endswith(KMZ_SUFFIX):
        return convert_kmz(data, filename)
    if lowered.endswith(KML_SUFFIX):
        return convert_kml(data, filename)
    raise UnsupportedFormatError(filename)


def convert_batch(files: Iterable[Tuple[str, bytes]]) -> List[ConversionResult]:
    """Convert every file in order; any failure aborts the whole batch"""
    results = []
    for filename, data in files:
        results.extend(convert_file(filename, data))
    return results


def read_upload(fileobj: BinaryIO, filename: str) -> bytes:
    """Read an uploaded file's bytes, wrapping I/O failures"""
    try:
        return fileobj.read()
    except OSError as e:
        raise FileReadError(f"Failed to read file {filename}: {e}") from e
