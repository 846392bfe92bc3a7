"""
KMZ (ZIP) handling.

Reading pulls every ``.kml`` entry out of a KMZ as text. Writing bundles a
batch of CSV results into one ZIP for a single download.
"""

import logging
import zipfile
import zlib
from io import BytesIO
from typing import TYPE_CHECKING, Iterable, List, Set, Tuple

from .errors import ArchiveError
from .extractor import decode_kml_bytes
from .schema import KML_SUFFIX

if TYPE_CHECKING:
    from .dispatcher import ConversionResult

logger = logging.getLogger(__name__)

# Raised by zipfile for corrupt, truncated, encrypted or unsupported archives
_ARCHIVE_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    NotImplementedError,
    RuntimeError,
    ValueError,
    OSError,
)


def is_kml_entry(info: zipfile.ZipInfo) -> bool:
    return not info.is_dir() and info.filename.endswith(KML_SUFFIX)


def read_kml_entries(data: bytes, filename: str = '') -> List[Tuple[str, str]]:
    """(entry name, text) for every KML entry, in archive order"""
    label = filename or 'archive'
    try:
        zf = zipfile.ZipFile(BytesIO(data), 'r')
    except _ARCHIVE_ERRORS as e:
        raise ArchiveError(f"Invalid KMZ file {label}: {e}") from e

    entries = []
    with zf:
        for info in zf.infolist():
            if not is_kml_entry(info):
                logger.debug("Skipping %s in %s", info.filename, label)
                continue
            try:
                raw = zf.read(info)
            except _ARCHIVE_ERRORS as e:
                raise ArchiveError(
                    f"Could not read {info.filename} from {label}: {e}"
                ) from e
            entries.append((info.filename, decode_kml_bytes(raw)))

    if not entries:
        logger.warning("No KML entries found in %s", label)
    return entries


def _unique_name(name: str, used: Set[str]) -> str:
    if name not in used:
        return name
    stem, dot, ext = name.rpartition('.')
    n = 2
    while f"{stem} ({n}){dot}{ext}" in used:
        n += 1
    return f"{stem} ({n}){dot}{ext}"


def bundle_results(results: Iterable['ConversionResult']) -> bytes:
    """All CSVs of a batch in one deflated ZIP, one entry per result"""
    buffer = BytesIO()
    used = set()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as zf:
        for result in results:
            name = _unique_name(result.download_name, used)
            used.add(name)
            zf.writestr(name, result.csv_bytes)
    return buffer.getvalue()
