"""
KML to table extraction.

Every Placemark in a document becomes one row of the fixed schema in
``kml_csv.schema.HEADER``. Values come from the ``SimpleData`` entries of the
placemark's first ``ExtendedData`` block; anything the schema does not name
is dropped and anything missing stays an empty string.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from lxml import etree

from .errors import ParseError
from .schema import HEADER, HEADER_FIELDS

logger = logging.getLogger(__name__)

# Tags are matched on local name so documents with or without the KML
# default namespace (or a prefix) behave the same.
PLACEMARK_XPATH = '//*[local-name()="Placemark"]'
EXTENDED_DATA_XPATH = './/*[local-name()="ExtendedData"]'
SIMPLE_DATA_XPATH = './/*[local-name()="SimpleData"]'

Row = Tuple[str, ...]


def _make_parser() -> etree.XMLParser:
    """Strict parser: no recovery, no entity expansion, no network"""
    return etree.XMLParser(
        encoding='utf-8',
        recover=False,
        resolve_entities=False,
        no_network=True,
    )


@dataclass(frozen=True)
class KMLTable:
    """Header plus one row per placemark, in document order"""
    header: Row
    rows: Tuple[Row, ...]

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def as_lists(self) -> List[List[str]]:
        """Header followed by the rows, as plain lists"""
        return [list(self.header)] + [list(row) for row in self.rows]


class KMLExtractor:
    """Parses one KML document and maps its placemarks onto the schema"""

    def __init__(self, kml_content: str, filename: str = ''):
        """Parse KML text, raising ParseError if it is not well-formed XML"""
        self.filename = filename
        try:
            self.root = etree.fromstring(kml_content.encode('utf-8'), _make_parser())
        except (etree.XMLSyntaxError, UnicodeEncodeError) as e:
            raise ParseError(f"Invalid KML file format{self._label()}: {e}") from e

    def _label(self) -> str:
        return f" ({self.filename})" if self.filename else ''

    def get_placemarks(self) -> List[etree._Element]:
        """All Placemark elements, any depth, document order"""
        return self.root.xpath(PLACEMARK_XPATH)

    def get_extended_data(self, placemark: etree._Element) -> Optional[etree._Element]:
        """First ExtendedData under a placemark, or None"""
        found = placemark.xpath(EXTENDED_DATA_XPATH)
        return found[0] if found else None

    def extract_fields(self, placemark: etree._Element) -> Dict[str, str]:
        """Schema field -> value for one placemark, empty string by default"""
        fields = dict.fromkeys(HEADER, '')
        extended_data = self.get_extended_data(placemark)
        if extended_data is None:
            return fields

        for simple_data in extended_data.xpath(SIMPLE_DATA_XPATH):
            name = simple_data.get('name')
            if name in HEADER_FIELDS:
                # later duplicates overwrite earlier ones
                fields[name] = str(simple_data.xpath('string()')).strip()
        return fields

    def extract_row(self, placemark: etree._Element) -> Row:
        fields = self.extract_fields(placemark)
        return tuple(fields[column] for column in HEADER)

    def get_table(self) -> KMLTable:
        """Build the table for the whole document"""
        rows = tuple(self.extract_row(pm) for pm in self.get_placemarks())
        logger.debug("Extracted %d placemark(s)%s", len(rows), self._label())
        return KMLTable(header=HEADER, rows=rows)


def parse_kml_to_table(kml_content: str, filename: str = '') -> KMLTable:
    """Parse KML text straight to a KMLTable"""
    return KMLExtractor(kml_content, filename).get_table()


def decode_kml_bytes(data: bytes) -> str:
    """UTF-8 text, BOM dropped, undecodable bytes replaced"""
    return data.decode('utf-8-sig', errors='replace')
