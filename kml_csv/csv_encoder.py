"""CSV text encoding for KML tables"""

from typing import Iterable, Sequence

from .extractor import KMLTable

DELIMITER = ','
QUOTE = '"'
NEWLINE = '\n'

_NEEDS_QUOTING = (DELIMITER, QUOTE, NEWLINE)


def quote_field(value: str) -> str:
    """Quote a field only if it holds a comma, a double quote or a newline"""
    if any(ch in value for ch in _NEEDS_QUOTING):
        return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE
    return value


def encode_row(row: Sequence[str]) -> str:
    return DELIMITER.join(quote_field(field) for field in row)


def encode_rows(rows: Iterable[Sequence[str]]) -> str:
    """Rows joined by a bare newline, no trailing newline"""
    return NEWLINE.join(encode_row(row) for row in rows)


def encode_table(table: KMLTable) -> bytes:
    """Header and rows as UTF-8 CSV bytes"""
    return encode_rows([table.header, *table.rows]).encode('utf-8')
