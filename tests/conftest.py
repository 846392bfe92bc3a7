import zipfile
from io import BytesIO
from typing import Dict, List, Optional, Sequence, Tuple
from xml.sax.saxutils import escape, quoteattr

import pytest

KML_OPEN = '<?xml version="1.0" encoding="UTF-8"?>\n<kml xmlns="http://www.opengis.net/kml/2.2">\n<Document>\n'
KML_CLOSE = '</Document>\n</kml>\n'


def placemark_xml(fields: Optional[Sequence[Tuple[str, str]]]) -> str:
    """One Placemark; None means no ExtendedData at all"""
    parts = ['<Placemark><name>pm</name>']
    if fields is not None:
        parts.append('<ExtendedData><SchemaData schemaUrl="#s">')
        for name, value in fields:
            parts.append(f'<SimpleData name={quoteattr(name)}>{escape(value)}</SimpleData>')
        parts.append('</SchemaData></ExtendedData>')
    parts.append('<Point><coordinates>106.8,-6.2,0</coordinates></Point></Placemark>\n')
    return ''.join(parts)


def build_kml(placemarks: List[Optional[Sequence[Tuple[str, str]]]]) -> str:
    return KML_OPEN + ''.join(placemark_xml(p) for p in placemarks) + KML_CLOSE


def build_kmz(entries: Dict[str, str], compression=zipfile.ZIP_DEFLATED) -> bytes:
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, 'w', compression) as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buffer.getvalue()


@pytest.fixture
def make_kml():
    return build_kml


@pytest.fixture
def make_kmz():
    return build_kmz


@pytest.fixture
def sample_kml():
    return build_kml([
        [('HOMEPASS_ID', 'HP-001'), ('CLUSTER_NAME', 'Cluster A'), ('STREET_NAME', 'Jalan Merdeka')],
        [('HOMEPASS_ID', 'HP-002'), ('RT', '003'), ('RW', '007')],
        None,
    ])
