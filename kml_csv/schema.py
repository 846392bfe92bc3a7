"""Fixed CSV schema and file-type constants"""

KML_SUFFIX = '.kml'
KMZ_SUFFIX = '.kmz'
CSV_SUFFIX = '.csv'

CSV_MIME_TYPE = 'text/csv;charset=utf-8'

# Column order of every CSV written. Never reorder.
HEADER = (
    'HOMEPASS_ID',
    'CLUSTER_NAME',
    'PREFIX_ADDRESS',
    'STREET_NAME',
    'HOUSE_NUMBER',
    'BLOCK',
    'FLOOR',
    'RT',
    'RW',
    'DISTRICT',
    'SUB_DISTRICT',
    'FDT_CODE',
    'FAT_CODE',
    'BUILDING_LATITUDE',
    'BUILDING_LONGITUDE',
    'Category_BizPass',
    'POST_CODE',
    'ADDRESS_POLE___FAT',
    'OV_UG',
    'HOUSE_COMMENT_',
    'BUILDING_NAME',
    'TOWER',
    'APTN',
    'FIBER_NODE__HFC_',
    'ID_Area',
    'Clamp_Hook_ID',
)

HEADER_FIELDS = frozenset(HEADER)
