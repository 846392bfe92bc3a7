"""
KML/KMZ to CSV Converter
Usage: streamlit run kml_to_csv_app.py

- Upload one or more .kml or .kmz files
- Every KML document found becomes one CSV with the fixed 26-column header
- If any file fails, nothing from the batch is offered for download
"""

import streamlit as st

from kml_csv import HEADER, read_upload
from kml_csv.views import render_conversion

st.set_page_config(page_title="KML/KMZ to CSV Converter", layout="wide")

st.title("🗺️ KML/KMZ to CSV Converter")
st.markdown("**Placemark ExtendedData → fixed-column CSV**")

with st.expander("📊 CSV columns (Click to expand)", expanded=False):
    st.write(f"**{len(HEADER)} columns, always in this order:**")
    st.code(", ".join(HEADER), language="text")

st.divider()

uploaded_files = st.file_uploader(
    "Upload KML or KMZ files",
    type=['kml', 'kmz'],
    accept_multiple_files=True,
    help="KMZ archives may hold several KML documents; each gets its own CSV"
)

if uploaded_files:
    st.divider()
    render_conversion(
        (uploaded_file.name, read_upload(uploaded_file, uploaded_file.name))
        for uploaded_file in uploaded_files
    )

else:
    st.info("👆 Upload KML or KMZ files to start")
    st.markdown("""
    ### How to Use:
    1. Upload one or more `.kml` or `.kmz` files
    2. Check the record count for each document
    3. Download each CSV, or all of them as one ZIP
    """)
