"""Streamlit rendering of a converted batch"""

from typing import Iterable, List, Tuple

import streamlit as st

from .archive import bundle_results
from .dispatcher import ConversionResult, convert_batch
from .errors import ConversionError


def show_results_table(results: List[ConversionResult]):
    st.subheader("📋 Processing Results")
    st.dataframe(
        [
            {
                'name': result.download_name,
                'source': result.original_name,
                'records': result.row_count,
            }
            for result in results
        ],
        width='stretch',
        hide_index=True,
        column_config={
            'name': 'CSV',
            'source': 'From',
            'records': st.column_config.NumberColumn('Records'),
        }
    )


def show_downloads(results: List[ConversionResult]):
    """One button per CSV, plus a ZIP of all of them when there are several"""
    st.subheader("📥 Download")

    for index, result in enumerate(results):
        st.download_button(
            label=f"📄 {result.download_name} ({result.row_count} records)",
            data=result.csv_bytes,
            file_name=result.download_name,
            mime=result.mime_type,
            key=f"csv-{index}",
            width='stretch'
        )

    if len(results) > 1:
        st.download_button(
            label="📦 All CSV (ZIP)",
            data=bundle_results(results),
            file_name="converted_csvs.zip",
            mime="application/zip",
            key="csv-zip",
            width='stretch'
        )


def render_conversion(files: Iterable[Tuple[str, bytes]]) -> List[ConversionResult]:
    """
    Convert a batch and render it.

    Any failure shows a single error and nothing from the batch is offered
    for download.
    """
    try:
        results = convert_batch(files)
    except ConversionError as e:
        st.error(f"❌ {e}")
        return []

    if not results:
        st.warning("⚠️ No KML documents found in the uploaded files")
        return []

    show_results_table(results)
    st.divider()
    show_downloads(results)
    st.success(f"✅ {len(results)} CSV file(s) ready")
    return results
