"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd
import streamlit as st


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Any]] = None,
    height: int = 400,
    show_index: bool = False,
    export_file_name: str = "export.csv",
    empty_message: str = "No data to display.",
) -> None:
    if df.empty:
        st.info(empty_message)
        return

    st.dataframe(
        df,
        use_container_width=True,
        height=height,
        hide_index=not show_index,
        column_config={k: v for k, v in (column_config or {}).items() if k in df.columns},
    )

    csv_bytes = df.to_csv(index=show_index).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
