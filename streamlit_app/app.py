"""Lift Log: Streamlit page that formats copied spreadsheet cells.

Run with:
    streamlit run streamlit_app/app.py

Open with ``?data=<base64 of the copied cells>`` to render a log directly,
or paste the cells into the text box.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import streamlit as st

from lift_log.config import LOG_FORMAT, LOG_LEVEL, QUERY_PARAM
from lift_log.exceptions import PayloadDecodeError
from lift_log.formatting import format_workout
from lift_log.pipeline import decode_payload, parse_workout
from lift_log.serialization import to_dataframe, to_html

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(page_title="Lift Log", page_icon="🏋️", layout="centered")

st.title("Lift Log")
st.caption("Paste spreadsheet cells, get a dated workout log")

# ---------------------------------------------------------------------------
# Input: query parameter first, paste box as a fallback
# ---------------------------------------------------------------------------

payload = st.query_params.get(QUERY_PARAM)
text: str | None = None

if payload:
    try:
        text = decode_payload(payload)
    except PayloadDecodeError as e:
        logger.error("Bad %s query parameter: %s", QUERY_PARAM, e)
        st.error(f"Could not read the `{QUERY_PARAM}` parameter: {e}")
else:
    pasted = st.text_area(
        "Spreadsheet cells",
        height=240,
        placeholder="Copy the exercise blocks from the sheet and paste them here",
    )
    text = pasted or None

log_date = st.date_input("Log date", value=datetime.now(timezone.utc).date())

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

if text is not None:
    exercises = parse_workout(text)
    workout = format_workout(exercises, log_date)

    if not exercises:
        st.warning("No complete exercise blocks found (each needs 7 rows of 6 cells).")

    st.markdown(to_html(workout), unsafe_allow_html=True)

    st.divider()
    st.code(workout, language=None)

    with st.expander("Parsed sets"):
        st.dataframe(to_dataframe(exercises), hide_index=True)
else:
    st.info("Add `?data=...` to the URL or paste cells above to get started.")
