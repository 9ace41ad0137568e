"""Methods Reference Page.

Describes each estimation formula, the category bands and the abbreviations
used on the results page.
"""

import pandas as pd
import streamlit as st

from bodyfat_estimator.config import (
    CATEGORIES,
    CATEGORY_UPPER_BOUNDS,
    CONTEST_PREP_BELOW,
    DEFAULT_LOCALE,
    METHODS,
)
from bodyfat_estimator.locales import get_strings

st.set_page_config(page_title="Methods | Body Fat Estimator", page_icon="📚", layout="centered")

strings = get_strings(st.session_state.get("locale", DEFAULT_LOCALE))

st.title(f"📚 {strings['methods_title']}")

for method in METHODS:
    info = strings["methods"][method]
    st.markdown(f"#### {info['name']}")
    st.caption(info["note"])

st.divider()
st.markdown(f"### {strings['category_label']}")

# Band edges per sex: contest prep is strict, the rest are inclusive upper bounds
rows = []
for category in CATEGORIES:
    row = {strings["category_label"]: strings["categories"][category]}
    for sex in ("male", "female"):
        bounds = dict(CATEGORY_UPPER_BOUNDS[sex])
        if category == "contest_prep":
            band = f"< {CONTEST_PREP_BELOW[sex]}%"
        elif category == "obese":
            band = f"> {CATEGORY_UPPER_BOUNDS[sex][-1][1]}%"
        else:
            band = f"≤ {bounds[category]}%"
        row[strings["sexes"][sex]] = band
    rows.append(row)
st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

st.divider()
st.markdown(f"### {strings['abbreviations_title']}")
for abbr, full in strings["abbreviations"]:
    st.markdown(f"- **{abbr}**: {full}")

st.markdown("---")
st.caption(f"💡 {strings['disclaimer']}")
