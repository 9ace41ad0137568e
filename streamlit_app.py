"""Streamlit frontend for the Body Fat Estimator.

Main entry point for the multi-page Streamlit application. The questionnaire
state lives in a WizardState kept in the session; every calculation goes
through the estimation engine.
"""

import time

import streamlit as st

from bodyfat_estimator import wizard as wz
from bodyfat_estimator.categories import needs_coaching
from bodyfat_estimator.config import CATEGORY_COLORS, DEFAULT_LOCALE, LOADING_TICK_SECONDS
from bodyfat_estimator.estimator import category_message
from bodyfat_estimator.locales import available_locales, get_strings
from bodyfat_estimator.units import format_for_input
from bodyfat_estimator.validation import field_bounds
from pages.components.charts import create_estimates_bar_chart, estimates_frame

st.set_page_config(
    page_title="Body Fat Estimator",
    page_icon="📏",
    layout="centered",
    initial_sidebar_state="expanded"
)

# Initialize session state variables
if 'wizard' not in st.session_state:
    st.session_state.wizard = wz.WizardState()
if 'loading_timer' not in st.session_state:
    st.session_state.loading_timer = None
if 'locale' not in st.session_state:
    st.session_state.locale = DEFAULT_LOCALE

wizard = st.session_state.wizard

# Sidebar: language selection and progress
with st.sidebar:
    st.selectbox(
        "🌐 Language",
        available_locales(),
        format_func=lambda code: get_strings(code)["language_name"],
        key="locale",
    )
    strings = get_strings(st.session_state.locale)
    st.markdown("---")
    st.caption(f"{wizard.step} / {wz.RESULTS}")
    st.progress(wizard.step / wz.RESULTS)


# --- Callbacks ---

def _widget_key(name: str) -> str:
    return f"input_{name}"


def _on_input(name: str):
    wizard.set_input(name, st.session_state[_widget_key(name)])


def _on_next():
    wizard.advance()
    if wizard.step == wz.LOADING:
        timer = wz.LoadingTimer()
        timer.start()
        st.session_state.loading_timer = timer


def _on_back():
    _cancel_loading()
    wizard.back()


def _on_reset():
    _cancel_loading()
    wizard.reset()


def _cancel_loading():
    timer = st.session_state.loading_timer
    if timer is not None:
        timer.cancel()
    st.session_state.loading_timer = None


def _on_units():
    wizard.toggle_units(st.session_state.unit_choice)


# --- Step renderers ---

def _number_field(name: str, label: str):
    # Keep the widget in sync with conversions done by the wizard
    st.session_state[_widget_key(name)] = wizard.inputs[name]
    st.text_input(label, key=_widget_key(name), on_change=_on_input, args=(name,))
    message = wizard.error_message(name, strings)
    if message:
        st.error(f"⚠️ {message}")


def _unit_toggle():
    st.session_state.unit_choice = wizard.unit_system
    st.radio(
        "Units",
        ["metric", "imperial"],
        format_func=lambda system: strings[system],
        key="unit_choice",
        horizontal=True,
        on_change=_on_units,
        label_visibility="collapsed",
    )


def _range_caption(name: str):
    low, high = field_bounds(name, wizard.unit_system)
    st.caption(f"{format_for_input(low)} - {format_for_input(high)}")


def _navigation(next_label: str = None):
    col1, col2 = st.columns(2)
    with col1:
        st.button(f"⬅️ {strings['back_button']}", on_click=_on_back, use_container_width=True)
    with col2:
        st.button(
            f"{next_label or strings['next_button']} ➡️",
            on_click=_on_next,
            type="primary",
            use_container_width=True,
        )


def render_welcome():
    st.header(strings["welcome_title"])
    st.write(strings["welcome_text"])
    st.button(strings["start_button"], on_click=wizard.start, type="primary", use_container_width=True)


def render_sex():
    st.header(strings["sex_title"])
    col1, col2 = st.columns(2)
    for col, sex, icon in ((col1, "male", "♂️"), (col2, "female", "♀️")):
        with col:
            selected = wizard.record.sex == sex
            st.button(
                f"{icon} {strings['sexes'][sex]}",
                on_click=wizard.select_sex,
                args=(sex,),
                type="primary" if selected else "secondary",
                use_container_width=True,
            )
    message = wizard.error_message("sex", strings)
    if message:
        st.error(f"⚠️ {message}")
    _navigation()


def render_age():
    st.header(strings["age_title"])
    _number_field("age", strings["age_label"])
    _range_caption("age")
    _navigation()


def render_weight():
    st.header(strings["weight_title"])
    _unit_toggle()
    unit = "kg" if wizard.unit_system == "metric" else "lbs"
    _number_field("weight", strings["weight_label"].format(unit=unit))
    _range_caption("weight")
    _navigation()


def render_height():
    st.header(strings["height_title"])
    _unit_toggle()
    if wizard.unit_system == "metric":
        _number_field("height_cm", strings["height_cm_label"])
        _range_caption("height_cm")
    else:
        ft_col, in_col = st.columns(2)
        with ft_col:
            _number_field("height_ft", strings["height_ft_label"])
            _range_caption("height_ft")
        with in_col:
            _number_field("height_in", strings["height_in_label"])
            _range_caption("height_in")
    _navigation()


def render_circumference():
    name = wz.CIRCUMFERENCE_STEPS[wizard.step]
    st.header(strings["circumference_title"].format(field=strings["field_names"][name]))
    _unit_toggle()
    unit = "cm" if wizard.unit_system == "metric" else "in"
    _number_field(name, strings["circumference_label"].format(unit=unit))
    _range_caption(name)
    st.caption(f"💡 {strings['measure_hints'][name]}")
    is_last = wizard.step == wz.HIP or (wizard.step == wz.WAIST and wizard.record.sex == "male")
    _navigation(strings["calculate_button"] if is_last else None)


def render_loading():
    timer = st.session_state.loading_timer
    if timer is None:
        timer = wz.LoadingTimer()
        timer.start()
        st.session_state.loading_timer = timer

    bar = st.progress(0.0)
    status = st.empty()
    while timer.running:
        bar.progress(timer.progress() / 100)
        status.caption(timer.message(strings))
        time.sleep(LOADING_TICK_SECONDS)

    st.session_state.loading_timer = None
    if not timer.cancelled:
        wizard.finish_loading()
    st.rerun()


def render_results():
    st.header(strings["results_title"])
    st.caption(strings["disclaimer"])

    bundle = wizard.results()
    if bundle is None:
        st.error(strings["calculation_error"])
        st.button(strings["reset_button"], on_click=_on_reset, use_container_width=True)
        return

    category = bundle.category
    col1, col2, col3 = st.columns(3)
    col1.metric(strings["bmi_label"], f"{bundle.bmi:.1f}" if bundle.bmi is not None else "-")
    col2.metric(
        strings["average_label"],
        f"{bundle.average_bf:.1f}%" if bundle.average_bf is not None else "-",
    )
    col3.metric(strings["category_label"], strings["categories"][category])

    message = category_message(category, strings)
    if message:
        st.markdown(
            f"<p style='color:{CATEGORY_COLORS[category]}'>{message}</p>",
            unsafe_allow_html=True,
        )

    fig = create_estimates_bar_chart(bundle, strings)
    st.plotly_chart(fig, use_container_width=True)

    df = estimates_frame(bundle, strings).drop(columns=["key"])
    df.columns = [strings["method_column"], strings["value_column"], strings["note_column"]]
    st.dataframe(df, hide_index=True, use_container_width=True)

    if needs_coaching(category):
        st.info(f"📩 {strings['coaching_cta']}")

    st.button(f"🔄 {strings['reset_button']}", on_click=_on_reset, use_container_width=True)


RENDERERS = {
    wz.WELCOME: render_welcome,
    wz.SEX: render_sex,
    wz.AGE: render_age,
    wz.WEIGHT: render_weight,
    wz.HEIGHT: render_height,
    wz.NECK: render_circumference,
    wz.WAIST: render_circumference,
    wz.HIP: render_circumference,
    wz.LOADING: render_loading,
    wz.RESULTS: render_results,
}

st.title(f"📏 {strings['app_title']}")
RENDERERS[wizard.step]()

if wizard.step not in (wz.WELCOME, wz.LOADING, wz.RESULTS):
    st.markdown("---")
    st.button(f"🔄 {strings['reset_button']}", on_click=_on_reset)
