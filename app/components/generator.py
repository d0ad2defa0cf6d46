"""AI CV generator wizard for Streamlit UI.

The GeneratorStore is the source of truth. Widgets keep their own values in
session state under the keys below and push changes to the store from their
callbacks; store-wide changes (example data, clear) are pushed back with
``_sync_widgets``.
"""

import streamlit as st

from cv_site.config import get_settings
from cv_site.data.examples import EXAMPLE_JOB_URL
from cv_site.icons import material_icon
from cv_site.models.generator import GenerationProgress, get_profile_option
from cv_site.stores.generator import GeneratorStore

STORE_KEY = "generator_store"


def get_generator_store() -> GeneratorStore:
    """Get the session's generator store, creating it on first use."""
    if STORE_KEY not in st.session_state:
        settings = get_settings()
        st.session_state[STORE_KEY] = GeneratorStore(time_scale=settings.simulation_time_scale)
    return st.session_state[STORE_KEY]


def _value_key(source_id: str) -> str:
    return f"source_value_{source_id}"


def _type_key(source_id: str) -> str:
    return f"source_type_{source_id}"


def _sync_widgets(store: GeneratorStore, overwrite: bool = True) -> None:
    """Copy store values into widget state (only missing keys unless overwrite)."""
    state = store.state
    values = {
        "manual_summary": state.manual_professional_summary,
        "job_input_type": state.job_input_type,
        "job_target_value": state.job_target_value,
    }
    for source in state.profile_sources:
        values[_value_key(source.id)] = source.value
        values[_type_key(source.id)] = source.type
    for key, value in values.items():
        if overwrite or key not in st.session_state:
            st.session_state[key] = value


# --- Widget callbacks ---


def _on_source_type_change(store: GeneratorStore, source_id: str) -> None:
    store.update_profile_source(source_id, new_type=st.session_state[_type_key(source_id)])


def _on_source_value_change(store: GeneratorStore, source_id: str) -> None:
    store.update_profile_source(source_id, new_value=st.session_state[_value_key(source_id)])


def _on_summary_change(store: GeneratorStore) -> None:
    store.update_manual_summary(st.session_state.manual_summary)


def _on_job_type_change(store: GeneratorStore) -> None:
    store.update_job_input_type(st.session_state.job_input_type)
    st.session_state.job_target_value = ""


def _on_job_value_change(store: GeneratorStore) -> None:
    store.update_job_target_value(st.session_state.job_target_value)


def _on_fill_example(store: GeneratorStore) -> None:
    store.fill_example_data()
    _sync_widgets(store)


def _on_clear(store: GeneratorStore) -> None:
    store.clear_all_data()
    _sync_widgets(store)


def start_over(store: GeneratorStore) -> None:
    """Clear the wizard and bring the generator back."""
    store.generate_another()
    _sync_widgets(store)


# --- Rendering ---


def _option_name(source_type: str) -> str:
    option = get_profile_option(source_type)
    return option.name if option else source_type


def render_step_indicator(store: GeneratorStore) -> None:
    """Show the wizard steps with the current one highlighted."""
    cols = st.columns(store.total_steps)
    for col, step in zip(cols, store.steps, strict=True):
        with col:
            label = f"{step.id}. {step.title}"
            if step.id == store.state.current_step:
                css_class = "wizard-step active"
            elif step.id < store.state.current_step:
                css_class = "wizard-step done"
            else:
                css_class = "wizard-step"
            st.markdown(f'<div class="{css_class}">{label}</div>', unsafe_allow_html=True)


def render_profile_sources(store: GeneratorStore) -> None:
    """Step 1: profile links and the manual summary."""
    st.markdown("**Profile sources**")
    st.caption("Add the profiles the CV should be built from. GitHub and LinkedIn once each.")

    for source in store.state.profile_sources:
        options = [option.type for option in store.available_profile_options(source.id)]
        if source.type not in options:
            options.append(source.type)
        option = get_profile_option(source.type)

        type_col, value_col, remove_col = st.columns([2, 6, 1], vertical_alignment="bottom")
        with type_col:
            st.selectbox(
                "Type",
                options=options,
                format_func=_option_name,
                key=_type_key(source.id),
                on_change=_on_source_type_change,
                args=(store, source.id),
                label_visibility="collapsed",
            )
        with value_col:
            st.text_input(
                "Value",
                placeholder=option.placeholder if option else "",
                key=_value_key(source.id),
                on_change=_on_source_value_change,
                args=(store, source.id),
                label_visibility="collapsed",
            )
        with remove_col:
            st.button(
                ":material/delete:",
                key=f"remove_{source.id}",
                help="Remove this source",
                on_click=store.remove_profile_source,
                args=(source.id,),
            )

    st.button(":material/add: Add source", on_click=store.add_profile_source)

    st.text_area(
        "Professional summary (optional)",
        placeholder="Describe your experience, strengths and goals...",
        height=150,
        key="manual_summary",
        on_change=_on_summary_change,
        args=(store,),
    )


def render_job_target(store: GeneratorStore) -> None:
    """Step 2: the job to tailor the CV for."""
    st.radio(
        "Job input",
        options=["text", "url"],
        format_func=lambda t: "Paste description" if t == "text" else "Job posting URL",
        horizontal=True,
        key="job_input_type",
        on_change=_on_job_type_change,
        args=(store,),
    )

    if store.state.job_input_type == "url":
        st.text_input(
            "Job posting URL",
            placeholder=EXAMPLE_JOB_URL,
            key="job_target_value",
            on_change=_on_job_value_change,
            args=(store,),
        )
    else:
        job_text = st.text_area(
            "Job description",
            placeholder="Paste the job description here...",
            height=300,
            key="job_target_value",
            on_change=_on_job_value_change,
            args=(store,),
        )
        if job_text:
            st.caption(f"{len(job_text.split())} words")


def _run_generation(store: GeneratorStore) -> None:
    """Run the simulated generation with a live progress bar."""
    progress_bar = st.progress(0, text="Starting...")

    def on_progress(update: GenerationProgress) -> None:
        progress_bar.progress(int(update.percent), text=update.text)

    with st.spinner("Generating your CV..."):
        store.start_generation(on_progress=on_progress)
    st.rerun()


def render_success(store: GeneratorStore) -> None:
    st.success(store.state.generation_step_text or "CV generated successfully!")
    view_col, again_col, _ = st.columns([1, 1, 2])
    with view_col:
        st.button(
            "View generated CV",
            type="primary",
            use_container_width=True,
            on_click=store.view_generated_cv,
        )
    with again_col:
        st.button(
            "Generate another",
            use_container_width=True,
            on_click=start_over,
            args=(store,),
        )


def render_generator(store: GeneratorStore) -> None:
    """Render the whole wizard."""
    _sync_widgets(store, overwrite=False)
    state = store.state

    st.subheader("AI CV Generator")
    fill_col, clear_col, _ = st.columns([1, 1, 3])
    with fill_col:
        st.button(
            "Fill example data",
            use_container_width=True,
            on_click=_on_fill_example,
            args=(store,),
        )
    with clear_col:
        st.button("Clear all", use_container_width=True, on_click=_on_clear, args=(store,))

    if state.show_success:
        render_success(store)
        return

    render_step_indicator(store)

    with st.container(border=True):
        step_def = store.current_step_definition
        if step_def:
            st.markdown(f"#### {material_icon(step_def.icon)} {step_def.title}")
        if state.current_step == 1:
            render_profile_sources(store)
        else:
            render_job_target(store)

    if state.error_message:
        st.error(state.error_message)
    elif store.is_next_button_disabled:
        st.caption("Complete the required fields to continue.")

    back_col, _, next_col = st.columns([1, 2, 1])
    with back_col:
        st.button(
            "Back",
            use_container_width=True,
            disabled=state.current_step <= 1,
            on_click=store.prev_step,
        )
    with next_col:
        if store.is_last_step:
            if st.button("Generate CV", type="primary", use_container_width=True):
                _run_generation(store)
        else:
            st.button(
                "Next",
                type="primary",
                use_container_width=True,
                on_click=store.next_step,
            )
