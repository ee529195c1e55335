"""Streamlit frontend for the Prompt Console.

Provides a UI for browsing and editing the prompt catalog, viewing
version history, and comparing a prompt across two models.
"""

import logging

import streamlit as st

from prompt_console.api import Prompt, PromptAPIClient, PromptAPIError, PromptCreate, PromptUpdate
from prompt_console.api.forms import add_meta, add_tag, remove_meta, remove_tag
from prompt_console.core.config import get_settings
from prompt_console.core.factory import ComponentFactory
from prompt_console.core.logging_config import setup_logging
from prompt_console.playground import PlaygroundSession
from prompt_console.playground.session import NotifyLevel
from prompt_console.strategies.catalog import (
    KNOWN_MODELS,
    ModelInfo,
    collect_tags,
    filter_prompts,
    model_label,
)

# Page config
st.set_page_config(
    page_title="Prompt Console",
    page_icon="🧪",
    layout="wide",
    initial_sidebar_state="expanded",
)

settings = get_settings()
setup_logging(settings)
logger = logging.getLogger(__name__)


# =============================================================================
# Notifications
# =============================================================================


def notify(level: NotifyLevel, title: str, message: str) -> None:
    """Show a notification in the page."""
    text = f"**{title}**: {message}"
    match level:
        case "success":
            st.success(text)
        case "warning":
            st.warning(text)
        case "error":
            st.error(text)
        case _:
            st.info(text)


def flash(level: NotifyLevel, title: str, message: str) -> None:
    """Queue a notification to show after the next rerun."""
    st.session_state.flash = (level, title, message)


def show_flash() -> None:
    if "flash" in st.session_state:
        notify(*st.session_state.pop("flash"))


def report_error(error: PromptAPIError) -> None:
    """Show a backend failure, with the backend detail when there is one."""
    notify("error", "Error", str(error))
    if error.detail:
        st.caption(error.detail)


# =============================================================================
# Cached Resources
# =============================================================================


@st.cache_resource
def get_factory() -> ComponentFactory:
    return ComponentFactory(settings)


def load_prompts(client: PromptAPIClient) -> list[Prompt]:
    try:
        return client.list_prompts()
    except PromptAPIError as e:
        report_error(e)
        return []


def load_models(client: PromptAPIClient) -> dict[str, ModelInfo]:
    """Fetch the model catalog, falling back to the built-in one."""
    if "model_catalog" not in st.session_state:
        try:
            catalog = client.get_available_models()
        except PromptAPIError as e:
            logger.warning(f"Using built-in model catalog: {e}")
            catalog = {}
        st.session_state.model_catalog = catalog or dict(KNOWN_MODELS)
    return st.session_state.model_catalog


# =============================================================================
# UI Components
# =============================================================================


def render_sidebar(client: PromptAPIClient) -> None:
    """Render the sidebar with connection status and seeding.

    Args:
        client: The API client instance.
    """
    with st.sidebar:
        st.title("🧪 Prompt Console")

        st.divider()

        # Connection status
        if client.health_check():
            st.success("✅ API Connected")
        else:
            st.error("❌ API Disconnected")
            st.info(f"API URL: {settings.api_base_url}")

        st.divider()

        st.subheader("Catalog")
        if st.button("🌱 Seed Database", use_container_width=True):
            try:
                client.seed_database()
                notify("success", "Success", "Database seeded successfully")
                st.session_state.pop("model_catalog", None)
            except PromptAPIError as e:
                report_error(e)

        st.divider()

        st.subheader("Templates")
        st.markdown("""
        Write variables as `{{variable_name}}` using letters,
        digits and underscores. The playground shows one input
        per variable and substitutes the values before sending
        the prompt to the models.
        """)

        st.divider()

        st.caption(f"API: `{settings.api_base_url}`")


def render_prompt_card(client: PromptAPIClient, prompt: Prompt) -> None:
    """Render one prompt with its tags, metadata and actions."""
    with st.expander(f"**{prompt.name}** · v{prompt.version}"):
        if prompt.description:
            st.write(prompt.description)
        st.code(prompt.text, language="text")

        if prompt.tags:
            st.write(" ".join(f"`{name}`" for name in prompt.tag_names))
        if prompt.meta:
            st.json(prompt.meta)

        col1, col2, col3 = st.columns(3)

        with col1:
            if st.button("✏️ Edit", key=f"edit_{prompt.id}", use_container_width=True):
                start_editing(prompt)
                st.rerun()

        with col2:
            show_versions = st.toggle("🕑 Versions", key=f"versions_{prompt.id}")

        with col3:
            confirm = st.checkbox("Confirm delete", key=f"confirm_{prompt.id}")
            if st.button(
                "🗑️ Delete",
                key=f"delete_{prompt.id}",
                disabled=not confirm,
                use_container_width=True,
            ):
                try:
                    client.delete_prompt(prompt.id)
                    flash("success", "Success", "Prompt deleted successfully")
                    st.rerun()
                except PromptAPIError as e:
                    report_error(e)

        if show_versions:
            render_version_history(prompt)


def render_version_history(prompt: Prompt) -> None:
    """Render the stored versions of a prompt, newest first."""
    st.subheader(f"Version History: {prompt.name}")

    if not prompt.versions:
        st.info("No version history available")
        return

    for version in sorted(prompt.versions, key=lambda v: v.version, reverse=True):
        st.markdown(
            f"**Version {version.version}** · "
            f"{version.created_at.strftime('%Y-%m-%d %H:%M')}"
        )
        st.code(version.text, language="text")
        if version.meta:
            st.json(version.meta)


def render_prompt_list(client: PromptAPIClient) -> None:
    """Render search, tag filter and the prompt list.

    Args:
        client: The API client instance.
    """
    st.subheader("📚 Prompts")

    col1, col2 = st.columns([3, 1])

    with col1:
        search = st.text_input(
            "Search",
            placeholder="Search prompts...",
            label_visibility="collapsed",
        )

    # Tag options come from the unfiltered catalog
    all_prompts = load_prompts(client)
    all_tags = collect_tags(all_prompts)

    with col2:
        tag = st.selectbox(
            "Tag",
            options=["", *all_tags],
            format_func=lambda t: t or "All tags",
            label_visibility="collapsed",
        )

    prompts = filter_prompts(all_prompts, search=search, tag=tag)

    if not prompts:
        st.info("No prompts found. Create a prompt or seed the database to get started.")
        return

    st.caption(f"{len(prompts)} prompt(s)")
    for prompt in prompts:
        render_prompt_card(client, prompt)


def start_editing(prompt: Prompt | None) -> None:
    """Load a prompt (or a blank form) into the editor state."""
    st.session_state.editing_id = prompt.id if prompt else None
    st.session_state.form_name = prompt.name if prompt else ""
    st.session_state.form_description = (prompt.description or "") if prompt else ""
    st.session_state.form_text = prompt.text if prompt else ""
    st.session_state.form_tags = prompt.tag_names if prompt else []
    st.session_state.form_meta = dict(prompt.meta or {}) if prompt else {}


def render_prompt_form(client: PromptAPIClient) -> None:
    """Render the create/edit prompt form.

    Args:
        client: The API client instance.
    """
    if "editing_id" not in st.session_state or st.session_state.pop("reset_form", False):
        start_editing(None)

    editing_id = st.session_state.editing_id
    st.subheader("✏️ Edit Prompt" if editing_id else "➕ New Prompt")

    if editing_id and st.button("Start a new prompt instead"):
        start_editing(None)
        st.rerun()

    st.text_input("Name", key="form_name")
    st.text_area("Description", key="form_description", height=80)
    st.text_area(
        "Prompt Text",
        key="form_text",
        height=200,
        help="Use {{variable_name}} for values filled in at test time",
    )

    variables = get_factory().get_resolver().extract(st.session_state.form_text)
    if variables:
        st.caption("Variables: " + ", ".join(f"`{name}`" for name in variables))

    # Tags
    st.write("**Tags**")
    col1, col2 = st.columns([3, 1])
    with col1:
        tag_input = st.text_input("Tag", key="tag_input", label_visibility="collapsed")
    with col2:
        if st.button("Add Tag", use_container_width=True):
            st.session_state.form_tags = add_tag(st.session_state.form_tags, tag_input)

    for tag in st.session_state.form_tags:
        if st.button(f"✕ {tag}", key=f"remove_tag_{tag}"):
            st.session_state.form_tags = remove_tag(st.session_state.form_tags, tag)
            st.rerun()

    # Metadata
    st.write("**Metadata**")
    col1, col2, col3 = st.columns([2, 2, 1])
    with col1:
        meta_key = st.text_input("Key", key="meta_key")
    with col2:
        meta_value = st.text_input("Value", key="meta_value")
    with col3:
        st.write("")
        st.write("")
        if st.button("Add", use_container_width=True):
            st.session_state.form_meta = add_meta(st.session_state.form_meta, meta_key, meta_value)

    for key, value in st.session_state.form_meta.items():
        if st.button(f"✕ {key}: {value}", key=f"remove_meta_{key}"):
            st.session_state.form_meta = remove_meta(st.session_state.form_meta, key)
            st.rerun()

    st.divider()

    if st.button("💾 Save", type="primary"):
        fields = {
            "name": st.session_state.form_name,
            "description": st.session_state.form_description,
            "text": st.session_state.form_text,
            "tags": st.session_state.form_tags,
            "meta": st.session_state.form_meta,
        }
        action = "update" if editing_id else "create"
        try:
            if editing_id:
                client.update_prompt(editing_id, PromptUpdate(**fields))
            else:
                client.create_prompt(PromptCreate(**fields))
        except PromptAPIError as e:
            report_error(e)
            return
        except ValueError as e:
            notify("error", "Error", f"Failed to {action} prompt: {e}")
            return

        flash("success", "Success", f"Prompt {action}d successfully")
        st.session_state.reset_form = True
        st.rerun()


def get_playground_session() -> PlaygroundSession:
    if "playground" not in st.session_state:
        st.session_state.playground = get_factory().create_playground_session(notify=notify)
    return st.session_state.playground


def render_model_panel(
    catalog: dict[str, ModelInfo],
    model_id: str,
    key: str,
    response: str | None,
) -> str:
    """Render one model panel and return the selected model id."""
    options = list(catalog)
    if model_id not in catalog:
        options.insert(0, model_id)

    selected = st.selectbox(
        "Model",
        options=options,
        index=options.index(model_id),
        format_func=lambda m: model_label(catalog[m]) if m in catalog else m,
        key=key,
        label_visibility="collapsed",
    )

    info = catalog.get(selected)
    if info:
        if info.description:
            st.caption(info.description)
        col1, col2, col3 = st.columns(3)
        col1.metric("Context", info.context_window or "-")
        col2.metric("Input Pricing", info.input_price or "-")
        col3.metric("Output Pricing", info.output_price or "-")

    st.divider()

    if response:
        st.code(response, language="text")
    else:
        st.info("Run a test to see the response here.")

    return selected


def render_playground(client: PromptAPIClient) -> None:
    """Render the side-by-side playground.

    Args:
        client: The API client instance.
    """
    st.subheader("⚡ Playground")

    session = get_playground_session()
    prompts = load_prompts(client)
    catalog = load_models(client)

    if not prompts:
        st.info("No prompts available. Create one first.")
        return

    by_id = {prompt.id: prompt for prompt in prompts}

    col1, col2, col3 = st.columns([3, 1, 1])

    with col1:
        current_id = session.prompt.id if session.prompt else None
        prompt_id = st.selectbox(
            "Select Prompt",
            options=list(by_id),
            index=list(by_id).index(current_id) if current_id in by_id else None,
            format_func=lambda pid: by_id[pid].name,
            placeholder="Choose a prompt",
        )

    selected = by_id.get(prompt_id) if prompt_id is not None else None
    if selected is not None:
        session.refresh_prompt(selected)

    with col2:
        if selected is not None:
            versions = sorted({selected.version, *(v.version for v in selected.versions)})
            version = st.selectbox(
                "Version",
                options=versions,
                index=versions.index(session.version or selected.version),
            )
            if version != (session.version or selected.version):
                session.select_version(version)

    with col3:
        session.sync_models = st.toggle(
            "Sync",
            value=session.sync_models,
            help="Call only the left model and show its response in both panels",
        )

    if session.variables:
        st.write("**Variables**")
        for name, value in list(session.variables.items()):
            session.set_variable(name, st.text_input(name, value=value, key=f"var_{name}"))

    with st.expander("👀 Preview", expanded=False):
        preview = session.preview()
        st.code(preview.text, language="text")
        if preview.missing:
            st.warning("Empty variables: " + ", ".join(preview.missing))

    if st.button("⚡ Test Prompt", type="primary", disabled=selected is None, use_container_width=True):
        with st.spinner("Generating response..."):
            session.run(client)

    left, right = st.columns(2)
    with left:
        session.left_model = render_model_panel(
            catalog, session.left_model, "left_model", session.responses.get("left")
        )
    with right:
        session.right_model = render_model_panel(
            catalog, session.right_model, "right_model", session.responses.get("right")
        )


# =============================================================================
# Main App
# =============================================================================


def main() -> None:
    """Main application entry point."""
    client = get_factory().get_api_client()

    render_sidebar(client)

    st.title("Prompt Console")
    st.markdown("Manage prompt templates and compare them across models")

    show_flash()

    tab1, tab2, tab3 = st.tabs(["Prompts", "New / Edit", "Playground"])

    with tab1:
        render_prompt_list(client)

    with tab2:
        render_prompt_form(client)

    with tab3:
        render_playground(client)


if __name__ == "__main__":
    main()
