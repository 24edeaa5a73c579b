import streamlit as st

# MUST be the first Streamlit command
st.set_page_config(layout="wide", page_title="CV Builder")

import logging

import streamlit.components.v1 as components

from config import PREVIEW_WIDTH, SERVER_HOST, configure_logging
from editor import (
    add_item,
    clear_photo,
    remove_item,
    reset_state,
    set_photo,
    set_skills,
    update_item,
    update_personal,
    update_theme,
)
from generator import render_page
from photo import image_to_data_uri
from preview import page_geometry
from print_server import get_server_status, network_url, serve_html_temporarily
from schema_resume import initial_config, initial_data
from themes import COLORS, FONTS, SCALE_MAX, SCALE_MIN, SCALE_STEP, TEMPLATES, font_label, template_label
from validator import page_stats, validate_page

configure_logging()
log = logging.getLogger("gui")

# Session-state keys owned by editor widgets; cleared on reset so the
# widgets pick their values up from the fresh data again
WIDGET_PREFIXES = ("personal_", "experience_", "education_", "skills_", "theme_")

PERSONAL_LABELS = {
    "name": "Full name",
    "title": "Job title",
    "email": "Email",
    "phone": "Phone",
    "location": "City / address",
}

# Initialize session state variables
if "cv_data" not in st.session_state:
    st.session_state.cv_data = initial_data()
if "cv_config" not in st.session_state:
    st.session_state.cv_config = initial_config()
if "confirm_reset" not in st.session_state:
    st.session_state.confirm_reset = False
if "print_requested" not in st.session_state:
    st.session_state.print_requested = False
# Marker of the uploaded photo already copied into the CV data
if "processed_photo" not in st.session_state:
    st.session_state.processed_photo = None
# Bumped to hand the file uploader a fresh, empty key
if "upload_round" not in st.session_state:
    st.session_state.upload_round = 0
if "print_url" not in st.session_state:
    st.session_state.print_url = None
if "preview_html" not in st.session_state:
    st.session_state.preview_html = ""

data = st.session_state.cv_data
config = st.session_state.cv_config

st.markdown("""
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}
div[data-testid="stVerticalBlockBorderWrapper"] { background: #f8fafc; }
</style>
""", unsafe_allow_html=True)


# --- Helpers ---
def bound(key: str, value) -> str:
    """Seed a widget's session-state value once and hand back its key."""
    if key not in st.session_state:
        st.session_state[key] = value
    return key


def upload_marker(upload):
    return None if upload is None else f"{upload.name}:{upload.size}"


def clear_uploader():
    st.session_state.upload_round += 1
    st.session_state.processed_photo = None


def drop_widget_keys(prefixes):
    for key in list(st.session_state.keys()):
        if key.startswith(prefixes):
            del st.session_state[key]


# --- Callbacks ---
def on_reset_request():
    st.session_state.confirm_reset = True


def on_reset_cancel():
    st.session_state.confirm_reset = False


def on_reset_confirm():
    st.session_state.cv_data, st.session_state.cv_config = reset_state()
    drop_widget_keys(WIDGET_PREFIXES)
    clear_uploader()
    st.session_state.confirm_reset = False
    st.session_state.print_url = None


def on_print():
    st.session_state.print_requested = True


def on_add(section: str):
    add_item(st.session_state.cv_data, section)


def on_remove(section: str, item_id: str):
    remove_item(st.session_state.cv_data, section, item_id)
    drop_widget_keys(f"{section}_{item_id}_")


def on_remove_photo():
    clear_photo(st.session_state.cv_data)
    clear_uploader()


def on_swatch(color: str):
    update_theme(st.session_state.cv_config, color=color)
    st.session_state.theme_color = color


# --- Header ---
col_title, col_reset, col_print = st.columns([5, 1, 1])
with col_title:
    st.title("📄 CV Builder")
with col_reset:
    st.button("↺ Reset", key="reset", on_click=on_reset_request)
with col_print:
    st.button("🖨️ Print / PDF", key="print", type="primary", on_click=on_print,
              help="Opens the browser print dialog; choose 'Save as PDF' to export")

if st.session_state.confirm_reset:
    st.warning("Clear everything and start over?")
    col_yes, col_no = st.columns(2)
    with col_yes:
        st.button("✅ Confirm reset", key="reset_confirm", type="primary", on_click=on_reset_confirm)
    with col_no:
        st.button("❌ Cancel", key="reset_cancel", on_click=on_reset_cancel)

col_editor, col_preview = st.columns([2, 3])

# --- Editor ---
with col_editor:
    tab_content, tab_design = st.tabs(["👤 Content", "🎨 Design"])

    with tab_content:
        # Photo
        st.markdown("#### 🖼️ Profile photo")
        upload = st.file_uploader("Upload photo", type=["png", "jpg", "jpeg", "gif", "webp"],
                                  key=f"photo_upload_{st.session_state.upload_round}")
        marker = upload_marker(upload)
        if upload is not None and marker != st.session_state.processed_photo:
            st.session_state.processed_photo = marker
            try:
                set_photo(data, image_to_data_uri(upload.getvalue(), upload.name, upload.type))
            except ValueError as e:
                log.warning("Rejected photo upload: %s", e)
                st.error(f"Could not use this photo: {e}")
        if data["personal"]["photo"]:
            st.markdown(
                f'<img src="{data["personal"]["photo"]}" alt="Profile" '
                f'style="width:64px;height:64px;border-radius:50%;object-fit:cover">',
                unsafe_allow_html=True,
            )
            st.button("Remove photo", key="remove_photo", on_click=on_remove_photo)

        # Personal info
        st.markdown("#### 🙍 Personal details")
        name = st.text_input(PERSONAL_LABELS["name"], key=bound("personal_name", data["personal"]["name"]))
        title = st.text_input(PERSONAL_LABELS["title"], key=bound("personal_title", data["personal"]["title"]))
        col_email, col_phone = st.columns(2)
        with col_email:
            email = st.text_input(PERSONAL_LABELS["email"], key=bound("personal_email", data["personal"]["email"]))
        with col_phone:
            phone = st.text_input(PERSONAL_LABELS["phone"], key=bound("personal_phone", data["personal"]["phone"]))
        location = st.text_input(PERSONAL_LABELS["location"],
                                 key=bound("personal_location", data["personal"]["location"]))
        summary = st.text_area("Professional profile", height=120,
                               key=bound("personal_summary", data["personal"]["summary"]))
        for field, value in (("name", name), ("title", title), ("email", email),
                             ("phone", phone), ("location", location), ("summary", summary)):
            update_personal(data, field, value)

        # Experience
        col_head, col_add = st.columns([3, 1])
        with col_head:
            st.markdown("#### 💼 Experience")
        with col_add:
            st.button("➕ Add", key="add_experience", on_click=on_add, args=("experience",))
        for item in data["experience"]:
            key = f"experience_{item['id']}"
            with st.container(border=True):
                col_role, col_rm = st.columns([5, 1])
                with col_role:
                    role = st.text_input("Role", key=bound(f"{key}_role", item["role"]))
                with col_rm:
                    st.button("🗑️", key=f"remove_{key}", on_click=on_remove,
                              args=("experience", item["id"]), help="Remove entry")
                company = st.text_input("Company", key=bound(f"{key}_company", item["company"]))
                col_from, col_to = st.columns(2)
                with col_from:
                    start = st.text_input("From", key=bound(f"{key}_start", item["start"]))
                with col_to:
                    end = st.text_input("To", key=bound(f"{key}_end", item["end"]))
                desc = st.text_area("Description", height=80, key=bound(f"{key}_desc", item["desc"]))
            for field, value in (("role", role), ("company", company), ("start", start),
                                 ("end", end), ("desc", desc)):
                update_item(data, "experience", item["id"], field, value)

        # Education
        col_head, col_add = st.columns([3, 1])
        with col_head:
            st.markdown("#### 🎓 Education")
        with col_add:
            st.button("➕ Add", key="add_education", on_click=on_add, args=("education",))
        for item in data["education"]:
            key = f"education_{item['id']}"
            with st.container(border=True):
                col_degree, col_rm = st.columns([5, 1])
                with col_degree:
                    degree = st.text_input("Degree", key=bound(f"{key}_degree", item["degree"]))
                with col_rm:
                    st.button("🗑️", key=f"remove_{key}", on_click=on_remove,
                              args=("education", item["id"]), help="Remove entry")
                school = st.text_input("School", key=bound(f"{key}_school", item["school"]))
                year = st.text_input("Year", key=bound(f"{key}_year", item["year"]))
            for field, value in (("degree", degree), ("school", school), ("year", year)):
                update_item(data, "education", item["id"], field, value)

        # Skills
        st.markdown("#### 🛠️ Skills")
        skills = st.text_area("Skills", height=90, key=bound("skills_text", data["skills"]))
        st.caption("Separate skills with a comma.")
        set_skills(data, skills)

    with tab_design:
        template = st.radio("Template", options=list(TEMPLATES), format_func=template_label,
                            horizontal=True, key=bound("theme_template", config["template"]))

        st.markdown("**Accent colour**")
        swatch_cols = st.columns(len(COLORS) + 1)
        for col, color in zip(swatch_cols, COLORS):
            with col:
                outline = "3px solid #1e293b" if config["color"] == color else "2px solid #fff"
                st.markdown(
                    f'<div style="width:28px;height:28px;border-radius:50%;background:{color};'
                    f'border:{outline};box-shadow:0 1px 2px rgba(0,0,0,.2)"></div>',
                    unsafe_allow_html=True,
                )
                st.button("Use", key=f"swatch_{color[1:]}", on_click=on_swatch, args=(color,))
        with swatch_cols[-1]:
            color = st.color_picker("Custom", key=bound("theme_color", config["color"]))

        font = st.selectbox("Font", options=list(FONTS), format_func=font_label,
                            key=bound("theme_font", config["font"]))

        scale = st.slider("Text size", min_value=SCALE_MIN, max_value=SCALE_MAX, step=SCALE_STEP,
                          key=bound("theme_scale", config["scale"]))
        update_theme(config, template=template, color=color, font=font, scale=scale)
        st.caption(f"Text size: {round(config['scale'] * 100)}%")

# --- Preview ---
with col_preview:
    geometry = page_geometry(PREVIEW_WIDTH)
    preview_html = render_page(data, config, auto_print=st.session_state.print_requested)
    if st.session_state.print_requested:
        log.info("Print dialog requested")
    st.session_state.print_requested = False
    st.session_state.preview_html = preview_html

    st.caption(f"🔍 Zoom {geometry.zoom_percent}% · {template_label(config['template'])} template")
    components.html(preview_html, height=geometry.frame_height, scrolling=True)

    page_html = render_page(data, config, preview=False)
    col_download, col_tab = st.columns(2)
    with col_download:
        st.download_button(
            label="📥 Download HTML",
            data=page_html,
            file_name="cv.html",
            mime="text/html",
            help="Standalone A4 page; open it and print to PDF",
        )
    with col_tab:
        if st.button("🌐 Printable tab", key="printable_tab"):
            try:
                st.session_state.print_url = serve_html_temporarily(
                    render_page(data, config, preview=False, auto_print=True))
            except OSError as e:
                st.warning(f"Could not start preview server: {e}")
        if st.session_state.print_url and not get_server_status()["running"]:
            st.session_state.print_url = None
        if st.session_state.print_url:
            st.link_button("Open printable page", st.session_state.print_url)
            if SERVER_HOST == "0.0.0.0":
                st.caption(f"Network URL: {network_url()}")

    with st.expander("📊 Page statistics"):
        stats = page_stats(page_html)
        col_size, col_words, col_entries = st.columns(3)
        col_size.metric("💾 Size", f"{stats['size_kb']:.1f} KB")
        col_words.metric("🔢 Words", f"{stats['words']:,}")
        col_entries.metric("🗂️ Entries", len(data["experience"]) + len(data["education"]))
        problems = validate_page(page_html)
        if problems:
            st.warning("\n".join(problems))
        else:
            st.success("Page structure and styles look valid.")
