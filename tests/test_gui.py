"""Integration tests driving the Streamlit app with AppTest."""

import copy
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from streamlit.testing.v1 import AppTest

GUI = Path(__file__).resolve().parents[1] / "app" / "gui.py"


@pytest.fixture
def at():
    app = AppTest.from_file(str(GUI), default_timeout=30)
    app.run()
    assert not app.exception
    return app


def _preview(at):
    return BeautifulSoup(at.session_state["preview_html"], "html.parser")


@pytest.mark.integration
def test_initial_preview(at):
    soup = _preview(at)
    assert "Mario Rossi" in soup.get_text()
    assert soup.select_one(".cv-modern") is not None


@pytest.mark.integration
def test_editing_field_updates_preview(at):
    at.text_input(key="personal_name").input("Jane Doe").run()

    assert at.session_state["cv_data"]["personal"]["name"] == "Jane Doe"
    assert "Jane Doe" in _preview(at).get_text()


@pytest.mark.integration
def test_editing_entry_updates_preview(at):
    item_id = at.session_state["cv_data"]["experience"][0]["id"]
    at.text_input(key=f"experience_{item_id}_company").input("Acme Corp").run()

    assert "Acme Corp" in _preview(at).get_text()


@pytest.mark.integration
def test_add_and_remove_experience(at):
    original = dict(at.session_state["cv_data"]["experience"][0])

    at.button(key="add_experience").click().run()
    items = at.session_state["cv_data"]["experience"]
    assert len(items) == 2
    assert items[1] == original
    new_id = items[0]["id"]
    assert at.text_input(key=f"experience_{new_id}_role").value == "New Role"

    at.button(key=f"remove_experience_{new_id}").click().run()
    assert at.session_state["cv_data"]["experience"] == [original]
    assert not at.exception


@pytest.mark.integration
def test_add_and_remove_education(at):
    original = dict(at.session_state["cv_data"]["education"][0])

    at.button(key="add_education").click().run()
    assert len(at.session_state["cv_data"]["education"]) == 2

    at.button(key=f"remove_education_{original['id']}").click().run()
    items = at.session_state["cv_data"]["education"]
    assert len(items) == 1
    assert items[0]["degree"] == "Degree"


@pytest.mark.integration
def test_theme_switch_keeps_data(at):
    before = copy.deepcopy(at.session_state["cv_data"])

    at.radio(key="theme_template").set_value("classic").run()
    at.selectbox(key="theme_font").set_value("mono").run()
    at.color_picker(key="theme_color").pick("#7c3aed").run()

    config = at.session_state["cv_config"]
    assert config["template"] == "classic"
    assert config["font"] == "mono"
    assert config["color"] == "#7c3aed"
    assert at.session_state["cv_data"] == before

    cv = _preview(at).select_one(".cv")
    assert "cv-classic" in cv["class"]
    assert "Roboto Mono" in cv["style"]


@pytest.mark.integration
def test_color_swatch(at):
    at.button(key="swatch_059669").click().run()

    assert at.session_state["cv_config"]["color"] == "#059669"
    assert at.color_picker(key="theme_color").value == "#059669"


@pytest.mark.integration
def test_scale_slider_and_zoom_cap(at):
    at.slider(key="theme_scale").set_value(1.2).run()

    assert at.session_state["cv_config"]["scale"] == 1.2
    zoom = _preview(at).select_one("#zoom-badge").get_text()
    assert int(zoom.rstrip("%")) <= 100


@pytest.mark.integration
def test_reset_needs_confirmation(at):
    at.text_input(key="personal_name").input("Jane Doe").run()

    at.button(key="reset").click().run()
    assert at.session_state["confirm_reset"] is True
    assert at.session_state["cv_data"]["personal"]["name"] == "Jane Doe"

    at.button(key="reset_cancel").click().run()
    assert at.session_state["confirm_reset"] is False
    assert at.session_state["cv_data"]["personal"]["name"] == "Jane Doe"


@pytest.mark.integration
def test_reset_restores_initial_state(at):
    at.text_input(key="personal_name").input("Jane Doe").run()
    at.radio(key="theme_template").set_value("minimal").run()
    at.button(key="add_experience").click().run()

    at.button(key="reset").click().run()
    at.button(key="reset_confirm").click().run()

    assert at.session_state["cv_data"]["personal"]["name"] == "Mario Rossi"
    assert len(at.session_state["cv_data"]["experience"]) == 1
    assert at.session_state["cv_config"]["template"] == "modern"
    assert at.text_input(key="personal_name").value == "Mario Rossi"
    assert at.radio(key="theme_template").value == "modern"


@pytest.mark.integration
def test_print_request_is_one_shot(at):
    at.button(key="print").click().run()
    assert "window.print()" in at.session_state["preview_html"]

    at.run()
    assert "window.print()" not in at.session_state["preview_html"]


@pytest.mark.integration
def test_removing_entry_drops_its_widget_keys(at):
    at.button(key="add_education").click().run()
    new_id = at.session_state["cv_data"]["education"][0]["id"]
    assert f"education_{new_id}_degree" in at.session_state

    at.button(key=f"remove_education_{new_id}").click().run()

    assert f"education_{new_id}_degree" not in at.session_state
    assert f"education_{new_id}_school" not in at.session_state


@pytest.mark.integration
def test_remove_photo_empties_uploader(at):
    at.session_state["cv_data"]["personal"]["photo"] = "data:image/png;base64,iVBORw0KGgo="
    at.session_state["processed_photo"] = "me.png:8"
    at.run()
    round_before = at.session_state["upload_round"]

    at.button(key="remove_photo").click().run()

    assert at.session_state["cv_data"]["personal"]["photo"] is None
    assert at.session_state["processed_photo"] is None
    assert at.session_state["upload_round"] == round_before + 1
    assert not at.exception
