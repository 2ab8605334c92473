import pytest

from dynmig.modal import ModalContentKind
from dynmig.prefix_mapping import (
    PrefixMappingAdd,
    PrefixMappingDelete,
    PrefixMappingModal,
)
from dynmig.terminal import Canvas, Key, MouseEvent, MouseKind, Rect


def _screen(modal):
    canvas = Canvas(80, 20)
    modal.render_content(canvas, canvas.area)
    return "\n".join(canvas.row_text(y) for y in range(canvas.height))


def _type(modal, text):
    for char in text:
        modal.handle_key(char)


@pytest.fixture
def modal():
    return PrefixMappingModal({"zz_": "aa_", "cgk_": "nrq_"})


def test_mapping_list_is_sorted_by_source(modal):
    assert modal.mapping_list() == [("cgk_", "nrq_"), ("zz_", "aa_")]


def test_down_and_up_wrap(modal):
    modal.handle_key(Key.DOWN)
    assert modal.selected_index == 1
    modal.handle_key("j")
    assert modal.selected_index == 0
    modal.handle_key("k")
    assert modal.selected_index == 1
    modal.handle_key(Key.UP)
    assert modal.selected_index == 0


def test_navigation_on_empty_does_nothing():
    empty = PrefixMappingModal({})
    result = empty.handle_key(Key.DOWN)
    assert result.kind is ModalContentKind.NONE
    assert empty.selected_index == 0


def test_delete_selected_closes_with_sorted_entry(modal):
    modal.handle_key(Key.DOWN)
    result = modal.handle_key("d")
    assert result.kind is ModalContentKind.CLOSE
    assert modal.take_action() == PrefixMappingDelete("zz_")
    assert modal.take_action() is None


def test_delete_on_empty_gives_no_action():
    empty = PrefixMappingModal({})
    assert empty.handle_key("d").kind is ModalContentKind.NONE
    assert empty.take_action() is None


def test_add_flow(modal):
    modal.handle_key("n")
    _type(modal, "abc_")
    assert modal.handle_key(Key.ENTER).kind is ModalContentKind.NONE
    _type(modal, "xyz_")
    result = modal.handle_key(Key.ENTER)
    assert result.kind is ModalContentKind.CLOSE
    assert modal.take_action() == PrefixMappingAdd("abc_", "xyz_")


def test_enter_with_empty_buffer_stays(modal):
    modal.handle_key("n")
    assert modal.handle_key(Key.ENTER).kind is ModalContentKind.NONE
    assert "Source Prefix" in _screen(modal)
    _type(modal, "a")
    modal.handle_key(Key.ENTER)
    assert modal.handle_key(Key.ENTER).kind is ModalContentKind.NONE
    assert modal.take_action() is None


def test_backspace_edits_buffer(modal):
    modal.handle_key("n")
    _type(modal, "cgx")
    modal.handle_key(Key.BACKSPACE)
    _type(modal, "k_")
    assert modal.input_buffer == "cgk_"


def test_escape_in_input_returns_to_list(modal):
    modal.handle_key("n")
    _type(modal, "abc")
    assert modal.handle_key(Key.ESC).kind is ModalContentKind.NONE
    assert modal.input_buffer == ""
    assert modal.handle_key("d").kind is ModalContentKind.CLOSE
    assert modal.take_action() == PrefixMappingDelete("cgk_")


def test_escape_in_list_closes(modal):
    assert modal.handle_key(Key.ESC).kind is ModalContentKind.CLOSE


def test_render_list(modal):
    text = _screen(modal)
    assert "Prefix Mappings" in text
    assert "► cgk_" in text
    assert "2 mapping(s)" in text


def test_render_empty():
    text = _screen(PrefixMappingModal({}))
    assert "No prefix mappings defined. Press 'n' to add one." in text
    assert "No mappings" in text


def test_render_target_prompt(modal):
    modal.handle_key("n")
    _type(modal, "cgk_")
    modal.handle_key(Key.ENTER)
    text = _screen(modal)
    assert "Target Prefix" in text
    assert "Mapping 'cgk_' to:" in text


def test_title_and_mouse(modal):
    assert modal.title() == "Prefix Mappings"
    event = MouseEvent(MouseKind.DOWN, 1, 1)
    assert modal.handle_mouse(event, Rect(0, 0, 10, 10)).kind is ModalContentKind.NONE