import pytest

from dynmig.confirmation import ConfirmationAction, ConfirmationDialog
from dynmig.modal import ModalAction, ModalComponent, ModalContentAction
from dynmig.terminal import Canvas, Key, MouseEvent, MouseKind, Rect


def make_dialog():
    return ConfirmationDialog("Delete mapping", "Really delete this mapping?")


def test_no_action_initially():
    assert make_dialog().take_action() is None


def test_enter_defaults_to_cancel():
    dialog = make_dialog()
    assert dialog.handle_key(Key.ENTER) == ModalContentAction.close()
    assert dialog.take_action() is ConfirmationAction.CANCELLED


@pytest.mark.parametrize("key", [Key.LEFT, Key.RIGHT, Key.TAB])
def test_switching_button_then_enter_confirms(key):
    dialog = make_dialog()
    assert dialog.handle_key(key) == ModalContentAction.none()
    dialog.handle_key(Key.ENTER)
    assert dialog.take_action() is ConfirmationAction.CONFIRMED


def test_switching_twice_returns_to_cancel():
    dialog = make_dialog()
    dialog.handle_key(Key.LEFT)
    dialog.handle_key(Key.RIGHT)
    dialog.handle_key(Key.ENTER)
    assert dialog.take_action() is ConfirmationAction.CANCELLED


@pytest.mark.parametrize("key", ["y", "Y"])
def test_yes_keys_confirm(key):
    dialog = make_dialog()
    assert dialog.handle_key(key) == ModalContentAction.close()
    assert dialog.take_action() is ConfirmationAction.CONFIRMED


@pytest.mark.parametrize("key", ["n", "N", Key.ESC])
def test_no_keys_cancel(key):
    dialog = make_dialog()
    assert dialog.handle_key(key) == ModalContentAction.close()
    assert dialog.take_action() is ConfirmationAction.CANCELLED


def test_other_keys_do_nothing():
    dialog = make_dialog()
    assert dialog.handle_key("x") == ModalContentAction.none()
    assert dialog.take_action() is None


def test_take_action_clears():
    dialog = make_dialog()
    dialog.handle_key("y")
    dialog.take_action()
    assert dialog.take_action() is None


def test_title_is_dialog_title():
    assert make_dialog().title() == "Delete mapping"


def test_mouse_does_nothing():
    dialog = make_dialog()
    event = MouseEvent(MouseKind.DOWN, 1, 1)
    assert dialog.handle_mouse(event, Rect(0, 0, 10, 10)) == ModalContentAction.none()


def test_default_button_labels_rendered():
    dialog = make_dialog()
    canvas = Canvas(40, 8)
    dialog.render_content(canvas, Rect(0, 0, 40, 8))
    rows = [canvas.row_text(y) for y in range(8)]
    assert any("Really delete this mapping?" in row for row in rows)
    assert any("Yes" in row and "No" in row for row in rows)


def test_custom_button_labels_rendered():
    dialog = make_dialog().with_buttons("Proceed", "Abort")
    canvas = Canvas(40, 8)
    dialog.render_content(canvas, Rect(0, 0, 40, 8))
    rows = "".join(canvas.row_text(y) for y in range(8))
    assert "Proceed" in rows
    assert "Abort" in rows


def test_inside_modal_confirm_closes():
    dialog = make_dialog()
    modal = ModalComponent(dialog)
    assert modal.handle_key("y") == ModalAction.close()
    assert dialog.take_action() is ConfirmationAction.CONFIRMED