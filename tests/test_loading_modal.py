from dynmig.fetch_progress import FetchProgress, FetchStatus
from dynmig.loading_modal import FRAMES, LoadingModal, LoadingState
from dynmig.terminal import Canvas


class _Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _screen(modal):
    canvas = Canvas(100, 40)
    modal.render(canvas, canvas.area)
    return "\n".join(canvas.row_text(y) for y in range(canvas.height))


def _modal(progress=None):
    clock = _Clock()
    return LoadingModal("Comparing entities", progress or FetchProgress(), clock=clock), clock


def test_fetching_screen_shows_title_spinner_and_message():
    modal, _ = _modal()
    text = _screen(modal)
    assert "Fetching Data" in text
    assert f"{FRAMES[0]} Loading..." in text
    assert "Comparing entities" in text


def test_update_waits_for_frame_duration():
    modal, clock = _modal()
    clock.now = 0.05
    modal.update()
    assert modal.current_frame == 0
    clock.now = 0.1
    modal.update()
    assert modal.current_frame == 1
    assert f"{FRAMES[1]} Loading..." in _screen(modal)


def test_frames_wrap_around():
    modal, clock = _modal()
    for _ in FRAMES:
        clock.now += 0.2
        modal.update()
    assert modal.current_frame == 0


def test_progress_symbols():
    progress = FetchProgress(
        source_fields=FetchStatus.completed(),
        target_fields=FetchStatus.failed("boom"),
        source_views=FetchStatus.in_progress(),
    )
    modal, _ = _modal(progress)
    text = _screen(modal)
    assert "✓ Source entity fields" in text
    assert "❌ Target entity fields" in text
    assert f"{FRAMES[0]} Source entity views" in text
    assert "◯ Example records" in text


def test_progress_changes_are_seen_on_next_render():
    progress = FetchProgress()
    modal, _ = _modal(progress)
    assert "◯ Target entity forms" in _screen(modal)
    with modal.lock:
        progress.target_forms = FetchStatus.completed()
    assert "✓ Target entity forms" in _screen(modal)


def test_failed_state_lists_errors():
    progress = FetchProgress(source_fields=FetchStatus.failed("timeout"))
    modal, _ = _modal(progress)
    modal.set_state(LoadingState.failure(progress.error_messages()))
    text = _screen(modal)
    assert "❌ Failed to fetch data" in text
    assert "• Source fields: timeout" in text
    assert "Press Esc to go back and try again." in text
    assert "Loading..." not in text


def test_loading_state_constructors():
    assert LoadingState.fetching().failed is False
    state = LoadingState.failure(["a", "b"])
    assert state.failed is True
    assert state.errors == ("a", "b")