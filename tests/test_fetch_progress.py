import pytest

from dynmig.fetch_progress import FetchProgress, FetchState, FetchStatus

NAMES = [
    "source_fields",
    "target_fields",
    "source_views",
    "target_views",
    "source_forms",
    "target_forms",
    "examples",
]


def _all(status):
    return FetchProgress(**{name: status for name in NAMES})


def test_new_progress_is_all_pending():
    progress = FetchProgress()
    assert all(getattr(progress, name).state is FetchState.PENDING for name in NAMES)
    assert not progress.has_any_failures()
    assert not progress.all_completed()
    assert progress.error_messages() == []


def test_all_completed():
    progress = _all(FetchStatus.completed())
    assert progress.all_completed()
    assert not progress.has_any_failures()


@pytest.mark.parametrize("name", NAMES)
def test_single_in_progress_blocks_completion(name):
    progress = _all(FetchStatus.completed())
    setattr(progress, name, FetchStatus.in_progress())
    assert not progress.all_completed()


@pytest.mark.parametrize("name", NAMES)
def test_single_failure_detected(name):
    progress = FetchProgress()
    setattr(progress, name, FetchStatus.failed("boom"))
    assert progress.has_any_failures()
    assert len(progress.error_messages()) == 1
    assert progress.error_messages()[0].endswith(": boom")


def test_error_messages_order_and_labels():
    progress = FetchProgress(
        examples=FetchStatus.failed("no records"),
        source_fields=FetchStatus.failed("timeout"),
        target_views=FetchStatus.completed(),
    )
    assert progress.error_messages() == [
        "Source fields: timeout",
        "Examples: no records",
    ]


def test_failed_status_keeps_message():
    status = FetchStatus.failed("denied")
    assert status.is_failed
    assert status.message == "denied"
    assert FetchStatus.completed().message is None