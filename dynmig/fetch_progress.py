"""Progress of the parallel metadata fetches behind a comparison."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum


class FetchState(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchStatus:
    """The state of one fetch, with the error message when it failed."""

    state: FetchState = FetchState.PENDING
    message: str | None = None

    @classmethod
    def pending(cls) -> FetchStatus:
        return cls(FetchState.PENDING)

    @classmethod
    def in_progress(cls) -> FetchStatus:
        return cls(FetchState.IN_PROGRESS)

    @classmethod
    def completed(cls) -> FetchStatus:
        return cls(FetchState.COMPLETED)

    @classmethod
    def failed(cls, message: str) -> FetchStatus:
        return cls(FetchState.FAILED, message)

    @property
    def is_failed(self) -> bool:
        return self.state is FetchState.FAILED

    @property
    def is_completed(self) -> bool:
        return self.state is FetchState.COMPLETED


_LABELS = {
    "source_fields": "Source fields",
    "target_fields": "Target fields",
    "source_views": "Source views",
    "target_views": "Target views",
    "source_forms": "Source forms",
    "target_forms": "Target forms",
    "examples": "Examples",
}


@dataclass
class FetchProgress:
    """The status of every fetch needed before a comparison can be shown."""

    source_fields: FetchStatus = field(default_factory=FetchStatus.pending)
    target_fields: FetchStatus = field(default_factory=FetchStatus.pending)
    source_views: FetchStatus = field(default_factory=FetchStatus.pending)
    target_views: FetchStatus = field(default_factory=FetchStatus.pending)
    source_forms: FetchStatus = field(default_factory=FetchStatus.pending)
    target_forms: FetchStatus = field(default_factory=FetchStatus.pending)
    examples: FetchStatus = field(default_factory=FetchStatus.pending)

    def _statuses(self) -> list[tuple[str, FetchStatus]]:
        return [(f.name, getattr(self, f.name)) for f in fields(self)]

    def has_any_failures(self) -> bool:
        return any(status.is_failed for _, status in self._statuses())

    def all_completed(self) -> bool:
        return all(status.is_completed for _, status in self._statuses())

    def error_messages(self) -> list[str]:
        """One labelled message for each failed fetch, in a fixed order."""
        return [
            f"{_LABELS[name]}: {status.message}"
            for name, status in self._statuses()
            if status.is_failed
        ]