"""Custom exceptions for run history queries.

The history engine raises these instead of logging; the HTTP and CLI
boundaries decide how each one is reported.
"""

from __future__ import annotations

from pathlib import Path


class HistoryError(Exception):
    """Base exception for run history errors.

    Callers that only need "not found" vs. "everything else" can catch
    RunNotFoundError first and HistoryError second.
    """

    def log_fields(self) -> dict[str, str]:
        """Return the identifying attributes of this failure for a log record.

        Intended as ``extra=`` of a logging call. Only attributes the
        exception actually carries are included, as strings.
        """
        fields = {"error_type": type(self).__name__}
        for name in ("run_id", "path", "store_dir"):
            value = getattr(self, name, None)
            if value is not None:
                fields[name] = str(value)
        return fields


class RunNotFoundError(HistoryError):
    """Raised when a requested run does not exist.

    Also raised when the latest run is requested from an empty store.

    Attributes:
        run_id: The requested identifier, or None when resolving the latest run.
        navigation: Identifiers known at the time of the request, when the
            resolver computed them. Lets a caller still offer run selection.
    """

    def __init__(
        self,
        run_id: str | None,
        message: str | None = None,
        navigation: list[str] | None = None,
    ) -> None:
        self.run_id = run_id
        self.navigation = navigation
        if message is None:
            message = (
                "no runs available" if run_id is None else f"run {run_id!r} not found"
            )
        super().__init__(message)


class SnapshotDecodeError(HistoryError):
    """Raised when a snapshot file exists but its content is not a valid run.

    Attributes:
        run_id: Identifier of the corrupt snapshot.
        path: Path of the snapshot file.
        reason: Description of the first problem found.
    """

    def __init__(self, run_id: str, path: Path, reason: str) -> None:
        self.run_id = run_id
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot decode snapshot {run_id!r} ({path}): {reason}")


class SnapshotReadError(HistoryError):
    """Raised when a snapshot file exists but cannot be read."""

    def __init__(self, run_id: str, path: Path, reason: str) -> None:
        self.run_id = run_id
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read snapshot {run_id!r} ({path}): {reason}")


class StoreUnavailableError(HistoryError):
    """Raised when the snapshot directory is missing or unreadable."""

    def __init__(self, store_dir: Path, reason: str) -> None:
        self.store_dir = store_dir
        self.reason = reason
        super().__init__(f"Snapshot store {store_dir} is unavailable: {reason}")
