from __future__ import annotations

DEFAULT_FETCH_ERROR = "Error fetching jobs"


class JobStoreError(Exception):
    """Raised when the job listing cannot be read from the data store.

    ``message`` is the provider's own error text and is shown to users as-is.
    """

    error_code = "JOB_FETCH_FAILED"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or DEFAULT_FETCH_ERROR
        super().__init__(self.message)
