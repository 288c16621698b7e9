"""Errors shared by the recommender and its store adapters."""


class StoreUnavailableError(Exception):
    """A backing store could not be reached (connection failure, timeout, auth)."""

    def __init__(self, store: str, detail: str = ""):
        self.store = store
        self.detail = detail
        message = f"{store} unavailable"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
