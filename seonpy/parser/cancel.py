"""Cooperative cancellation for long-running decodes."""

import threading


class CancellationToken:
    """Flag shared between a caller and a running decode.

    The resolver polls the token between top-level forms and between list/object
    members; `cancel()` may be called from any thread.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()
