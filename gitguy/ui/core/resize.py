# gitguy/ui/core/resize.py
# Terminal resize notifications via SIGWINCH for full-screen Live sessions

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import Callable, Iterator

# None on platforms w/out SIGWINCH (Windows); resizes are then picked up after the next key
RESIZE_SIGNAL = getattr(signal, "SIGWINCH", None)


# * Call `callback` on every terminal resize while the block runs
# * The previous handler is restored on exit
@contextmanager
def on_terminal_resize(callback: Callable[[], None]) -> Iterator[None]:
    # signal handlers can only be installed from the main thread
    if RESIZE_SIGNAL is None or threading.current_thread() is not threading.main_thread():
        yield
        return

    original_handler = signal.getsignal(RESIZE_SIGNAL)

    def handle_resize(signum, frame):
        callback()

    signal.signal(RESIZE_SIGNAL, handle_resize)
    try:
        yield
    finally:
        signal.signal(RESIZE_SIGNAL, original_handler)
