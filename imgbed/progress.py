"""
Console progress for an upload body.

ProgressReader sits between the multipart encoder and the open file. Each
read that yields bytes bumps the counter and redraws one line:

  [========================                ] 60.0% (3.00 MB/5.00 MB) 1.42 MB/s

The line layout is fixed and must be redrawn on every read of the file part,
not on encoder-level callbacks, so this draws it by hand rather than
through tqdm and MultipartEncoderMonitor.
"""

import sys
import time
from dataclasses import dataclass, field

BAR_WIDTH = 40
MIB = 1024 * 1024


@dataclass
class ProgressState:
    total: int
    current: int = 0
    start: float = field(default_factory=time.monotonic)

    @property
    def fraction(self) -> float:
        if self.total <= 0:
            return 1.0
        return min(self.current / self.total, 1.0)


def render_progress(state: ProgressState, now=None) -> str:
    now = time.monotonic() if now is None else now
    filled = int(BAR_WIDTH * state.fraction)
    bar = "=" * filled + " " * (BAR_WIDTH - filled)
    elapsed = now - state.start
    speed = state.current / MIB / elapsed if elapsed > 0 else 0.0
    return (f"[{bar}] {state.fraction * 100:.1f}% "
            f"({state.current / MIB:.2f} MB/{state.total / MIB:.2f} MB) {speed:.2f} MB/s")


class ProgressReader:
    """File-like wrapper that reports every successful read.

    ``fileno`` and ``tell`` are forwarded so the multipart encoder can size
    the part from the underlying file.
    """

    def __init__(self, source, total: int, out=None):
        self.source = source
        self.state = ProgressState(total=total)
        self.out = out

    def read(self, size=-1):
        chunk = self.source.read(size)
        if chunk:
            self.state.current += len(chunk)
            self.show()
        return chunk

    def show(self):
        out = self.out if self.out is not None else sys.stdout
        out.write("\r" + render_progress(self.state))
        out.flush()

    def fileno(self):
        return self.source.fileno()

    def tell(self):
        return self.source.tell()
