import sys
import time
import threading
from datetime import timedelta

from ..config import logger, PROGRESS_EVERY

STATUS_FMT = "\rChecked {processed} of {total} domains. Elapsed {elapsed}. ETA {eta}. Threads: {threads}"


def _fmt_duration(seconds):
    return str(timedelta(seconds=int(seconds)))


class ProgressReporter:
    """
    Prints an overwritten status line every `every` processed results.
    Only observes the counters it is given; it never touches the pipeline.
    """

    def __init__(self, total, every=PROGRESS_EVERY, stream=None, clock=time.monotonic):
        self.total = total
        self.every = every
        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock
        self.start = clock()
        self.last_width = 0

    def eta(self, processed):
        elapsed = self.clock() - self.start
        return elapsed, elapsed * self.total / processed

    def update(self, processed):
        if processed == 0 or processed % self.every:
            return None
        elapsed, eta = self.eta(processed)
        line = STATUS_FMT.format(
            processed=processed,
            total=self.total,
            elapsed=_fmt_duration(elapsed),
            eta=_fmt_duration(eta),
            threads=threading.active_count(),
        )
        padded = line
        if len(line) < self.last_width:
            padded += " " * (self.last_width - len(line))
        else:
            self.last_width = len(line)
        try:
            self.stream.write(padded)
            self.stream.flush()
        except (OSError, ValueError) as e:
            logger.debug(f" [!] Could not write progress line: {e}")
        return line

    def finish(self):
        try:
            self.stream.write("\n")
            self.stream.flush()
        except (OSError, ValueError) as e:
            logger.debug(f" [!] Could not finish progress line: {e}")
