import io
import logging

from namehack.utils.progress import ProgressReporter


def fake_clock(*ticks):
    it = iter(ticks)
    return lambda: next(it)


def test_progress_only_on_every_tenth_result():
    stream = io.StringIO()
    progress = ProgressReporter(100, stream=stream, clock=fake_clock(0.0, 5.0))
    for processed in range(1, 10):
        assert progress.update(processed) is None
    assert stream.getvalue() == ""

    line = progress.update(10)
    assert line.startswith("\rChecked 10 of 100 domains.")
    assert "Elapsed 0:00:05" in line
    assert "ETA 0:00:50" in line
    assert "Threads:" in line
    assert stream.getvalue() == line


def test_shorter_line_is_padded():
    stream = io.StringIO()
    progress = ProgressReporter(1000, stream=stream, clock=fake_clock(0.0, 100000.0, 100001.0))
    first = progress.update(10)
    second = progress.update(1000)
    assert len(second) < len(first)
    assert stream.getvalue() == first + second + " " * (len(first) - len(second))


class BrokenStream:
    def write(self, data):
        raise OSError("closed")

    def flush(self):
        raise OSError("closed")


def test_progress_never_raises_on_broken_stream():
    progress = ProgressReporter(10, stream=BrokenStream(), clock=fake_clock(0.0, 1.0))
    assert progress.update(10)
    progress.finish()


def test_broken_stream_is_logged_at_debug(caplog):
    progress = ProgressReporter(10, stream=BrokenStream(), clock=fake_clock(0.0, 1.0))
    with caplog.at_level(logging.DEBUG, logger="namehack"):
        progress.update(10)
        progress.finish()
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert any("Could not write progress line: closed" in m for m in messages)
    assert any("Could not finish progress line: closed" in m for m in messages)
