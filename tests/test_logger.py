"""Tests for the structured logger."""

import threading

import pytest

from mkvname.utils import LogLevel, logger


@pytest.fixture(autouse=True)
def restore_level():
    previous = logger.get_log_level()
    yield
    logger.set_log_level(previous)


class TestParseLogLevel:
    @pytest.mark.parametrize("name, level", [
        ("debug", LogLevel.DEBUG),
        (" INFO ", LogLevel.INFO),
        ("warning", LogLevel.WARN),
        ("Warn", LogLevel.WARN),
        ("trace", LogLevel.TRACE),
    ])
    def test_known_names(self, name, level):
        assert logger.parse_log_level(name) is level

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="verbose"):
            logger.parse_log_level("verbose")


class TestLog:
    def test_filters_below_level(self, capsys):
        logger.set_log_level(LogLevel.WARN)
        logger.log("search.results", LogLevel.INFO, count=2)
        assert capsys.readouterr().out == ""

    def test_line_format(self, capsys):
        logger.set_log_level(LogLevel.INFO)
        logger.log("rename.failed", LogLevel.ERROR, file='a "b".mkv', ok=False, year=None, count=3)
        line = capsys.readouterr().out.strip()
        assert " | [ERROR] | rename.failed | " in line
        assert 'file="a \\"b\\".mkv"' in line
        assert "ok=false" in line
        assert "year=null" in line
        assert "count=3" in line
        assert line.endswith("worker=\"main\"")

    def test_newlines_are_escaped(self, capsys):
        logger.log("x", LogLevel.ERROR, error="a\nb")
        assert 'error="a\\nb"' in capsys.readouterr().out


class TestWorkerId:
    def test_main_thread(self):
        assert logger.get_worker_id() == "main"

    def test_executor_thread_names(self):
        seen = []
        thread = threading.Thread(target=lambda: seen.append(logger.get_worker_id()), name="search_2")
        thread.start()
        thread.join()
        assert seen == ["w3"]

    def test_other_threads_keep_their_name(self):
        seen = []
        thread = threading.Thread(target=lambda: seen.append(logger.get_worker_id()), name="watcher")
        thread.start()
        thread.join()
        assert seen == ["watcher"]
