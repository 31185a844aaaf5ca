"""
Tests for the report directory and base name allocation
"""
import os
import threading
from unittest.mock import MagicMock, patch

import pytest

from lighthouse_audit.report_sink import ReportNamer, prepare_report_destination, resolve_base_dir

pytestmark = pytest.mark.unit


class TestReportNamer:
    def test_name_uses_clock_milliseconds(self):
        namer = ReportNamer(clock=lambda: 1700000000123)
        assert namer.next_name() == "lighthouse-1700000000123"

    def test_frozen_clock_still_gives_distinct_names(self, fixed_clock_namer):
        names = [fixed_clock_namer.next_name() for _ in range(5)]

        assert len(set(names)) == 5
        assert names[0] == "lighthouse-1700000000000"
        assert names[1] == "lighthouse-1700000000001"

    def test_clock_moving_backwards_never_repeats(self):
        ticks = iter([1000, 999, 1000, 1500])
        namer = ReportNamer(clock=lambda: next(ticks))

        assert [namer.next_stamp() for _ in range(4)] == [1000, 1001, 1002, 1500]

    def test_concurrent_threads_get_unique_names(self, fixed_clock_namer):
        names = []
        lock = threading.Lock()

        def worker():
            for _ in range(50):
                name = fixed_clock_namer.next_name()
                with lock:
                    names.append(name)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(names) == 200
        assert len(set(names)) == 200


class TestPrepareReportDestination:
    def test_creates_subdirectory(self, tmp_path, fixed_clock_namer):
        destination = prepare_report_destination(base_dir=str(tmp_path), namer=fixed_clock_namer)

        assert destination.directory == os.path.join(str(tmp_path), "lighthouse-reports")
        assert os.path.isdir(destination.directory)
        assert destination.base_name == "lighthouse-1700000000000"
        # Reports are written by the engine, not here
        assert os.listdir(destination.directory) == []

    def test_creates_missing_parents(self, tmp_path, fixed_clock_namer):
        base = tmp_path / "a" / "b"
        destination = prepare_report_destination(base_dir=str(base), subdir="reports", namer=fixed_clock_namer)

        assert os.path.isdir(destination.directory)
        assert destination.directory.endswith(os.path.join("a", "b", "reports"))

    def test_existing_directory_is_reused(self, tmp_path, fixed_clock_namer):
        first = prepare_report_destination(base_dir=str(tmp_path), namer=fixed_clock_namer)
        second = prepare_report_destination(base_dir=str(tmp_path), namer=fixed_clock_namer)

        assert first.directory == second.directory
        assert first.base_name != second.base_name

    def test_paths_follow_naming_convention(self, tmp_path, fixed_clock_namer):
        destination = prepare_report_destination(base_dir=str(tmp_path), namer=fixed_clock_namer)

        assert destination.path_for("html") == os.path.join(
            str(tmp_path), "lighthouse-reports", "lighthouse-1700000000000.html"
        )

    def test_unwritable_base_propagates(self, tmp_path, fixed_clock_namer):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(OSError):
            prepare_report_destination(base_dir=str(blocker), namer=fixed_clock_namer)


class TestResolveBaseDir:
    def test_explicit_directory_wins(self):
        assert resolve_base_dir("/srv/reports") == "/srv/reports"

    def test_configured_directory(self):
        settings = MagicMock(lighthouse_reports_base_dir="/var/lighthouse")
        with patch("lighthouse_audit.report_sink.get_settings", return_value=settings):
            assert resolve_base_dir() == "/var/lighthouse"

    def test_falls_back_to_working_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = MagicMock(lighthouse_reports_base_dir=None)
        with patch("lighthouse_audit.report_sink.get_settings", return_value=settings):
            assert os.path.realpath(resolve_base_dir()) == os.path.realpath(tmp_path)
