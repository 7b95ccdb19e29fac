"""Tests for the batch pipeline -- search collection, renaming and full runs."""

import pytest

from mkvname.rename import batch
from mkvname.rename.media import MediaFile
from mkvname.rename.report import RunReport
from mkvname.rename.review import AutoReviewer
from mkvname.utils import STATUS_DRY_RUN, STATUS_FAILED, STATUS_RENAMED, STATUS_SKIPPED

CATALOG = {
    "Movie Title": ["Another Movie (2019)", "Movie Title (2020)"],
    "Heat": ["Heat (1995)", "Heat (1986)"],
}


def fake_search(query):
    if query == "Broken":
        raise RuntimeError("index unavailable")
    return CATALOG.get(query, [])


@pytest.fixture
def report() -> RunReport:
    return RunReport()


class TestSearchFiles:
    @pytest.mark.parametrize("sequential", [True, False])
    def test_failure_only_empties_that_file(self, report, sequential):
        files = [MediaFile("a.mkv", name="Movie Title"), MediaFile("b.mkv", name="Broken"),
                 MediaFile("c.mkv", name="Heat")]
        batch.search_files(files, fake_search, report, workers=3, sequential=sequential)
        assert files[0].results == CATALOG["Movie Title"]
        assert files[1].results == []
        assert files[2].results == CATALOG["Heat"]
        assert report.searched == 3

    def test_results_are_sanitized_in_source_order(self, report):
        files = [MediaFile("a.mkv", name="x")]
        batch.search_files(files, lambda q: ["Colon: Subtitle (2001)", "", "A/B (1990)", "???"], report)
        assert files[0].results == ["Colon - Subtitle (2001)", "AB (1990)"]

    def test_empty_batch(self, report):
        assert batch.search_files([], fake_search, report) == []


class TestRenameFiles:
    def test_renames_and_skips(self, tmp_path, report):
        (tmp_path / "a.mkv").write_text("a")
        (tmp_path / "b.mkv").write_text("b")
        (tmp_path / "c.mkv").write_text("c")
        files = [
            MediaFile("a.mkv", chosen_name="Alpha (2001).mkv"),
            MediaFile("b.mkv"),
            MediaFile("c.mkv", chosen_name="c.mkv"),
        ]
        batch.rename_files(tmp_path, files, report)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["Alpha (2001).mkv", "b.mkv", "c.mkv"]
        assert report.count(STATUS_RENAMED) == 1
        assert report.count(STATUS_SKIPPED) == 2

    def test_failure_does_not_stop_batch(self, tmp_path, report):
        (tmp_path / "a.mkv").write_text("a")
        (tmp_path / "taken.mkv").write_text("taken")
        (tmp_path / "b.mkv").write_text("b")
        files = [
            MediaFile("a.mkv", chosen_name="taken.mkv"),
            MediaFile("missing.mkv", chosen_name="ghost.mkv"),
            MediaFile("b.mkv", chosen_name="Beta.mkv"),
        ]
        batch.rename_files(tmp_path, files, report)
        assert (tmp_path / "taken.mkv").read_text() == "taken"
        assert (tmp_path / "a.mkv").exists()
        assert (tmp_path / "Beta.mkv").read_text() == "b"
        assert report.count(STATUS_FAILED) == 2
        assert report.count(STATUS_RENAMED) == 1

    def test_dry_run_leaves_files(self, tmp_path, report):
        (tmp_path / "a.mkv").write_text("a")
        batch.rename_files(tmp_path, [MediaFile("a.mkv", chosen_name="Alpha.mkv")], report, dry_run=True)
        assert (tmp_path / "a.mkv").exists()
        assert not (tmp_path / "Alpha.mkv").exists()
        assert report.entries == [(STATUS_DRY_RUN, "a.mkv", "Alpha.mkv")]


class TestRun:
    def test_full_run(self, tmp_path, report):
        for name in ["Movie.Title.2020.1080p.BluRay.x265.mkv", "Film_MULTI_VO_DTS_Atmos_2160p.mkv", "notes.txt"]:
            (tmp_path / name).write_text(name)

        batch.run(tmp_path, fake_search, AutoReviewer(), report, workers=2)

        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "Film_MULTI_VO_DTS_Atmos_2160p.mkv",
            "Movie Title (2020) [1080p] [h265].mkv",
            "notes.txt",
        ]
        assert report.summary() == {
            "total": 2,
            "searched": 2,
            "renamed": 1,
            "dry_run": 0,
            "skipped": 1,
            "failed": 0,
        }

    def test_empty_folder(self, tmp_path, report):
        (tmp_path / "movie.MKV").write_text("x")
        batch.run(tmp_path, fake_search, AutoReviewer(), report)
        assert report.total == 0
        assert report.entries == []
