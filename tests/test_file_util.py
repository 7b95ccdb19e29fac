"""Tests for filename helpers -- sanitizing, listing and renaming."""

import pytest

from mkvname.utils import file_util


class TestSanitize:
    def test_colon_becomes_dash(self):
        assert file_util.sanitize_filename("Colon: Subtitle (2001)") == "Colon - Subtitle (2001)"

    def test_manual_entry(self):
        assert file_util.sanitize_filename("Custom: Name") == "Custom - Name"

    def test_forbidden_characters_removed(self):
        assert file_util.sanitize_filename('What? "Really" <a|b> */x') == "What Really ab x"

    def test_trims(self):
        assert file_util.sanitize_filename("  Title  ") == "Title"

    @pytest.mark.parametrize("text", [
        "",
        ":",
        " : ",
        "a::b",
        'Mission: Impossible - "Fallout" (2018)',
        "???",
        "  x / y : z  ",
    ])
    def test_idempotent(self, text):
        once = file_util.sanitize_filename(text)
        assert file_util.sanitize_filename(once) == once


class TestNormalize:
    def test_separators_and_brackets(self):
        assert file_util.normalize_text("[Grp].Movie_Title.2020") == "Grp Movie Title 2020"

    def test_strip_extension_is_case_sensitive(self):
        assert file_util.strip_extension("movie.mkv") == "movie"
        assert file_util.strip_extension("movie.MKV") == "movie.MKV"


class TestListMediaFiles:
    def test_only_exact_extension_files(self, tmp_path):
        for name in ["b.mkv", "a.mkv", "c.MKV", "d.mp4", "e.mkv.part"]:
            (tmp_path / name).write_text("x")
        (tmp_path / "folder.mkv").mkdir()
        assert file_util.list_media_files(tmp_path) == ["a.mkv", "b.mkv"]

    def test_empty_folder(self, tmp_path):
        assert file_util.list_media_files(tmp_path) == []


class TestRenameFile:
    def test_renames_in_place(self, tmp_path):
        (tmp_path / "old.mkv").write_text("x")
        target = file_util.rename_file(tmp_path, "old.mkv", "New (2020).mkv")
        assert target == tmp_path / "New (2020).mkv"
        assert target.read_text() == "x"
        assert not (tmp_path / "old.mkv").exists()

    def test_existing_target_is_not_overwritten(self, tmp_path):
        (tmp_path / "old.mkv").write_text("old")
        (tmp_path / "new.mkv").write_text("new")
        with pytest.raises(FileExistsError):
            file_util.rename_file(tmp_path, "old.mkv", "new.mkv")
        assert (tmp_path / "new.mkv").read_text() == "new"

    def test_missing_source(self, tmp_path):
        with pytest.raises(OSError):
            file_util.rename_file(tmp_path, "missing.mkv", "new.mkv")
