"""Tests for the cache file heuristics."""

from __future__ import annotations

from pathlib import Path

import pytest

from cachescan.core.classifier import RULES, classify, is_cache_file
from cachescan.models.category import Category


class TestIsCacheFile:
    @pytest.mark.parametrize(
        "path",
        [
            "project/server.log",
            "project/data.cache",
            "home/user/.vimrc.swp",
            "downloads/movie.mkv.crdownload",
            "downloads/archive.zip.part",
            "etc/fstab.old",
        ],
    )
    def test_matches_extension(self, path):
        assert is_cache_file(path)

    @pytest.mark.parametrize("parent", ["cache", "Caches", ".cache", "TMP", ".temp", "logs", "backup", ".old"])
    def test_matches_parent_directory(self, parent):
        assert is_cache_file(f"home/{parent}/entry.bin")

    @pytest.mark.parametrize(
        "name",
        ["thumbcache.db", "tempfile.dat", "changelog.md", "~$report.docx", ".DS_Store", "backup-2024.tar"],
    )
    def test_matches_name_pattern(self, name):
        assert is_cache_file(f"home/user/{name}")

    def test_parent_must_match_exactly(self):
        assert not is_cache_file("home/cache2/entries")
        assert not is_cache_file("home/mycache/entry.bin")

    def test_regular_files_are_not_cache(self):
        assert not is_cache_file("project/notes.txt")
        assert not is_cache_file("project/src/main.py")

    @pytest.mark.parametrize("path", ["report.bak", "/server.log", "", "/"])
    def test_missing_name_or_parent_is_rejected(self, path):
        assert not is_cache_file(path)

    @pytest.mark.parametrize(
        "lower, mixed",
        [
            ("project/server.log", "project/SERVER.LOG"),
            ("home/cache/entry.bin", "home/CaChE/entry.bin"),
            ("home/user/thumbcache.db", "home/user/ThumbCACHE.db"),
            ("project/notes.txt", "project/NOTES.TXT"),
        ],
    )
    def test_case_insensitive(self, lower, mixed):
        assert is_cache_file(lower) == is_cache_file(mixed)

    def test_accepts_path_objects(self):
        assert is_cache_file(Path("project") / "server.log")


class TestClassify:
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("report.bak", Category.BACKUP),
            ("firefox/cache2/entries", Category.BROWSER),
            ("/var/log/syslog", Category.LOG),
            ("build/tmp/obj.o", Category.TEMPORARY),
            ("home/.cache/fontconfig/index", Category.SYSTEM),
            ("opt/myapp/state.dat", Category.APPLICATION),
            ("home/user/~$notes.docx", Category.OTHER),
        ],
    )
    def test_known_paths(self, path, expected):
        assert classify(path) is expected

    def test_log_takes_precedence_over_temporary(self):
        assert classify("srv/access.log.tmp") is Category.LOG
        assert classify("srv/logs/session.tmp") is Category.LOG

    def test_browser_takes_precedence_over_system(self):
        assert classify("home/.cache/mozilla/cache2/entry") is Category.BROWSER

    def test_temporary_takes_precedence_over_backup(self):
        assert classify("home/tmp/db.bak") is Category.TEMPORARY

    def test_backup_takes_precedence_over_system(self):
        assert classify("var/cache/settings.old") is Category.BACKUP

    def test_looks_at_whole_path(self):
        assert classify("home/chrome/data.bin") is Category.BROWSER
        assert classify("home/data.bin") is Category.OTHER

    def test_case_insensitive(self):
        assert classify("Users/Me/Library/Caches/Google/CHROME/x.tmp") is Category.BROWSER
        assert classify("SRV/ACCESS.LOG") is Category.LOG

    def test_idempotent(self):
        path = "srv/logs/session.tmp"
        assert {classify(path) for _ in range(5)} == {Category.LOG}

    def test_path_without_name_is_other(self):
        assert classify("") is Category.OTHER

    def test_rule_order(self):
        assert [category for _, category in RULES] == [
            Category.BROWSER,
            Category.LOG,
            Category.TEMPORARY,
            Category.BACKUP,
            Category.SYSTEM,
            Category.APPLICATION,
        ]
