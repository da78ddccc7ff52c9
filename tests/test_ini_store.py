"""
Tests for the reaper.ini configuration stores.
"""

import os

import pytest

from nudge_viewer.host import IniConfigStore, MemoryConfigStore, slot_key
from nudge_viewer.nudge import NOT_APPLICABLE, read_preset

INI_TEXT = """\
[REAPER]
nudge=4113
nudgeamt=2.5
nudge_2=1
nudgeamt_2=7
nudge_7=garbage
nudgeflag

[other]
nudge=99
"""


@pytest.fixture
def ini_path(tmp_path):
    path = tmp_path / "reaper.ini"
    path.write_text(INI_TEXT)
    return path


class TestSlotKey:

    def test_last_slot_has_no_suffix(self):
        assert slot_key("nudge", 0) == "nudge"

    def test_bank_suffix(self):
        assert slot_key("nudgeamt", 8) == "nudgeamt_8"


class TestIniConfigStore:

    def test_reads_ints(self, ini_path):
        store = IniConfigStore(ini_path)
        assert store.read_int("nudge", 0) == 4113
        assert store.read_int("nudge", 2) == 1

    def test_reads_floats(self, ini_path):
        store = IniConfigStore(ini_path)
        assert store.read_float("nudgeamt", 0) == 2.5

    def test_missing_key_is_zero(self, ini_path):
        store = IniConfigStore(ini_path)
        assert store.read_int("nudge", 4) == 0

    def test_garbage_is_zero(self, ini_path):
        store = IniConfigStore(ini_path)
        assert store.read_int("nudge", 7) == 0

    def test_key_without_value_is_zero(self, ini_path):
        store = IniConfigStore(ini_path)
        assert store.read_int("nudgeflag", 0) == 0

    def test_missing_file_is_zero(self, tmp_path):
        store = IniConfigStore(tmp_path / "nope.ini")
        assert store.read_int("nudge", 0) == 0

    def test_no_path_is_zero(self):
        assert IniConfigStore(None).read_float("nudgeamt", 0) == 0.0

    def test_missing_section_is_zero(self, tmp_path):
        path = tmp_path / "reaper.ini"
        path.write_text("[other]\nnudge=5\n")
        assert IniConfigStore(path).read_int("nudge", 0) == 0

    def test_reloads_when_file_changes(self, ini_path):
        store = IniConfigStore(ini_path)
        assert store.read_int("nudge", 2) == 1

        ini_path.write_text(INI_TEXT.replace("nudge_2=1", "nudge_2=3"))
        stat = os.stat(ini_path)
        os.utime(ini_path, (stat.st_atime, stat.st_mtime + 5))

        assert store.read_int("nudge", 2) == 3

    def test_reloads_when_size_changes_within_same_mtime(self, ini_path):
        store = IniConfigStore(ini_path)
        assert store.read_int("nudge", 2) == 1
        before = os.stat(ini_path)

        ini_path.write_text(INI_TEXT.replace("nudge_2=1", "nudge_2=12"))
        os.utime(ini_path, ns=(before.st_atime_ns, before.st_mtime_ns))
        assert os.stat(ini_path).st_mtime_ns == before.st_mtime_ns

        assert store.read_int("nudge", 2) == 12

    def test_unchanged_file_is_not_reparsed(self, ini_path):
        store = IniConfigStore(ini_path)
        store.read_int("nudge", 0)
        parser = store._parser
        store.read_int("nudge", 2)
        assert store._parser is parser

    def test_decodes_preset(self, ini_path):
        store = IniConfigStore(ini_path)
        preset = read_preset(store, 0)
        assert preset.target_label == 'left trim'   # 4113 = 1<<12 | 1<<4 | 1
        assert preset.unit_label == 'seconds'
        assert preset.amount is NOT_APPLICABLE
        assert read_preset(store, 2).amount is NOT_APPLICABLE


class TestMemoryConfigStore:

    def test_set_and_read(self):
        store = MemoryConfigStore()
        store.set("nudge", 3, 17)
        assert store.read_int("nudge", 3) == 17
        assert store.values == {"nudge_3": 17}

    def test_missing_is_zero(self):
        assert MemoryConfigStore().read_float("nudgeamt", 1) == 0.0

    def test_string_values(self):
        store = MemoryConfigStore({"nudgeamt": " 4.5 "})
        assert store.read_float("nudgeamt", 0) == 4.5
