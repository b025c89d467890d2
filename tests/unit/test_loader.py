"""
Unit tests for lexicon/store/marshal.py and lexicon/store/loader.py.

No real game data required — Scripts.rvdata2 blobs are assembled byte by
byte with the helpers below.
"""

import zlib
from pathlib import Path

import pytest

from lexicon.exceptions import LoaderError
from lexicon.store import marshal
from lexicon.store.loader import load_directory, load_rvdata2, load_scripts


# ─────────────────────────────────────────────────────────────────────────────
# Marshal builders
# ─────────────────────────────────────────────────────────────────────────────

HEADER = b"\x04\x08"


def _fixnum(n: int) -> bytes:
    if n == 0:
        return b"\x00"
    if 0 < n < 123:
        return bytes([n + 5])
    if -124 < n < 0:
        return bytes([(n - 5) & 0xFF])
    size = 1
    while size < 4 and not (-(1 << (8 * size)) <= n < (1 << (8 * size))):
        size += 1
    if n > 0:
        return bytes([size]) + n.to_bytes(size, "little")
    return bytes([(-size) & 0xFF]) + (n + (1 << (8 * size))).to_bytes(size, "little")


def _int(n: int) -> bytes:
    return b"i" + _fixnum(n)


def _raw_string(data: bytes) -> bytes:
    return b'"' + _fixnum(len(data)) + data


def _utf8_string(text: str) -> bytes:
    """String wrapped in an ivar carrying the :E => true encoding marker."""
    return b"I" + _raw_string(text.encode("utf-8")) + _fixnum(1) + b":" + _fixnum(1) + b"E" + b"T"


def _array(*items: bytes) -> bytes:
    return b"[" + _fixnum(len(items)) + b"".join(items)


def _script(script_id: int, name: str, code: str) -> bytes:
    return _array(_int(script_id), _utf8_string(name), _raw_string(zlib.compress(code.encode("utf-8"))))


@pytest.fixture
def rvdata2(tmp_path) -> Path:
    path = tmp_path / "Scripts.rvdata2"
    path.write_bytes(HEADER + _array(
        _script(12345678, "Vocab", "module Vocab\r\n  ShopBuy = \"Buy\"\r\nend"),
        _script(500, "", ""),
        _script(77, "Scene_Map", "class Scene_Map < Scene_Base\r\n  def update\r\n  end\r\nend"),
    ))
    return path


# ─────────────────────────────────────────────────────────────────────────────
# 1. Marshal reader
# ─────────────────────────────────────────────────────────────────────────────

class TestMarshal:

    @pytest.mark.parametrize("n", [0, 1, 122, -1, -123, 123, 255, 256, -124, -256, 65536, 2**30 - 1, -(2**30)])
    def test_fixnum(self, n):
        assert marshal.loads(HEADER + _int(n)) == n

    def test_scalars(self):
        assert marshal.loads(HEADER + b"0") is None
        assert marshal.loads(HEADER + b"T") is True
        assert marshal.loads(HEADER + b"F") is False

    def test_string_with_encoding_ivar(self):
        assert marshal.loads(HEADER + _utf8_string("héllo")) == "héllo".encode("utf-8")

    def test_symbol_link_reuses_symbol(self):
        data = HEADER + _array(b":" + _fixnum(3) + b"foo", b";" + _fixnum(0))
        assert marshal.loads(data) == ["foo", "foo"]

    def test_object_link(self):
        # Object 0 is the outer array, object 1 the string
        data = HEADER + _array(_raw_string(b"abc"), b"@" + _fixnum(1))
        assert marshal.loads(data) == [b"abc", b"abc"]

    def test_bignum(self):
        n = 2**40 + 5
        data = HEADER + b"l+" + _fixnum(3) + n.to_bytes(6, "little")
        assert marshal.loads(data) == n

    def test_float(self):
        assert marshal.loads(HEADER + b"f" + _fixnum(3) + b"1.5") == 1.5

    def test_wrong_version_raises(self):
        with pytest.raises(LoaderError):
            marshal.loads(b"\x04\x09" + _int(1))

    def test_truncated_data_raises(self):
        with pytest.raises(LoaderError):
            marshal.loads(HEADER + b'"' + _fixnum(10) + b"abc")

    def test_unsupported_type_raises(self):
        with pytest.raises(LoaderError):
            marshal.loads(HEADER + b"o:\x08Foo\x00")


# ─────────────────────────────────────────────────────────────────────────────
# 2. load_rvdata2
# ─────────────────────────────────────────────────────────────────────────────

class TestLoadRvdata2:

    def test_loads_records_in_editor_order(self, rvdata2):
        records = load_rvdata2(rvdata2)
        assert [r.name for r in records] == ["Vocab", "", "Scene_Map"]

    def test_code_is_inflated_and_split(self, rvdata2):
        records = load_rvdata2(rvdata2)
        assert records[2].lines[1] == "  def update"
        assert records[1].is_blank

    def test_source_id_is_editor_id(self, rvdata2):
        assert [r.source_id for r in load_rvdata2(rvdata2)] == [12345678, 500, 77]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_rvdata2(tmp_path / "nope.rvdata2")

    def test_non_array_raises(self, tmp_path):
        path = tmp_path / "bad.rvdata2"
        path.write_bytes(HEADER + _int(3))
        with pytest.raises(LoaderError):
            load_rvdata2(path)

    def test_bad_zlib_raises(self, tmp_path):
        path = tmp_path / "bad.rvdata2"
        path.write_bytes(HEADER + _array(_array(_int(1), _raw_string(b"X"), _raw_string(b"not zlib"))))
        with pytest.raises(LoaderError):
            load_rvdata2(path)


# ─────────────────────────────────────────────────────────────────────────────
# 3. load_directory / load_scripts
# ─────────────────────────────────────────────────────────────────────────────

class TestLoadDirectory:

    def test_one_record_per_file_sorted(self, tmp_path):
        (tmp_path / "002_Scene_Map.rb").write_text("class Scene_Map\nend", encoding="utf-8")
        (tmp_path / "001_Vocab.rb").write_text("module Vocab\nend", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
        records = load_directory(tmp_path)
        assert [r.name for r in records] == ["001_Vocab", "002_Scene_Map"]
        assert [r.source_id for r in records] == [0, 1]

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_directory(tmp_path / "missing")

    def test_load_scripts_dispatches(self, tmp_path, rvdata2):
        scripts_dir = tmp_path / "exported"
        scripts_dir.mkdir()
        (scripts_dir / "Main.rb").write_text("rgss_main { }", encoding="utf-8")
        assert [r.name for r in load_scripts(scripts_dir)] == ["Main"]
        assert len(load_scripts(rvdata2)) == 3
