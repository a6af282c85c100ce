# tests/test_api.py
from __future__ import annotations

import bomb


def test_public_names_exported():
    for name in bomb.__all__:
        assert hasattr(bomb, name)


def test_trim_reachable_from_package():
    assert bomb.trim("\xef\xbb\xbfstring") == "string"


def test_trim_undefined_input():
    assert bomb.trim(None) is None


def test_version_string():
    assert bomb.__version__.count(".") == 2


def test_read_file_through_raw_decode(bom_file):
    text = bomb.decode_raw(bom_file.read_bytes())
    assert bomb.has_bom(text)
    assert bomb.trim(text) == "Hello world\n"


def test_plain_file_untouched(plain_file):
    text = bomb.decode_raw(plain_file.read_bytes())
    assert bomb.trim(text) is text
