from __future__ import annotations

import pytest

from namescrub.sanitize import clean_name, describe_name, has_control_chars, is_control

SAMPLES = [
    "",
    "plain.txt",
    "hello\x07world.txt",
    "\x00\x1f\x7f",
    "tab\there",
    "line\nbreak\r",
    "c1\x85\x9fcontrols",
    "unicode-ß-日本語\x1b[0m.mkv",
    "\u200bzero-width",
]


@pytest.mark.parametrize("name", SAMPLES)
def test_clean_name_is_idempotent(name: str) -> None:
    once = clean_name(name)
    assert clean_name(once) == once


@pytest.mark.parametrize("name", SAMPLES)
def test_clean_name_output_has_no_control_chars(name: str) -> None:
    assert not has_control_chars(clean_name(name))


def test_clean_name_preserves_order_of_remaining_chars() -> None:
    assert clean_name("a\x01b\x02c\x03") == "abc"
    assert clean_name("\x1bsub\x1Bdir") == "subdir"


@pytest.mark.parametrize("name", ["plain.txt", "résumé.pdf", "spaces in name", "\u200bzero-width"])
def test_clean_name_leaves_clean_names_untouched(name: str) -> None:
    assert clean_name(name) == name


def test_clean_name_edge_cases() -> None:
    assert clean_name("") == ""
    assert clean_name("\x01\x02\x7f") == ""


def test_is_control_covers_c0_c1_and_delete() -> None:
    assert all(is_control(chr(cp)) for cp in range(0x00, 0x20))
    assert is_control("\x7f")
    assert all(is_control(chr(cp)) for cp in range(0x80, 0xA0))
    assert not is_control(" ")
    assert not is_control("\u200b")  # format character, not control


def test_describe_name_renders_controls_visibly() -> None:
    assert describe_name("bell\x07.txt") == "bell\\x07.txt"
    assert describe_name("clean") == "clean"


def test_describe_name_renders_undecodable_bytes() -> None:
    assert describe_name("bad\udcff\x01.txt") == "bad\\xff\\x01.txt"
