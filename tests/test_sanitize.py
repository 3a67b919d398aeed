"""Filename sanitization: every stored name is a flat, non-empty basename."""
import os

import pytest

from utils import is_safe_basename, sanitize_filename


@pytest.mark.parametrize("raw, expected", [
    ("report.pdf", "report.pdf"),
    ("  report.pdf  ", "report.pdf"),
    ("../../etc/passwd", "passwd"),
    ("/abs/path/to/notes.txt", "notes.txt"),
    ("dir/sub/", "sub"),
    ("C:\\Users\\me\\photo.jpg", "photo.jpg"),
    ("a\x00b.txt", "a_b.txt"),
    ("name with spaces.txt", "name with spaces.txt"),
    ("报告.txt", "报告.txt"),
])
def test_basename_extracted(raw, expected):
    assert sanitize_filename(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", "/", "///", "\\\\", " / ", ".", "..", "a/..", "./"])
def test_blank_or_separator_only_rejected(raw):
    assert sanitize_filename(raw) == ""


def test_none_rejected():
    assert sanitize_filename(None) == ""


@pytest.mark.parametrize("raw", [
    "a/b/c",
    "a\\b",
    "../x/../y",
    "x" + os.sep + "y",
    "//server/share/file",
    "weird/ /name",
])
def test_result_has_no_separators(raw):
    result = sanitize_filename(raw)
    assert "/" not in result
    assert "\\" not in result
    assert os.sep not in result


def test_long_names_are_not_truncated():
    name = "a" * 400 + ".bin"
    assert sanitize_filename(name) == name


def test_is_safe_basename():
    assert is_safe_basename("report.pdf")
    assert not is_safe_basename("")
    assert not is_safe_basename("..")
    assert not is_safe_basename("a/b")
    assert not is_safe_basename(" padded ")
