"""Tests for avatarsmith.support.name."""

from __future__ import annotations

import hashlib

import pytest

from avatarsmith.support.color import RGBColor
from avatarsmith.support.name import Name


class TestHash:
    def test_hash_is_md5_of_name(self):
        assert Name("John Doe").hash == hashlib.md5(b"John Doe").hexdigest()

    def test_empty_string_hash(self):
        assert Name("").hash == "d41d8cd98f00b204e9800998ecf8427e"

    def test_hash_is_32_lowercase_hex_chars(self):
        digest = Name("Jane Smith").hash
        assert len(digest) == 32
        assert digest == digest.lower()
        int(digest, 16)

    def test_same_name_same_hash(self):
        assert Name.make("test").hash == Name.make("test").hash

    def test_different_names_different_hashes(self):
        assert Name("seed1").hash != Name("seed2").hash

    def test_unicode_is_hashed_as_utf8(self):
        assert Name("Müller").hash == hashlib.md5("Müller".encode("utf-8")).hexdigest()

    def test_equal_names_compare_equal(self):
        assert Name("abc") == Name.make("abc")
        assert hash(Name("abc")) == hash(Name("abc"))


class TestInitials:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("John", "J"),
            ("John Doe", "JD"),
            ("John Middle Doe", "JMD"),
            ("  John   Doe  ", "JD"),
            ("john doe", "JD"),
            ("Max Östermann", "MÖ"),
            ("John 1st", "J1"),
            ("a b c d e f", "ABCDEF"),
            ("", ""),
            ("   ", ""),
            ("0", "0"),
        ],
    )
    def test_initials(self, raw, expected):
        assert Name(raw).initials() == expected

    def test_multibyte_first_character_is_not_truncated(self):
        assert Name("李 小龙").initials() == "李小"

    def test_parts_discard_empty_tokens(self):
        assert Name(" a\tb \n c ").parts == ("a", "b", "c")

    def test_name_is_preserved(self):
        assert Name("  raw  ").name == "  raw  "


class TestBaseColor:
    def test_reads_first_six_digits(self):
        assert Name("").base_color() == RGBColor.from_hex("#d41d8c")

    def test_offset(self):
        assert Name("").base_color(6).to_hex() == "#d98f00"

    def test_offsets_give_different_colors(self):
        name = Name("John Doe")
        assert name.base_color(0) != name.base_color(3)

    def test_same_name_same_color(self):
        assert Name("Jane").base_color() == Name("Jane").base_color()

    @pytest.mark.parametrize("offset", [-1, 26, 32])
    def test_out_of_range_offset_rejected(self, offset):
        with pytest.raises(ValueError):
            Name("x").base_color(offset)

    def test_last_valid_offset(self):
        assert Name("").base_color(25).to_hex() == "#" + Name("").hash[25:31]
