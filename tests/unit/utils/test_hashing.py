"""Tests for hashing utilities."""

import hashlib
import re

import pytest

from fullquerycache.utils.hashing import canonical_json, canonicalize, hash_value


class TestCanonicalJson:
    """Tests for canonical_json."""

    def test_compact_separators(self) -> None:
        """Test output has no whitespace between tokens."""
        assert canonical_json({"a": [1, 2], "b": None}) == '{"a":[1,2],"b":null}'

    def test_top_level_keeps_insertion_order(self) -> None:
        """Test the top-level mapping is not reordered."""
        assert canonical_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_nested_mappings_are_sorted(self) -> None:
        """Test nested mapping order does not affect the output."""
        first = canonical_json({"variables": {"b": 1, "a": {"y": 2, "x": 1}}})
        second = canonical_json({"variables": {"a": {"x": 1, "y": 2}, "b": 1}})

        assert first == second
        assert first == '{"variables":{"a":{"x":1,"y":2},"b":1}}'

    def test_list_order_is_preserved(self) -> None:
        """Test lists are not reordered."""
        assert canonical_json({"ids": [3, 1, 2]}) == '{"ids":[3,1,2]}'

    def test_non_ascii_is_kept(self) -> None:
        """Test non-ASCII text is emitted as-is."""
        assert canonical_json({"name": "José"}) == '{"name":"José"}'

    def test_rejects_non_json_values(self) -> None:
        """Test values JSON cannot represent are rejected."""
        with pytest.raises(TypeError):
            canonical_json({"value": object()})

    def test_rejects_nan(self) -> None:
        """Test NaN is rejected."""
        with pytest.raises(ValueError):
            canonical_json({"value": float("nan")})


class TestCanonicalize:
    """Tests for canonicalize."""

    def test_tuples_become_lists(self) -> None:
        """Test tuples serialize like lists."""
        assert canonicalize((1, {"b": 2, "a": 1})) == [1, {"a": 1, "b": 2}]

    def test_scalars_unchanged(self) -> None:
        """Test scalars pass through."""
        assert canonicalize("x") == "x"
        assert canonicalize(None) is None


class TestHashValue:
    """Tests for hash_value."""

    def test_is_sha256_of_canonical_json(self) -> None:
        """Test the digest is SHA-256 over the UTF-8 canonical JSON."""
        value = {"document": "{ a }", "extra": None}
        expected = hashlib.sha256(
            '{"document":"{ a }","extra":null}'.encode("utf-8")
        ).hexdigest()

        assert hash_value(value) == expected

    def test_fixed_length_lowercase_hex(self) -> None:
        """Test the digest format."""
        assert re.fullmatch(r"[0-9a-f]{64}", hash_value({"a": 1}))

    def test_deterministic(self) -> None:
        """Test repeated calls give the same digest."""
        assert hash_value({"a": {"b": 1, "c": 2}}) == hash_value({"a": {"c": 2, "b": 1}})

    def test_distinguishes_types(self) -> None:
        """Test values that print alike in Python still hash differently."""
        assert hash_value({"a": "1"}) != hash_value({"a": 1})
        assert hash_value({"a": None}) != hash_value({"a": "null"})
