"""Unit tests for safeguard.core.charsets module."""

from safeguard.core.charsets import contains, union
from safeguard.core.encoding import Encoder


class TestUnion:
    """Test character set union."""

    def test_union_sorted_and_deduplicated(self):
        """Test union result is strictly ascending."""
        result = union("cab", "bdc")
        assert result == "abcd"
        assert all(x < y for x, y in zip(result, result[1:]))

    def test_union_commutative(self):
        """Test union ignores argument order."""
        a = "zyx123"
        b = "1aZ"
        assert set(union(a, b)) == set(union(b, a))
        assert union(a, b) == union(b, a)

    def test_union_idempotent(self):
        """Test union of a set with itself."""
        a = "hello"
        assert union(a, a) == "ehlo"

    def test_union_with_empty(self):
        """Test union with an empty set."""
        assert union("", "ba") == "ab"
        assert union("", "") == ""

    def test_alphanumerics(self):
        """Test the composed alphanumeric set."""
        assert Encoder.CHAR_ALPHANUMERICS == (
            "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
        )
        assert Encoder.CHAR_ALPHANUMERICS.isalnum()


class TestContains:
    """Test character set membership."""

    def test_contains(self):
        assert contains("abc", "b")
        assert not contains("abc", "d")
        assert not contains("", "a")
