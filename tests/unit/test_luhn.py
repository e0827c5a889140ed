"""
Unit tests for the Luhn checksum.
"""

from sweid.swedish.luhn import luhn, luhn_checksum


class TestLuhn:
    """Tests for Luhn validation."""

    def test_valid(self):
        assert luhn("8507099805")
        assert luhn("5560747569")
        assert luhn("0")

    def test_invalid(self):
        assert not luhn("8507099800")
        assert not luhn("1")

    def test_odd_length(self):
        """Test that positions are counted from the right."""
        assert luhn("18")
        assert luhn("059")


class TestLuhnChecksum:
    """Tests for Luhn checksum calculation."""

    def test_known_checksums(self):
        """Test with known valid checksums."""
        assert luhn_checksum("811218987") == 6
        # Spotify AB: 556703-7485
        assert luhn_checksum("556703748") == 5

    def test_all_zeros(self):
        assert luhn_checksum("000000000") == 0

    def test_checksum_makes_valid(self):
        for digits in ("123456789", "900230123", "1", "12"):
            assert luhn(digits + str(luhn_checksum(digits)))
