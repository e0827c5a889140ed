"""
Luhn (mod 10) checksum shared by personnummer and organisationsnummer.

The Luhn algorithm:
1. Walk the digits from the right, starting at index 0
2. Double every digit at an odd index
3. If doubling results in > 9, subtract 9
4. Sum all digits; the string is valid when the sum is divisible by 10
"""


def _luhn_sum(digits: str) -> int:
    total = 0
    for i, digit in enumerate(reversed(digits)):
        d = int(digit)
        if i % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total


def luhn(digits: str) -> bool:
    """
    Check a digit string against the Luhn algorithm.

    The caller guarantees a non-empty string of ASCII digits.
    """
    return _luhn_sum(digits) % 10 == 0


def luhn_checksum(digits: str) -> int:
    """Calculate the check digit that makes ``digits + check`` pass ``luhn``."""
    return (10 - _luhn_sum(digits + "0") % 10) % 10
