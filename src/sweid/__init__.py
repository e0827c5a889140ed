"""
sweid - Swedish identifier and date validators

- Personnummer and samordningsnummer parsing, validation and formatting
- Organisationsnummer parsing, validation and formatting
- Swedish public holidays and business days
"""

from sweid.swedish import *  # noqa: F401,F403
from sweid.swedish import __all__ as _swedish_all

__version__ = "0.1.0"

__all__ = ["__version__", *_swedish_all]
