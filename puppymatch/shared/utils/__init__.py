"""
Utilities

Usage:
======
    from puppymatch.shared.utils.security import SecurityUtils
    from puppymatch.shared.utils.text import has_control_characters
"""

from puppymatch.shared.utils.security import SecurityUtils
from puppymatch.shared.utils.text import has_control_characters, is_utf8_encodable

__all__ = [
    "SecurityUtils",
    "has_control_characters",
    "is_utf8_encodable",
]
