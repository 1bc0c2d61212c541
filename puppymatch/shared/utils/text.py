"""
Text Checks

PostgreSQL text columns reject NUL and the driver cannot encode lone
surrogates, which JSON bodies may legally carry as "\\ud800" escapes.
Inputs are screened with these before they reach a query or a hash.
"""

import unicodedata


def is_utf8_encodable(value: str) -> bool:
    """False if the string holds a lone surrogate."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def has_control_characters(value: str) -> bool:
    """True for any C0/C1 control character (NUL, tab, newline...) or lone surrogate."""
    return any(unicodedata.category(char) in ("Cc", "Cs") for char in value)
