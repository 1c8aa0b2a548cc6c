"""String helpers used when shaping exported records."""

import re
from typing import Optional

_ID_SEPARATORS = re.compile(r'[\s_]')

def repeat(char: str, count: int) -> str:
    """Repeat a character, treating negative counts as zero."""
    return char * max(count, 0)

def to_id_string(name: Optional[str]) -> str:
    """
    Convert a scenario or feature name into a report identifier.
    
    Whitespace and underscores become hyphens and the result is lower-cased,
    so ``"Create User_Admin"`` becomes ``"create-user-admin"``.
    
    Args:
        name: The name to convert, may be None
        
    Returns:
        The identifier string, empty when name is None
    """
    if name is None:
        return ''
    return _ID_SEPARATORS.sub('-', name).lower()
