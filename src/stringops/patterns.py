"""Constants and translation tables shared by the text functions in `stringops.strings`.
"""

__docformat__ = 'google'

from string import ascii_lowercase, ascii_uppercase
from typing import Dict

NOT_FOUND: int = -1
"""Sentinel index returned by `stringops.strings.find_first` when the substring is absent."""

EMPTY: str = ''
"""@private"""

## Case folding
UPPER_TO_LOWER: Dict[int, int] = str.maketrans(ascii_uppercase, ascii_lowercase)
"""Translation table folding ASCII capitals to lowercase.

Only the 26 letters A-Z are mapped. Non-ASCII letters (e.g. 'É', 'Ω') are
left untouched on purpose: full Unicode case folding is out of scope.

Used in `stringops.strings.to_lower` and `stringops.strings.capitalize_first`."""

LOWER_TO_UPPER: Dict[int, int] = str.maketrans(ascii_lowercase, ascii_uppercase)
"""Translation table folding ASCII lowercase letters to capitals.

Used in `stringops.strings.to_upper` and `stringops.strings.capitalize_first`."""
