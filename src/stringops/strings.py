"""Pure text functions modelled on familiar scripting-language string methods.

Every function in this module takes text by value and returns a new value.
None of them perform I/O, keep state between calls, or raise for any `str`
input, including the empty string.

Case folding is ASCII-only: `to_lower`, `to_upper` and `capitalize_first` map
the letters A-Z/a-z and pass every other character through unchanged.

Search functions (`replace`, `split_on`, `count_occurrences`, `find_first`)
share one policy for an empty pattern: it never matches. To run any of these
concurrently, see `stringops.signals`.
"""

__docformat__ = 'google'

__all__ = [
    # Case
    'to_lower',
    'to_upper',
    'capitalize_first',
    # Trimming and editing
    'strip',
    'replace',
    # Splitting and joining
    'split_on',
    'join_with',
    # Searching
    'count_occurrences',
    'find_first',
    'has_prefix',
    'has_suffix',
    # Classification
    'is_alphabetic',
    'is_digits',
    'is_whitespace',
    # Composition
    'chain_operations'
]

from typing import Callable, Iterable, List
from stringops.patterns import NOT_FOUND, EMPTY, UPPER_TO_LOWER, LOWER_TO_UPPER

def to_lower(text: str) -> str:
    """
    Fold ASCII capitals to lowercase.

    Args:
        text: Any text

    Returns:
        Text with A-Z replaced by a-z; all other characters unchanged

    Example:
        >>> to_lower('Hello Go World')
        'hello go world'
        >>> to_lower('ÉCOLE')
        'École'
    """
    return text.translate(UPPER_TO_LOWER)

def to_upper(text: str) -> str:
    """
    Fold ASCII lowercase letters to capitals.

    Example:
        >>> to_upper('Hello Go World')
        'HELLO GO WORLD'
        >>> to_upper('straße')
        'STRAßE'
    """
    return text.translate(LOWER_TO_UPPER)

def capitalize_first(text: str) -> str:
    """
    Upper-case the first character and lower-case the rest, ASCII-only.

    Args:
        text: Any text

    Returns:
        Capitalized text, or empty text if input is empty

    Example:
        >>> capitalize_first('hELLO')
        'Hello'
        >>> capitalize_first('')
        ''
    """
    return to_upper(text[:1]) + to_lower(text[1:])

def strip(text: str) -> str:
    """
    Remove leading and trailing whitespace.

    Whitespace follows the Unicode classification used by `str.isspace`, so
    tabs, newlines and no-break spaces are all removed.

    Example:
        >>> strip('  Hello Go World  ')
        'Hello Go World'
        >>> strip('   ')
        ''
    """
    return text.strip()

def replace(text: str, old: str, new: str) -> str:
    """
    Replace every non-overlapping occurrence of a substring.

    Matching runs left to right and resumes immediately after each match, so
    occurrences of `old` that appear inside `new` are never re-matched.

    Args:
        text: Text to search
        old: Substring to replace. An empty string never matches.
        new: Replacement text

    Returns:
        Text with all occurrences replaced, or unmodified text if `old` is empty

    Example:
        >>> replace('go go go', 'go', 'Golang')
        'Golang Golang Golang'
        >>> replace('aaa', 'a', 'aa')
        'aaaaaa'
        >>> replace('abc', '', '-')
        'abc'
    """
    if not old:
        return text
    return text.replace(old, new)

def split_on(text: str, separator: str) -> List[str]:
    """
    Cut text at each non-overlapping occurrence of a separator.

    Empty segments between two separators are kept. A trailing empty segment
    (text that ends with the separator, or empty text) is dropped.

    Args:
        text: Text to split
        separator: Delimiter. An empty string never matches.

    Returns:
        List of segments in their original order

    Example:
        >>> split_on('a,b,c', ',')
        ['a', 'b', 'c']
        >>> split_on('a,,b,', ',')
        ['a', '', 'b']
        >>> split_on('', ',')
        []
    """
    if not separator:
        return [text] if text else []
    segments = text.split(separator)
    if segments[-1] == EMPTY:
        segments.pop()
    return segments

def join_with(segments: Iterable[str], separator: str) -> str:
    """
    Concatenate segments with a separator between consecutive elements.

    Example:
        >>> join_with(['Hello', 'Go', 'World'], '-')
        'Hello-Go-World'
        >>> join_with([], '-')
        ''
    """
    return separator.join(segments)

def count_occurrences(text: str, substr: str) -> int:
    """
    Count non-overlapping occurrences of a substring, scanning left to right.

    Example:
        >>> count_occurrences('aaaa', 'aa')
        2
        >>> count_occurrences('abc', '')
        0
    """
    if not substr:
        return 0
    return text.count(substr)

def find_first(text: str, substr: str) -> int:
    """
    Locate the first occurrence of a substring.

    Args:
        text: Text to search
        substr: Substring to find. An empty string never matches.

    Returns:
        Index of the first occurrence, or `stringops.patterns.NOT_FOUND` (-1)

    Example:
        >>> find_first('hello world', 'world')
        6
        >>> find_first('hello', 'xyz')
        -1
    """
    if not substr:
        return NOT_FOUND
    return text.find(substr)

def has_prefix(text: str, substr: str) -> bool:
    """
    Check whether text begins with a substring.

    Example:
        >>> has_prefix('golang', 'go')
        True
        >>> has_prefix('go', 'golang')
        False
    """
    if len(substr) > len(text):
        return False
    return text[:len(substr)] == substr

def has_suffix(text: str, substr: str) -> bool:
    """
    Check whether text ends with a substring.

    Example:
        >>> has_suffix('golang', 'lang')
        True
    """
    if len(substr) > len(text):
        return False
    return text[len(text) - len(substr):] == substr

def is_alphabetic(text: str) -> bool:
    """
    Check that every character is a Unicode letter.

    Unlike `str.isalpha`, empty text is vacuously True.

    Example:
        >>> is_alphabetic('Golang')
        True
        >>> is_alphabetic('')
        True
    """
    return all(char.isalpha() for char in text)

def is_digits(text: str) -> bool:
    """
    Check that every character is a Unicode decimal digit (category Nd).

    Superscripts and other numeric symbols such as '²' do not count.
    Empty text is vacuously True.

    Example:
        >>> is_digits('123')
        True
        >>> is_digits('12a')
        False
    """
    return all(char.isdecimal() for char in text)

def is_whitespace(text: str) -> bool:
    """
    Check that every character is Unicode whitespace. Empty text is vacuously True.

    Example:
        >>> is_whitespace('  \\t')
        True
    """
    return all(char.isspace() for char in text)

def chain_operations(text: str, operations: Iterable[Callable[[str], str]]) -> str:
    """
    Apply single-argument text functions left to right.

    Args:
        text: Initial text
        operations: Functions that each take and return text

    Returns:
        Output of the last operation, or the input if `operations` is empty

    Example:
        >>> chain_operations('  hELLO  ', [strip, capitalize_first])
        'Hello'
    """
    for operation in operations:
        text = operation(text)
    return text
