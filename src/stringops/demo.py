"""Demonstration harness: read a line, run every text function on it, print labeled results.

Run with `python -m stringops` or the `stringops` console script. When no line
can be read (e.g. stdin is closed), the configured sample text is used instead.
"""

__docformat__ = 'google'

__all__ = [
    'run_demo',
    'main'
]

import logging
import sys
from typing import List, Optional, Tuple
from stringops.config import Settings, load_settings
from stringops.console import prompt_line
from stringops.logs import setup_logging
from stringops.signals import launch
from stringops.strings import (
    to_lower,
    to_upper,
    strip,
    replace,
    split_on,
    join_with,
    count_occurrences,
    find_first,
    has_prefix,
    has_suffix,
    is_alphabetic,
    is_digits,
    is_whitespace,
    capitalize_first
)

logger = logging.getLogger(__name__)

def run_demo(text: str, settings: Settings) -> List[Tuple[str, object]]:
    """
    Run each text function once on `text`.

    Independent operations are launched together; the split/join pair is
    sequenced explicitly because join consumes split's output.

    Returns:
        (label, result) pairs in display order

    Example:
        >>> results = dict(run_demo('  Hello Go World  ', load_settings()))
        >>> results['Joined']
        'Hello-Go-World'
    """
    old, new = settings.replace_old, settings.replace_new
    split_separator, join_separator = settings.split_separator, settings.join_separator

    stripped = launch(strip, text).receive()
    independent = [
        ('Lowercase', launch(to_lower, text)),
        ('Uppercase', launch(to_upper, text)),
        ('Stripped', launch(strip, text)),
        (f'Replaced {old!r} -> {new!r}', launch(replace, text, old, new)),
        (f'Count of {old!r}', launch(count_occurrences, text, old)),
        (f'First {old!r} at', launch(find_first, text, old)),
        (f'Starts with {old!r}', launch(has_prefix, stripped, old)),
        (f'Ends with {old!r}', launch(has_suffix, stripped, old)),
        ('Alphabetic', launch(is_alphabetic, stripped)),
        ('Digits', launch(is_digits, stripped)),
        ('Whitespace', launch(is_whitespace, text)),
        ('Capitalized', launch(capitalize_first, stripped)),
    ]
    results = [(label, signal.receive()) for label, signal in independent]

    segments = launch(split_on, stripped, split_separator).receive()
    results.append(('Split', segments))
    results.append(('Joined', launch(join_with, segments, join_separator).receive()))
    return results

def main(settings: Optional[Settings] = None, source=None, sink=None) -> int:
    """Entry point for `python -m stringops`. Always returns 0 on normal completion."""
    settings = settings or load_settings()
    sink = sys.stdout if sink is None else sink
    setup_logging(settings.log_level, settings.log_format)

    text = prompt_line('Enter some text', source=source, sink=sink, settings=settings)
    if not text:
        logger.debug('No input read; using sample text')
        text = settings.sample_text
    print('You entered:', repr(text), file=sink)

    for label, result in run_demo(text, settings):
        print(f'{label}:', repr(result), file=sink)
    return 0
