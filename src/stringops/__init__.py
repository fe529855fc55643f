"""
String utilities modelled on familiar scripting-language string methods.

Every text function lives in `stringops.strings` and is re-exported here.
See individual module documentation for detailed information.
"""
from . import strings
from . import patterns
from . import console
from . import signals
from . import frames
from . import errors
from .strings import *
from .patterns import NOT_FOUND
from .console import prompt_line
from .signals import CompletionSignal, launch, run_async, fan_out

__all__ = [
    'strings',
    'patterns',
    'console',
    'signals',
    'frames',
    'errors',
    'NOT_FOUND',
    'prompt_line',
    'CompletionSignal',
    'launch',
    'run_async',
    'fan_out',
    *strings.__all__
]
