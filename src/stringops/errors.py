"""Exception hierarchy for stringops.

Text functions in `stringops.strings` never raise. The classes here cover the
console boundary, completion-signal misuse, and configuration loading.
"""

__docformat__ = 'google'

__all__ = [
    'StringOpsError',
    'InputStreamExhausted',
    'SignalError',
    'SignalAlreadyPublished',
    'SignalAlreadyReceived',
    'ConfigurationError'
]

class StringOpsError(Exception):
    """Base exception for all stringops errors.

    Args:
        message: Human-readable description
        code: Stable machine-readable identifier, also attached to log records
    """
    code: str = 'STRINGOPS_ERROR'

    def __init__(self, message: str, code: str = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_log_extra(self) -> dict:
        return {'error_code': self.code}

class InputStreamExhausted(StringOpsError):
    """The interactive source closed, failed, timed out or was cancelled
    before a non-empty line was read.

    `stringops.console.prompt_line` reports this as a diagnostic plus an
    empty result. It is not raised out of the library.

    Args:
        reason: Short description of why reading stopped
    """
    code = 'INPUT_STREAM_EXHAUSTED'

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

class SignalError(StringOpsError):
    """A completion signal was used outside its single-write, single-read contract."""
    code = 'SIGNAL_MISUSE'

class SignalAlreadyPublished(SignalError):
    code = 'SIGNAL_ALREADY_PUBLISHED'

    def __init__(self):
        super().__init__('A value has already been published to this completion signal.')

class SignalAlreadyReceived(SignalError):
    code = 'SIGNAL_ALREADY_RECEIVED'

    def __init__(self):
        super().__init__('This completion signal has already been received.')

class ConfigurationError(StringOpsError):
    """Settings file is malformed or missing required keys."""
    code = 'CONFIGURATION_ERROR'
