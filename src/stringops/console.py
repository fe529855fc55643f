"""Console input boundary.

`prompt_line` is the only function in stringops that performs I/O. The source
and sink default to stdin/stdout but can be any objects with `readline()` and
`write()`, which is how the tests drive it.

A plain call blocks until a non-empty line arrives or the source is exhausted.
Passing `timeout` and/or `cancel` moves the blocking read onto a helper thread
so the caller can give up; giving up is reported the same way as an exhausted
stream. A line that arrives after the caller gave up is returned by the next
prompt on the same source.
"""

__docformat__ = 'google'

__all__ = [
    'prompt_line'
]

import logging
import queue
import sys
import threading
import time
from functools import partial
from typing import Callable, Dict, Optional, Tuple
from stringops.config import Settings, load_settings
from stringops.errors import InputStreamExhausted

logger = logging.getLogger(__name__)

POLL_INTERVAL: float = 0.05
"""Seconds between checks of the cancel event while waiting for a line."""

_pending: Dict[int, Tuple[object, queue.Queue]] = {}
"""Source and result queue of the outstanding helper-thread read, keyed by `id(source)`."""
_pending_lock = threading.Lock()

def prompt_line(
        prompt: str,
        source=None,
        sink=None,
        timeout: Optional[float] = None,
        cancel: Optional[threading.Event] = None,
        settings: Optional[Settings] = None
        ) -> str:
    """
    Display a prompt and read one non-empty line.

    Empty lines are rejected with a retry message and reading continues,
    without limit. If the source ends, fails, times out or is cancelled first,
    a diagnostic is written to the sink and an empty string is returned.

    Args:
        prompt: Text shown before the prompt suffix (': ' by default)
        source: Line source, `sys.stdin` by default
        sink: Output stream, `sys.stdout` by default
        timeout: Seconds to wait in total before giving up, or None to wait forever
        cancel: Event that abandons the read once set
        settings: Message texts, `stringops.config.load_settings()` by default

    Returns:
        The line without its line terminator, or '' if no line could be read

    Example:
        >>> import io
        >>> prompt_line('Enter some text', io.StringIO('\\nhi\\n'), io.StringIO())
        'hi'
    """
    settings = settings or load_settings()
    source = sys.stdin if source is None else source
    sink = sys.stdout if sink is None else sink

    _write(sink, prompt + settings.prompt_suffix)
    if timeout is None and cancel is None and not _has_pending_read(source):
        read = partial(_read_line, source)
    else:
        read = _deadline_reader(source, timeout, cancel)

    attempt = 0
    while True:
        attempt += 1
        try:
            line = _drop_terminator(read())
        except InputStreamExhausted as exc:
            _write(sink, f'{settings.diagnostic_message} {exc.reason}\n')
            logger.warning(
                'Input stream exhausted after %d attempt(s): %s', attempt, exc.reason,
                extra={**exc.to_log_extra(), 'attempt': attempt}
            )
            return ''
        if line:
            return line
        logger.debug('Empty input rejected', extra={'attempt': attempt})
        _write(sink, settings.retry_message)

def _write(sink, text: str):
    sink.write(text)
    sink.flush()

def _drop_terminator(line: str) -> str:
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line

def _read_line(source) -> str:
    try:
        line = source.readline()
    except (OSError, ValueError) as err:
        # ValueError: I/O operation on closed file
        raise InputStreamExhausted(str(err)) from err
    if line == '':
        raise InputStreamExhausted('end of input')
    return line

def _deadline_reader(source, timeout: Optional[float], cancel: Optional[threading.Event]) -> Callable[[], str]:
    """
    Build a read function that waits on a helper thread until a deadline or cancellation.

    The deadline covers the whole prompt, not each retry. A read that is given
    up on stays pending for its source, so the next prompt on that source
    collects the line instead of starting a second `readline()`.
    """
    deadline = None if timeout is None else time.monotonic() + timeout

    def read() -> str:
        results = _pending_read(source)

        while True:
            if cancel is not None and cancel.is_set():
                raise InputStreamExhausted('input cancelled')
            wait = POLL_INTERVAL if cancel is not None else None
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise InputStreamExhausted(f'no input within {timeout} seconds')
                wait = remaining if wait is None else min(wait, remaining)
            try:
                kind, value = results.get(timeout=wait)
            except queue.Empty:
                continue
            with _pending_lock:
                _pending.pop(id(source), None)
            if kind == 'exhausted':
                raise value
            return value

    return read

def _has_pending_read(source) -> bool:
    with _pending_lock:
        return id(source) in _pending

def _pending_read(source) -> queue.Queue:
    """
    Return the result queue of the outstanding read on `source`, starting one if there is none.

    The entry keeps a reference to the source, so its id cannot be reused
    while the entry exists.
    """
    with _pending_lock:
        entry = _pending.get(id(source))
        if entry is not None:
            return entry[1]
        results = queue.Queue(maxsize=1)
        _pending[id(source)] = (source, results)

    def worker():
        try:
            results.put(('line', _read_line(source)))
        except InputStreamExhausted as exc:
            results.put(('exhausted', exc))

    threading.Thread(target=worker, name='stringops-prompt', daemon=True).start()
    return results
