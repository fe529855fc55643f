"""One-shot completion signals and wrappers for running text functions as units of work.

The functions in `stringops.strings` are synchronous. This module is only for
callers that want to fan work out: `launch` runs an operation on its own thread
and hands back a `CompletionSignal`; `run_async` and `fan_out` do the same for
asyncio code.

Units of work never share state. If one operation needs another's output,
receive the first signal before launching the second:

    >>> from stringops.strings import strip, to_lower
    >>> stripped = launch(strip, '  Hello Go World  ').receive()
    >>> launch(to_lower, stripped).receive()
    'hello go world'
"""

__docformat__ = 'google'

__all__ = [
    'CompletionSignal',
    'launch',
    'run_async',
    'fan_out'
]

import asyncio
import logging
import threading
from concurrent.futures import Future, InvalidStateError
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple
from stringops.errors import SignalAlreadyPublished, SignalAlreadyReceived

logger = logging.getLogger(__name__)

class CompletionSignal:
    """
    Single-slot, single-use conduit from one producer to one consumer.

    At most one value or failure is ever published, and the consumer receives
    it exactly once. Both rules are enforced: breaking either raises a
    `stringops.errors.SignalError` subclass.

    Example:
        >>> signal = CompletionSignal()
        >>> signal.publish(3)
        >>> signal.receive()
        3
    """

    def __init__(self):
        self._future: Future = Future()
        self._received = False
        self._receive_lock = threading.Lock()

    @property
    def done(self) -> bool:
        """True once a value or failure has been published."""
        return self._future.done()

    def publish(self, value: Any):
        try:
            self._future.set_result(value)
        except InvalidStateError:
            raise SignalAlreadyPublished() from None

    def fail(self, exc: BaseException):
        """Publish a failure; `receive` re-raises it."""
        try:
            self._future.set_exception(exc)
        except InvalidStateError:
            raise SignalAlreadyPublished() from None

    def receive(self, timeout: Optional[float] = None) -> Any:
        """
        Wait for the published value and consume it.

        Args:
            timeout: Seconds to wait, or None to wait until published

        Returns:
            The published value

        Raises:
            TimeoutError: Nothing was published in time. The signal is not consumed.
            SignalAlreadyReceived: The value was already taken.
        """
        with self._receive_lock:
            if self._received:
                raise SignalAlreadyReceived()
            try:
                self._future.exception(timeout=timeout)
            except FutureTimeoutError:
                raise TimeoutError(f'No value published within {timeout} seconds') from None
            self._received = True
        return self._future.result()

def launch(operation: Callable[..., Any], *args, **kwargs) -> CompletionSignal:
    """
    Run an operation on its own daemon thread and publish the outcome.

    Args:
        operation: Any callable, typically a `stringops.strings` function
        *args: Positional arguments for the operation
        **kwargs: Keyword arguments for the operation

    Returns:
        A fresh signal that receives the result, or re-raises the exception

    Example:
        >>> from stringops.strings import count_occurrences
        >>> launch(count_occurrences, 'aaaa', 'aa').receive()
        2
    """
    signal = CompletionSignal()
    name = getattr(operation, '__name__', repr(operation))

    def unit_of_work():
        try:
            result = operation(*args, **kwargs)
        except BaseException as exc:
            # every outcome is published, SystemExit and KeyboardInterrupt included
            signal.fail(exc)
        else:
            signal.publish(result)

    logger.debug('Launching %s', name, extra={'operation': name})
    threading.Thread(target=unit_of_work, name=f'stringops-{name}', daemon=True).start()
    return signal

async def run_async(operation: Callable[..., Any], *args, **kwargs) -> Any:
    """Await an operation run in the default thread pool."""
    return await asyncio.to_thread(operation, *args, **kwargs)

async def fan_out(calls: Iterable[Tuple[Callable[..., Any], Sequence[Any]]]) -> List[Any]:
    """
    Run independent operations concurrently.

    Args:
        calls: Pairs of (operation, positional arguments)

    Returns:
        Results in the same order as `calls`

    Example:
        >>> from stringops.strings import to_upper, find_first
        >>> asyncio.run(fan_out([(to_upper, ['go']), (find_first, ['golang', 'lang'])]))
        ['GO', 2]
    """
    return list(await asyncio.gather(
        *(run_async(operation, *args) for operation, args in calls)
    ))
