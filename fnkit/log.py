import sys
from threading import Lock
from time import strftime
from typing import TextIO


class StreamLogger:
    """ Writes trace messages to pre-opened text streams. Instances are callable, so one may be passed directly
        as the <log> argument of a memoized function. Many functions may share a logger, even across threads. """

    def __init__(self, *streams:TextIO, time_fmt="[%b %d %Y %H:%M:%S]: ", repeat_mark="*", prefix="") -> None:
        self._streams = streams          # One or more writable/appendable text streams.
        self._time_fmt = time_fmt        # Format for timestamps using time.strftime. If None, do not add timestamps.
        self._repeat_mark = repeat_mark  # Mark to replace repeated messages. If None, log all messages fully.
        self._prefix = prefix            # Text written before every message (after the timestamp).
        self._last_message = None        # Most recent unique message string.
        self._lock = Lock()              # Held for the whole of each message, so lines never interleave.

    def _format(self, message:str) -> str:
        """ Replace <message> with the repeat mark if identical to the last one, then add the prefix and time. """
        if self._repeat_mark is not None:
            if message == self._last_message:
                message = self._repeat_mark
            else:
                self._last_message = message
        message = self._prefix + message
        if self._time_fmt is not None:
            message = strftime(self._time_fmt) + message
        return message + '\n'

    def log(self, message:str) -> None:
        """ Format and write <message> to each stream in turn. """
        with self._lock:
            line = self._format(message)
            for stream in self._streams:
                try:
                    # Flush after every write so that messages don't get lost in the buffer on a crash.
                    stream.write(line)
                    stream.flush()
                except (OSError, ValueError):
                    # A closed or broken stream should not stop the others from getting the message.
                    continue

    __call__ = log

    def child(self, prefix:str) -> "StreamLogger":
        """ Return a logger to the same streams with <prefix> added after this logger's own. """
        logger = StreamLogger(*self._streams, time_fmt=self._time_fmt, repeat_mark=self._repeat_mark,
                              prefix=self._prefix + prefix)
        logger._lock = self._lock
        return logger


def open_logger(*filenames:str, encoding='utf-8', to_stdout=False, to_stderr=False, **kwargs) -> StreamLogger:
    """ Open a logger that appends to text files and/or prints to system streams.
        Log files will remain open until the program is closed. """
    streams = [open(f, 'a', encoding=encoding) for f in filenames]
    if to_stdout:
        streams.append(sys.stdout)
    if to_stderr:
        streams.append(sys.stderr)
    return StreamLogger(*streams, **kwargs)
