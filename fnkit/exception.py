from traceback import format_exception
from types import TracebackType
from typing import Any, Callable, Type, Union

# Exception handler argument types, same as the arguments to __exit__ and sys.excepthook.
ExceptionArgs = (Type[BaseException], BaseException, TracebackType)
ExceptionStarArgs = Union[ExceptionArgs]  # *args type hint for same.


class ValidationError(TypeError):
    """ Raised by a validated function when its first argument fails the check and there is no fallback. """


class ExceptionHandler:
    """ Generic exception handler. Same signature as __exit__.
        Should return True if the exception was handled. """

    def __call__(self, *args:ExceptionStarArgs) -> bool:
        raise NotImplementedError


class ExceptionLogger(ExceptionHandler):
    """ Writes exception tracebacks to arbitrary callables. """

    def __init__(self, logger:Callable[[str], Any], *, max_frames=20) -> None:
        self._logger = logger          # String logger callable. Its return value is ignored.
        self._max_frames = max_frames  # Maximum number of stack frames to write.

    def __call__(self, *args:ExceptionStarArgs) -> bool:
        """ Write the stack trace to the logger. This does *not* count as handling the exception. """
        tb_lines = format_exception(*args, limit=self._max_frames)
        tb_text = "".join(tb_lines)
        self._logger(tb_text)
        return False
