""" Module for default memoization options stored in the .cfg file format:

    [memoize]
    cache_size = 128

    Only the [memoize] section is ours; other sections in the same file are preserved on write.
    A missing file, section, or option (or a value of None) means the cache is unbounded. """

from configparser import ConfigParser, Error as ConfigParserError
from typing import Optional

from .cache import MemoizeOptions

# Values of cache_size that mean "no bound".
_UNBOUNDED = {"", "none", "inf", "infinity"}


class MemoizeConfig:
    """ Reads and writes memoization options in one section of a CFG file.
        Values are checked on read, so a bad file fails where it is loaded rather than at first use. """

    def __init__(self, filename:str, sect="memoize", *, encoding='utf-8') -> None:
        self._filename = filename          # Full name of a file in CFG format. It need not exist yet.
        self._sect = sect                  # Name of our CFG file section.
        self._encoding = encoding          # Character encoding of the file.
        self._options = MemoizeOptions()   # Options from the last read (or set), unbounded by default.

    def _error(self, message:str) -> ValueError:
        return ValueError(f'{self._filename} [{self._sect}]: {message}')

    def _parse_size(self, s:str) -> Optional[int]:
        """ Convert the string form of cache_size to an int, or None for no bound. """
        s = s.strip()
        if s.lower() in _UNBOUNDED:
            return None
        try:
            return int(s)
        except ValueError:
            raise self._error(f'cache_size must be an integer or None, got {s!r}.') from None

    def _load_parser(self) -> ConfigParser:
        """ Parse the whole file. Raises OSError if it can't be opened. """
        parser = ConfigParser()
        with open(self._filename, 'r', encoding=self._encoding) as fp:
            parser.read_file(fp)
        return parser

    def read(self) -> bool:
        """ Try to read options from the CFG file. Return True if the file was read, False if it couldn't be opened.
            Unknown options, malformed files, and invalid cache sizes raise ValueError. """
        try:
            parser = self._load_parser()
        except OSError:
            return False
        except ConfigParserError as e:
            raise self._error(f'malformed file: {e}') from e
        if not parser.has_section(self._sect):
            self._options = MemoizeOptions()
            return True
        page = dict(parser[self._sect])
        s = page.pop("cache_size", "")
        if page:
            raise self._error(f'unknown option(s): {", ".join(page)}')
        try:
            self._options = MemoizeOptions(self._parse_size(s))
        except ValueError as e:
            raise self._error(str(e)) from e
        return True

    def write(self) -> bool:
        """ Write the current options to the CFG file, keeping any other sections. Return True if successful. """
        try:
            parser = self._load_parser()
        except (OSError, ConfigParserError):
            parser = ConfigParser()
        if not parser.has_section(self._sect):
            parser.add_section(self._sect)
        parser.set(self._sect, "cache_size", str(self._options.cache_size))
        try:
            with open(self._filename, 'w', encoding=self._encoding) as fp:
                parser.write(fp)
            return True
        except OSError:
            return False

    def options(self) -> MemoizeOptions:
        """ Return the options from the last read() or set_options(). """
        return self._options

    def set_options(self, options:MemoizeOptions) -> None:
        """ Store <options> as the current values, ready for write(). """
        self._options = options
