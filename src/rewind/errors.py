"""Exceptions raised by rewind.

History transitions themselves never fail; these cover configuration,
command parsing, and programming errors at the edges.
"""


class RewindError(RuntimeError):
    """Base class for rewind errors."""


class ConfigError(RewindError):
    """Invalid or unreadable configuration."""


class UnknownCommandError(RewindError):
    """reduce() received something that is not a history command."""


class CommandParseError(RewindError):
    """A textual step (e.g. 'set:B') could not be parsed."""
