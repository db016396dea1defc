"""Exception types raised by clipmade.

Startup failures (another instance running, no clipboard, hotkey not
registered) and storage write failures are fatal; the CLI turns them into a
message on stderr and a non-zero exit status.
"""


class ClipmadeError(Exception):
    """Base class for clipmade errors."""


class StorageWriteError(ClipmadeError):
    """The history file could not be written."""


class ClipboardError(ClipmadeError):
    """A clipboard read or write failed."""


class ClipboardUnavailableError(ClipboardError):
    """No usable clipboard mechanism exists on this system."""


class HotkeyRegistrationError(ClipmadeError):
    """The global capture hotkey could not be registered."""


class AlreadyRunningError(ClipmadeError):
    """Another clipmade instance holds the single-instance lock."""
