from blinker import Signal
from typing import Protocol

from PyShogun.ShogunError import CodingPath, FormatCodingPath


class LoggerProtocol(Protocol):
    """Protocol for objects that can be used as loggers"""
    def warning(self, msg : object, *args, **kwargs) -> None: ...


class DecodingEvents:
    """
    Container for blinker signals emitted while decoding documents.

    Decoding a sequence with failure isolation drops elements that cannot be
    decoded. Subscribe to element_skipped to find out which ones, e.g. to count
    them or to report them to the user.

    Signals:
        element_skipped(sender, path, error):
            Emitted for each sequence element that failed to decode and was dropped
    """
    element_skipped: Signal

    def __init__(self):
        self.element_skipped = Signal("decoding-element-skipped")

    def connect_logger(self, logger : LoggerProtocol):
        """
        Connect a custom logger to the element_skipped signal.

        Args:
            logger: A logger-like object with a warning method
        """
        def skipped_wrapper(sender, path : CodingPath, error : Exception):
            logger.warning(f"Item skipped at {FormatCodingPath(path)}: {error}")

        # Use weak=False to prevent garbage collection of the closure
        self.element_skipped.connect(skipped_wrapper, weak=False)
