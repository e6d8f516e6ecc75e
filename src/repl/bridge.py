"""REPL bridge for Io interpreters.

The bridge prepares code for a line-oriented interpreter and hands it to
a sender supplied by the caller. It never starts, owns or waits on an
interpreter process.
"""

import logging
from typing import Callable, List, Protocol, TextIO

from preprocessor.normalizer import normalize

logger = logging.getLogger(__name__)


class Sender(Protocol):
    """Anything that can deliver a payload to an interpreter."""

    def send(self, text: str) -> None:
        ...


class StreamSender:
    """Writes each payload as one line on a text stream."""

    def __init__(self, stream: TextIO):
        """Initialize the sender.

        Args:
            stream: Writable text stream (e.g. an interpreter's stdin or sys.stdout)
        """
        self.stream = stream

    def send(self, text: str) -> None:
        self.stream.write(text + "\n")
        self.stream.flush()


class ReplBridge:
    """Normalizes Io fragments and dispatches them through a Sender."""

    def __init__(self, sender: Sender, normalizer: Callable[[str], str] = normalize):
        """Initialize the bridge.

        Args:
            sender: Destination for normalized payloads
            normalizer: Function turning a fragment into a single line
        """
        self.sender = sender
        self.normalizer = normalizer
        self.sent = 0

    def send_region(self, text: str) -> str:
        """Normalize a fragment and send it.

        Blank and comment-only fragments normalize to an empty payload,
        which is not sent.

        Args:
            text: Io source fragment

        Returns:
            The normalized payload
        """
        payload = self.normalizer(text)
        if not payload:
            logger.debug("Skipping empty payload")
            return payload

        logger.debug(f"Sending payload ({len(payload)} chars)")
        self.sender.send(payload)
        self.sent += 1
        return payload

    def send_buffer(self, text: str) -> str:
        """Send a whole buffer as one payload."""
        return self.send_region(text)

    def send_line(self, lines: List[str], index: int) -> str:
        """Send a single buffer line."""
        return self.send_region(lines[index])
