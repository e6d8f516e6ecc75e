"""REPL bridge module for sending Io code to an interpreter."""

from .bridge import ReplBridge, Sender, StreamSender

__all__ = ["ReplBridge", "Sender", "StreamSender"]
