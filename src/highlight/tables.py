"""Highlighting tables for Io source code.

Each category maps to the literal strings it covers. Categories are listed
in precedence order: when a span matches more than one category, the
earlier one wins. Comments are recognized by pattern instead of a word
list.
"""

from enum import Enum
from typing import Dict, Tuple


class HighlightCategory(Enum):
    """Semantic categories for highlighted spans, highest precedence first."""

    SELF_REFERENCE = "self-reference"
    COMMENT = "comment"
    OPERATOR = "operator"
    BOOLEAN = "boolean-literal"
    PROTOTYPE = "prototype-type"
    BUILTIN_MESSAGE = "builtin-message"


SELF_REFERENCE_WORDS: Tuple[str, ...] = ("self",)

OPERATORS: Tuple[str, ...] = (
    "::=", ":=", "=",
    "==", "!=", "<=", ">=", "<", ">",
    "+", "-", "*", "/", "%", "^", "**",
    "+=", "-=", "*=", "/=",
    "&&", "||", "!",
    "<<", ">>", "&", "|",
    "..", "?", "@", "@@",
)

BOOLEAN_WORDS: Tuple[str, ...] = ("true", "false", "nil")

PROTOTYPE_WORDS: Tuple[str, ...] = (
    "Array", "AudioDevice", "AudioMixer", "Block", "Box", "Buffer",
    "CFunction", "CGI", "Color", "Curses", "DBM", "DNSResolver",
    "DOConnection", "DOProxy", "DOServer", "Date", "Directory", "Duration",
    "DynLib", "Error", "Exception", "FFT", "File", "Fnmatch", "Font",
    "Future", "GL", "GLE", "GLScissor", "GLU", "GLUCylinder", "GLUQuadric",
    "GLUSphere", "GLUT", "Host", "Image", "Importer", "LinkList", "List",
    "Lobby", "Locals", "MD5", "MP3Decoder", "MP3Encoder", "Map", "Message",
    "Movie", "Notification", "Number", "Object", "OpenGL", "Point",
    "Protos", "Regex", "SGML", "SGMLElement", "SGMLParser", "SQLite",
    "Sequence", "Server", "ShowMessage", "SleepyCat", "SleepyCatCursor",
    "Socket", "SocketManager", "Sound", "Soup", "Store", "String", "Tree",
    "UDPSender", "UPDReceiver", "URL", "User", "Warning", "WeakLink",
    "Random", "BigNum",
)

BUILTIN_MESSAGES: Tuple[str, ...] = (
    "activate", "activeCoroCount", "and", "asString", "block", "break",
    "call", "catch", "clone", "collectGarbage", "compileString", "continue",
    "do", "doFile", "doMessage", "doString", "else", "elseif", "exit",
    "for", "foreach", "foreachReversed", "forward", "getEnvironmentVariable",
    "getSlot", "hasSlot", "if", "ifFalse", "ifNil", "ifNilEval", "ifTrue",
    "isActive", "isNil", "isResumable", "list", "message", "method", "or",
    "parent", "pass", "pause", "perform", "performWithArgList", "print",
    "println", "proto", "raise", "raiseResumable", "removeSlot", "resend",
    "resume", "return", "schedulerSleepSeconds", "sender",
    "setSchedulerSleepSeconds", "setSlot", "shallowCopy", "slotNames",
    "super", "system", "then", "thisBlock", "thisContext", "try", "type",
    "uniqueId", "updateSlot", "wait", "while", "write", "yield",
)

# Precedence order; COMMENT has no word list
CATEGORY_WORDS: Dict[HighlightCategory, Tuple[str, ...]] = {
    HighlightCategory.SELF_REFERENCE: SELF_REFERENCE_WORDS,
    HighlightCategory.COMMENT: (),
    HighlightCategory.OPERATOR: OPERATORS,
    HighlightCategory.BOOLEAN: BOOLEAN_WORDS,
    HighlightCategory.PROTOTYPE: PROTOTYPE_WORDS,
    HighlightCategory.BUILTIN_MESSAGE: BUILTIN_MESSAGES,
}
