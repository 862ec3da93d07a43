"""mail-headers - mail header vocabulary, classification and importance encoding.

This package provides the closed set of header names used when composing a
message, tells address headers apart from generic ones, renders message
importance for the different mail clients and routes raw header names to the
matching storage of a message.
"""

__version__ = "0.1.0"
__author__ = "Trickl"

from mail_headers.config import Settings, get_settings
from mail_headers.message import MessageHeaders
from mail_headers.models import AddrHeader, Header, Importance, is_addr_header

__all__ = [
    "AddrHeader",
    "Header",
    "Importance",
    "MessageHeaders",
    "Settings",
    "get_settings",
    "is_addr_header",
    "__version__",
    "__author__",
]
