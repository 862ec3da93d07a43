"""Header name vocabulary.

Two closed sets of header names are modelled here: generic textual headers
(``Header``) and headers whose value is one or more mail addresses
(``AddrHeader``). Every member's value is the exact wire-format name, so
``str(member)`` can be written straight into a message.
"""

from __future__ import annotations

from enum import Enum


class Header(str, Enum):
    """Generic (non-address) mail header names."""

    CONTENT_DESCRIPTION = "Content-Description"
    CONTENT_DISPOSITION = "Content-Disposition"
    CONTENT_ID = "Content-ID"
    CONTENT_LANGUAGE = "Content-Language"
    CONTENT_LOCATION = "Content-Location"
    CONTENT_TRANSFER_ENCODING = "Content-Transfer-Encoding"
    CONTENT_TYPE = "Content-Type"
    DATE = "Date"
    DISPOSITION_NOTIFICATION_TO = "Disposition-Notification-To"
    IMPORTANCE = "Importance"
    IN_REPLY_TO = "In-Reply-To"
    LIST_UNSUBSCRIBE = "List-Unsubscribe"
    LIST_UNSUBSCRIBE_POST = "List-Unsubscribe-Post"
    MESSAGE_ID = "Message-ID"
    MIME_VERSION = "MIME-Version"
    ORGANIZATION = "Organization"
    PRECEDENCE = "Precedence"
    PRIORITY = "Priority"
    REFERENCES = "References"
    SUBJECT = "Subject"
    USER_AGENT = "User-Agent"
    X_AUTO_RESPONSE_SUPPRESS = "X-Auto-Response-Suppress"
    X_MAILER = "X-Mailer"
    X_MSMAIL_PRIORITY = "X-MSMail-Priority"
    X_PRIORITY = "X-Priority"

    def __str__(self) -> str:
        return self.value


class AddrHeader(str, Enum):
    """Header names that carry one or more mail addresses."""

    # Not a wire header; holds the SMTP envelope sender (MAIL FROM).
    ENVELOPE_FROM = "EnvelopeFrom"
    FROM = "From"
    TO = "To"
    CC = "Cc"
    BCC = "Bcc"
    REPLY_TO = "Reply-To"

    def __str__(self) -> str:
        return self.value


_ADDR_HEADER_NAMES: frozenset[str] = frozenset(h.value for h in AddrHeader)
_GEN_HEADER_NAMES: frozenset[str] = frozenset(h.value for h in Header)


def canonical_name(header: Header | AddrHeader) -> str:
    """Return the wire-format name of a header."""
    return header.value


def is_addr_header(name: str) -> bool:
    """Tell whether ``name`` is the exact wire name of an address header.

    Matching is case-sensitive. Generic header names, unknown names and the
    empty string all return False.

    Args:
        name: Raw header name, e.g. taken from user input or a parsed message.

    Returns:
        True when the header must be stored through the address path.
    """
    return name in _ADDR_HEADER_NAMES


def is_gen_header(name: str) -> bool:
    """Tell whether ``name`` is part of the closed generic vocabulary."""
    return name in _GEN_HEADER_NAMES
