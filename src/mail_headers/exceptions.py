"""Custom exceptions for mail-headers."""


class MailHeadersError(Exception):
    """Base exception for all mail-headers errors."""


class ConfigurationError(MailHeadersError):
    """Exception raised for configuration related errors."""


class UnknownHeaderError(MailHeadersError):
    """Exception raised when a custom header is stored while custom headers are disabled."""


class HeaderValueError(MailHeadersError):
    """Exception raised when a header setter receives no value or a non-string value."""
