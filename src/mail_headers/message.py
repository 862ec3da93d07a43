"""Header storage for a message under composition.

``MessageHeaders`` keeps address headers and generic headers apart. The
``set_header`` entry point accepts a raw header name and routes it to the
right store using :func:`mail_headers.models.is_addr_header`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

import structlog
from pydantic import BaseModel, Field, model_validator

from mail_headers.config import get_settings
from mail_headers.exceptions import HeaderValueError, UnknownHeaderError
from mail_headers.models import (
    AddrHeader,
    Header,
    Importance,
    importance_num_string,
    importance_string,
    importance_xprio_string,
    is_addr_header,
    is_gen_header,
)

logger = structlog.get_logger()

# A message has exactly one author and one envelope sender.
_SINGLE_ADDRESS_HEADERS = frozenset({AddrHeader.FROM, AddrHeader.ENVELOPE_FROM})


def _default_allow_custom_headers() -> bool:
    return get_settings().allow_custom_headers


def _check_values(name: str, values: tuple[str, ...]) -> list[str]:
    if not values:
        raise HeaderValueError(f"No value given for header {name}")
    for value in values:
        if not isinstance(value, str):
            raise HeaderValueError(
                f"Header {name} expects string values, got {type(value).__name__}"
            )
    return list(values)


class MessageHeaders(BaseModel):
    """Address and generic headers of a single message."""

    allow_custom_headers: bool = Field(
        default_factory=_default_allow_custom_headers,
        description="Whether names outside the generic vocabulary are stored",
    )
    address_headers: dict[AddrHeader, list[str]] = Field(
        default_factory=dict, description="Values of address-bearing headers"
    )
    generic_headers: dict[Header | str, list[str]] = Field(
        default_factory=dict,
        description="Values of generic headers, custom names stored verbatim",
    )

    @model_validator(mode="after")
    def check_stored_headers(self) -> MessageHeaders:
        """Apply the setter rules to headers passed to the constructor."""
        address_headers, generic_headers = self.address_headers, self.generic_headers
        self.address_headers, self.generic_headers = {}, {}
        for addr_key, addr_values in address_headers.items():
            self.set_addr_header(addr_key, *addr_values)
        for gen_key, gen_values in generic_headers.items():
            self.set_gen_header(gen_key, *gen_values)
        return self

    @classmethod
    def from_mapping(
        cls, headers: Mapping[str, str], *, allow_custom_headers: bool | None = None
    ) -> MessageHeaders:
        """Build a header set by routing every item of ``headers``.

        Args:
            headers: Header name to value mapping, e.g. parsed from a message.
            allow_custom_headers: Override the configured custom-header policy.

        Returns:
            MessageHeaders: The populated header set.
        """
        if allow_custom_headers is None:
            message = cls()
        else:
            message = cls(allow_custom_headers=allow_custom_headers)
        for key, value in headers.items():
            message.set_header(key, value)
        return message

    def set_header(self, key: str, *values: str) -> None:
        """Store values under a raw header name.

        Address header names go through :meth:`set_addr_header`, everything
        else through :meth:`set_gen_header`.

        Raises:
            HeaderValueError: If no value or a non-string value is given.
            UnknownHeaderError: If ``key`` is a custom name and custom headers
                are disabled.
        """
        if is_addr_header(key):
            logger.debug("header_routed", header=key, path="address")
            self.set_addr_header(AddrHeader(key), *values)
            return

        logger.debug("header_routed", header=key, path="generic")
        self.set_gen_header(key, *values)

    def set_gen_header(self, header: Header | str, *values: str) -> None:
        """Replace the values of a generic header.

        Raises:
            HeaderValueError: If no value or a non-string value is given.
            UnknownHeaderError: If ``header`` is an address header name, is
                empty, or is a custom name while custom headers are disabled.
        """
        key = self._generic_key(header)
        self.generic_headers[key] = _check_values(str(key), values)

    def set_addr_header(self, header: AddrHeader | str, *values: str) -> None:
        """Replace the values of an address header.

        Values are stored as given; address syntax is not checked. ``From``
        and ``EnvelopeFrom`` keep only the first value.

        Raises:
            HeaderValueError: If no value or a non-string value is given.
            UnknownHeaderError: If ``header`` is not an address header.
        """
        try:
            key = AddrHeader(header)
        except ValueError:
            raise UnknownHeaderError(f"{header} is not an address header") from None

        stored = _check_values(key.value, values)
        if key in _SINGLE_ADDRESS_HEADERS:
            stored = stored[:1]
        self.address_headers[key] = stored

    def get_gen_header(self, header: Header | str) -> list[str]:
        """Return a copy of the values of a generic header."""
        return list(self.generic_headers.get(header, []))

    def get_addr_header(self, header: AddrHeader | str) -> list[str]:
        """Return a copy of the values of an address header."""
        return list(self.address_headers.get(header, []))

    def set_importance(self, level: Importance | int) -> None:
        """Write the importance headers for ``level``.

        ``Importance``, ``Priority``, ``X-Priority`` and ``X-MSMail-Priority``
        are set together. Normal and unknown levels write nothing.
        """
        display = importance_string(level)
        if not display:
            return

        numeric = importance_num_string(level)
        self.set_gen_header(Header.IMPORTANCE, display)
        self.set_gen_header(Header.PRIORITY, numeric)
        self.set_gen_header(Header.X_PRIORITY, importance_xprio_string(level))
        self.set_gen_header(Header.X_MSMAIL_PRIORITY, numeric)
        logger.debug("importance_applied", importance=display)

    def set_user_agent(self, agent: str | None = None) -> None:
        """Set ``User-Agent`` and ``X-Mailer`` to ``agent`` or the configured default."""
        agent = agent or get_settings().default_user_agent
        self.set_gen_header(Header.USER_AGENT, agent)
        self.set_gen_header(Header.X_MAILER, agent)

    def set_organization(self, organization: str) -> None:
        """Set the ``Organization`` header."""
        self.set_gen_header(Header.ORGANIZATION, organization)

    def set_bulk(self) -> None:
        """Mark the message as bulk mail and ask servers not to auto-reply."""
        self.set_gen_header(Header.PRECEDENCE, "bulk")
        self.set_gen_header(Header.X_AUTO_RESPONSE_SUPPRESS, "All")

    def header_items(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(name, values)`` for every wire header, address headers first.

        ``EnvelopeFrom`` is skipped since it never appears in the message.
        """
        for addr_key, addr_values in self.address_headers.items():
            if addr_key is AddrHeader.ENVELOPE_FROM:
                continue
            yield addr_key.value, list(addr_values)
        for gen_key, gen_values in self.generic_headers.items():
            yield str(gen_key), list(gen_values)

    def _generic_key(self, header: Header | str) -> Header | str:
        if isinstance(header, Header):
            return header
        if is_gen_header(header):
            return Header(header)
        if is_addr_header(header):
            raise UnknownHeaderError(f"{header} is an address header, use set_addr_header()")
        if not header:
            raise UnknownHeaderError("Header name must not be empty")
        if not self.allow_custom_headers:
            raise UnknownHeaderError(f"Custom header {header} is not allowed")

        logger.debug("custom_header_stored", header=header)
        return header
