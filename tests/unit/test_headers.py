"""Unit tests for the header vocabularies and the address-header check."""

import pytest

from mail_headers.models import AddrHeader, Header, canonical_name, is_addr_header, is_gen_header

GEN_HEADER_NAMES = [
    (Header.CONTENT_DESCRIPTION, "Content-Description"),
    (Header.CONTENT_DISPOSITION, "Content-Disposition"),
    (Header.CONTENT_ID, "Content-ID"),
    (Header.CONTENT_LANGUAGE, "Content-Language"),
    (Header.CONTENT_LOCATION, "Content-Location"),
    (Header.CONTENT_TRANSFER_ENCODING, "Content-Transfer-Encoding"),
    (Header.CONTENT_TYPE, "Content-Type"),
    (Header.DATE, "Date"),
    (Header.DISPOSITION_NOTIFICATION_TO, "Disposition-Notification-To"),
    (Header.IMPORTANCE, "Importance"),
    (Header.IN_REPLY_TO, "In-Reply-To"),
    (Header.LIST_UNSUBSCRIBE, "List-Unsubscribe"),
    (Header.LIST_UNSUBSCRIBE_POST, "List-Unsubscribe-Post"),
    (Header.MESSAGE_ID, "Message-ID"),
    (Header.MIME_VERSION, "MIME-Version"),
    (Header.ORGANIZATION, "Organization"),
    (Header.PRECEDENCE, "Precedence"),
    (Header.PRIORITY, "Priority"),
    (Header.REFERENCES, "References"),
    (Header.SUBJECT, "Subject"),
    (Header.USER_AGENT, "User-Agent"),
    (Header.X_AUTO_RESPONSE_SUPPRESS, "X-Auto-Response-Suppress"),
    (Header.X_MAILER, "X-Mailer"),
    (Header.X_MSMAIL_PRIORITY, "X-MSMail-Priority"),
    (Header.X_PRIORITY, "X-Priority"),
]

ADDR_HEADER_NAMES = [
    (AddrHeader.ENVELOPE_FROM, "EnvelopeFrom"),
    (AddrHeader.FROM, "From"),
    (AddrHeader.TO, "To"),
    (AddrHeader.CC, "Cc"),
    (AddrHeader.BCC, "Bcc"),
    (AddrHeader.REPLY_TO, "Reply-To"),
]


class TestHeader:
    """Test suite for the generic header vocabulary."""

    @pytest.mark.parametrize(("header", "want"), GEN_HEADER_NAMES)
    def test_canonical_name(self, header: Header, want: str) -> None:
        assert canonical_name(header) == want
        assert str(header) == want

    def test_vocabulary_is_complete(self) -> None:
        """Every member is covered by the name table above."""
        assert {h for h, _ in GEN_HEADER_NAMES} == set(Header)

    def test_names_are_unique(self) -> None:
        names = [h.value for h in Header]
        assert len(names) == len(set(names))


class TestAddrHeader:
    """Test suite for the address header vocabulary."""

    @pytest.mark.parametrize(("header", "want"), ADDR_HEADER_NAMES)
    def test_canonical_name(self, header: AddrHeader, want: str) -> None:
        assert canonical_name(header) == want
        assert str(header) == want

    def test_vocabulary_is_complete(self) -> None:
        assert {h for h, _ in ADDR_HEADER_NAMES} == set(AddrHeader)

    def test_disjoint_from_generic_headers(self) -> None:
        assert not {h.value for h in AddrHeader} & {h.value for h in Header}


class TestIsAddrHeader:
    """Test suite for is_addr_header()."""

    @pytest.mark.parametrize("header", list(AddrHeader))
    def test_address_headers(self, header: AddrHeader) -> None:
        assert is_addr_header(canonical_name(header)) is True

    @pytest.mark.parametrize("header", list(Header))
    def test_generic_headers(self, header: Header) -> None:
        assert is_addr_header(canonical_name(header)) is False

    @pytest.mark.parametrize("name", ["", "Nonexistent-Header", "to", "FROM", "reply-to", " To"])
    def test_unknown_or_differently_cased_names(self, name: str) -> None:
        assert is_addr_header(name) is False

    def test_is_gen_header(self) -> None:
        assert is_gen_header("Subject") is True
        assert is_gen_header("To") is False
        assert is_gen_header("X-Custom") is False
