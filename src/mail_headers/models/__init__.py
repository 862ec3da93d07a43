"""Header vocabulary and importance models for mail-headers.

This package holds the closed header-name vocabularies, the address-header
classifier and the importance encodings.
"""

from mail_headers.models.headers import (
    AddrHeader,
    Header,
    canonical_name,
    is_addr_header,
    is_gen_header,
)
from mail_headers.models.importance import (
    Importance,
    importance_num_string,
    importance_string,
    importance_xprio_string,
    parse_importance,
)

__all__ = [
    "AddrHeader",
    "Header",
    "Importance",
    "canonical_name",
    "importance_num_string",
    "importance_string",
    "importance_xprio_string",
    "is_addr_header",
    "is_gen_header",
    "parse_importance",
]
