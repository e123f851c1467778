"""
Transaction assembly: type resolution, wire encoding and the fluent builder.
"""

from exee.transaction.builder import TransactionBuilder
from exee.transaction.encoder import (
    AFFIX,
    PREFIX,
    SEPARATOR,
    encode_body,
    encode_fields,
    prepare,
    sort_fields,
    wrap,
)
from exee.transaction.resolver import TypeResolver, humanize

__all__ = [
    "TransactionBuilder",
    "TypeResolver",
    "humanize",
    "PREFIX",
    "AFFIX",
    "SEPARATOR",
    "wrap",
    "encode_fields",
    "encode_body",
    "sort_fields",
    "prepare",
]
