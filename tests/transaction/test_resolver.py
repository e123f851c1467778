"""
Tests for transaction type resolution.
"""

import pytest

from exee.transaction.resolver import TypeResolver, humanize
from exee.types import TransactionTypes, TypeRegistry, get_type_registry


@pytest.mark.parametrize(
    "name,expected",
    [
        ("SALE_TRANSACTION", "Sale Transaction"),
        ("VOID", "Void"),
        ("AUTHORIZATION_ONLY", "Authorization Only"),
        ("balance_inquiry", "Balance Inquiry"),
    ],
)
def test_humanize(name, expected):
    assert humanize(name) == expected


def test_resolve_known_type():
    resolver = TypeResolver()
    assert (
        resolver.resolve(TransactionTypes.SALE_TRANSACTION, "General Transaction")
        == "Sale Transaction"
    )


def test_resolve_unknown_type_returns_default_unchanged():
    resolver = TypeResolver()
    assert resolver.resolve("UNKNOWN_TOKEN", "General Transaction") == "General Transaction"
    # The fallback is not humanized
    assert resolver.resolve("UNKNOWN_TOKEN", "custom_ID") == "custom_ID"


def test_resolve_uses_constant_name_not_value():
    registry = TypeRegistry({"GIFT_CARD_RELOAD": "GCR9"})
    resolver = TypeResolver(registry)
    assert resolver.resolve("GCR9", "x") == "Gift Card Reload"
    assert resolver.resolve("GIFT_CARD_RELOAD", "x") == "x"


def test_resolver_defaults_to_global_registry():
    assert TypeResolver().registry is get_type_registry()
