"""
Transaction and field type constants.

The registry maps each symbolic constant name to the value sent over the wire
and keeps a reverse index from value to name.
"""

from types import MappingProxyType
from typing import Mapping, Optional


class TransactionTypes:
    """Built-in transaction type codes."""

    SALE_TRANSACTION = "CCR1"
    RETURN_TRANSACTION = "CCR2"
    AUTHORIZATION_ONLY = "CCR5"
    VOID_TRANSACTION = "CCR7"
    BALANCE_INQUIRY = "CCR8"


class FieldTypes:
    """Built-in field names."""

    TRANSACTION_TYPE = "TRANSACTION_TYPE"
    CUSTOMER_TRANSACTION_ID = "CUSTOMER_TRANSACTION_ID"
    AMOUNT = "AMOUNT"
    ID = "ID"
    INVOICE_NUMBER = "INVOICE_NUMBER"
    CLERK_ID = "CLERK_ID"


DEFAULT_TRANSACTION_TYPES = MappingProxyType(
    {
        "SALE_TRANSACTION": TransactionTypes.SALE_TRANSACTION,
        "RETURN_TRANSACTION": TransactionTypes.RETURN_TRANSACTION,
        "AUTHORIZATION_ONLY": TransactionTypes.AUTHORIZATION_ONLY,
        "VOID_TRANSACTION": TransactionTypes.VOID_TRANSACTION,
        "BALANCE_INQUIRY": TransactionTypes.BALANCE_INQUIRY,
    }
)

DEFAULT_FIELD_TYPES = MappingProxyType(
    {
        "TRANSACTION_TYPE": FieldTypes.TRANSACTION_TYPE,
        "CUSTOMER_TRANSACTION_ID": FieldTypes.CUSTOMER_TRANSACTION_ID,
        "AMOUNT": FieldTypes.AMOUNT,
        "ID": FieldTypes.ID,
        "INVOICE_NUMBER": FieldTypes.INVOICE_NUMBER,
        "CLERK_ID": FieldTypes.CLERK_ID,
    }
)


class TypeRegistry:
    """Lookup tables for transaction and field type constants."""

    def __init__(
        self,
        transaction_types: Optional[Mapping[str, str]] = None,
        field_types: Optional[Mapping[str, str]] = None,
    ):
        """Initialize a new type registry.

        Args:
            transaction_types: Transaction constant names mapped to their codes.
            field_types: Field constant names mapped to their wire names.
        """
        self._transaction_types = {}
        self._transaction_names = {}
        self._field_types = {}
        self._field_names = {}

        for name, value in (transaction_types or {}).items():
            self.register_transaction_type(name, value)
        for name, value in (field_types or {}).items():
            self.register_field_type(name, value)

    @property
    def transaction_types(self) -> Mapping[str, str]:
        return MappingProxyType(self._transaction_types)

    @property
    def field_types(self) -> Mapping[str, str]:
        return MappingProxyType(self._field_types)

    def register_transaction_type(self, name: str, value: str) -> None:
        """Register a transaction type constant.

        The first name registered for a value wins the reverse lookup.
        """
        self._transaction_types[name] = value
        self._transaction_names.setdefault(value, name)

    def register_field_type(self, name: str, value: str) -> None:
        """Register a field type constant."""
        self._field_types[name] = value
        self._field_names.setdefault(value, name)

    def transaction_type_name(self, value: str) -> Optional[str]:
        """Get the constant name for a transaction type code, if known."""
        return self._transaction_names.get(value)

    def field_type_name(self, value: str) -> Optional[str]:
        """Get the constant name for a field wire name, if known."""
        return self._field_names.get(value)

    def field_type(self, name: str) -> str:
        """Get the wire name for a field constant.

        Raises:
            KeyError: If no field constant is registered under the name.
        """
        return self._field_types[name]


_default_registry = TypeRegistry(DEFAULT_TRANSACTION_TYPES, DEFAULT_FIELD_TYPES)


def get_type_registry() -> TypeRegistry:
    """Get the process-wide registry seeded with the built-in constants."""
    return _default_registry
