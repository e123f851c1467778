"""
Resolution of transaction type codes to readable transaction identifiers.
"""

from typing import Optional

from exee.types import TypeRegistry, get_type_registry


def humanize(name: str) -> str:
    """Turn a constant name such as ``SALE_TRANSACTION`` into ``Sale Transaction``."""
    return " ".join(word.capitalize() for word in name.replace("_", " ").lower().split(" "))


class TypeResolver:
    """Maps transaction type codes to transaction identifiers."""

    def __init__(self, registry: Optional[TypeRegistry] = None):
        self.registry = registry or get_type_registry()

    def resolve(self, transaction_type: str, default: str) -> str:
        """Resolve a transaction type code.

        Args:
            transaction_type: The transaction type code, e.g. ``"CCR1"``.
            default: Identifier to use when the code is not registered.

        Returns:
            The humanized constant name, or ``default`` unchanged when the
            code is unknown.
        """
        name = self.registry.transaction_type_name(transaction_type)
        if not name:
            return default
        return humanize(name)
