"""
exee: transaction encoding and single-shot socket client for legacy
transaction terminals.
"""

from exee.client import Client
from exee.errors import (
    ConfigurationError,
    ExeeError,
    TimeoutError,
    TransportError,
    ValidationError,
)
from exee.model import AttributeModel, Model, validate_model
from exee.transaction import TransactionBuilder, TypeResolver
from exee.types import FieldTypes, TransactionTypes, TypeRegistry, get_type_registry

__version__ = "0.1.0"

__all__ = [
    "Client",
    "TransactionBuilder",
    "TypeResolver",
    "Model",
    "AttributeModel",
    "validate_model",
    "TypeRegistry",
    "TransactionTypes",
    "FieldTypes",
    "get_type_registry",
    "ExeeError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "TimeoutError",
]
