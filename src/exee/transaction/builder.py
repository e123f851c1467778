"""
Fluent assembly of a transaction from typed field data.
"""

from typing import Any, List, Optional

from exee.config import DEFAULT_TRANSACTION_ID
from exee.model import Model, validate_model
from exee.transaction.encoder import Fields, encode_fields, prepare, sort_fields
from exee.transaction.resolver import TypeResolver
from exee.types import FieldTypes, TypeRegistry


class TransactionBuilder:
    """
    Accumulates encoded field fragments for one transaction.

    Fragments are appended in call order and only joined into the wire string
    when it is read, so ``reset`` can start a fresh transaction on the same
    session without losing its identifier or settings.
    """

    def __init__(
        self,
        transaction_id: Optional[str] = None,
        reorder: bool = True,
        type_registry: Optional[TypeRegistry] = None,
        logger: Any = None,
    ):
        """Initialize a new transaction builder.

        Args:
            transaction_id: Identifier used when a model carries none.
            reorder: Whether model attributes are sorted by field name.
            type_registry: Registry used to resolve type codes.
            logger: Optional logging facade.
        """
        self.transaction_id = transaction_id or DEFAULT_TRANSACTION_ID
        self.transaction_type: Optional[str] = None
        self.reorder = reorder
        self.resolver = TypeResolver(type_registry)
        self._fragments: List[str] = []
        self._models: List[Model] = []
        self._logger = logger

    @property
    def type_registry(self) -> TypeRegistry:
        return self.resolver.registry

    @property
    def fragments(self) -> List[str]:
        return list(self._fragments)

    @property
    def models(self) -> List[Model]:
        return list(self._models)

    @property
    def transaction_string(self) -> str:
        """The transaction body encoded so far, without prefix and affix."""
        return "".join(self._fragments)

    @property
    def encoded(self) -> str:
        """The complete wire string."""
        return self.prepare()

    def prepare(self, body: Optional[str] = None) -> str:
        """Frame a body, by default the accumulated one, for the wire."""
        return prepare(self.transaction_string if body is None else body)

    def set_transaction_type(self, transaction_type: str) -> "TransactionBuilder":
        """
        Set the transaction type and encode it into the transaction.

        The transaction identifier is derived from the type when the type is
        registered; otherwise the current identifier is kept. The type code is
        appended straight away as a free-form value.

        Args:
            transaction_type: The transaction type code.

        Returns:
            The builder, for chaining.
        """
        self.transaction_type = transaction_type
        self.set_transaction_id(self.transaction_id_from_type(transaction_type))
        self.add_transaction_fields(transaction_type)

        if self._logger:
            self._logger.info(
                "transaction.type_set",
                transaction_type=transaction_type,
                transaction_id=self.transaction_id,
            )
        return self

    def set_transaction_id(self, transaction_id: str) -> "TransactionBuilder":
        self.transaction_id = transaction_id
        return self

    def set_reorder(self, reorder: bool) -> "TransactionBuilder":
        self.reorder = reorder
        return self

    def transaction_id_from_type(self, transaction_type: str) -> str:
        return self.resolver.resolve(transaction_type, self.transaction_id)

    def field_name_from_type(self, value: str) -> Optional[str]:
        """Get the field constant name registered for a wire field name."""
        return self.type_registry.field_type_name(value)

    def with_model(self, model: Model, with_validation: bool = True) -> "TransactionBuilder":
        """
        Encode a model's attributes into the transaction.

        The model is validated first, so a failing model leaves the
        transaction untouched. A model without a customer transaction id gets
        the session's transaction identifier.

        Args:
            model: The model to encode.
            with_validation: Whether to validate the model first.

        Returns:
            The builder, for chaining.

        Raises:
            ValidationError: If validation is enabled and the model fails it.
        """
        if with_validation:
            validate_model(model)

        id_field = self._customer_transaction_id_field()
        if not model.get_attribute(id_field):
            model.set_attribute(id_field, self.transaction_id)

        data = model.get_attributes()
        if self.reorder:
            data = sort_fields(data)

        self._fragments.extend(encode_fields(data))
        self._models.append(model)

        if self._logger:
            self._logger.info(
                "transaction.model_attached",
                model_type=type(model).__name__,
                field_count=len(data),
                validated=with_validation,
            )
        return self

    def add_transaction_fields(self, data: Fields) -> "TransactionBuilder":
        """
        Append fields, or a single free-form value, to the transaction.

        Fields are appended in the order given; no reordering is applied.
        """
        fragments = encode_fields(data)
        self._fragments.extend(fragments)

        if self._logger:
            self._logger.debug("transaction.fields_added", fragment_count=len(fragments))
        return self

    def validate_models(self) -> bool:
        """Validate every model attached to this transaction."""
        for model in self._models:
            validate_model(model)
        return True

    def reset(self) -> "TransactionBuilder":
        """Discard the accumulated fields and attached models."""
        self._fragments.clear()
        self._models.clear()
        return self

    def _customer_transaction_id_field(self) -> str:
        try:
            return self.type_registry.field_type("CUSTOMER_TRANSACTION_ID")
        except KeyError:
            return FieldTypes.CUSTOMER_TRANSACTION_ID
