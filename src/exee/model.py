"""
The Model capability accepted by the transaction builder.

Any object exposing attribute storage and self-validation qualifies; the
AttributeModel class is a ready-made implementation of that contract.
"""

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Protocol, Tuple, runtime_checkable

from exee.errors import ValidationError


@runtime_checkable
class Model(Protocol):
    """Protocol for data holders that can be encoded into a transaction."""

    def get_attributes(self) -> Dict[str, Any]:
        """Return all attributes as a name to value mapping."""
        ...

    def get_attribute(self, name: str) -> Any:
        """Return one attribute, or None when it is unset."""
        ...

    def set_attribute(self, name: str, value: Any) -> None:
        """Set one attribute."""
        ...

    def validate(self, attributes: Mapping[str, Any]) -> bool:
        """Check the attributes against the required-field contract."""
        ...

    def get_missing_fields(self) -> List[str]:
        """Return the required fields missing at the last validation."""
        ...


class AttributeModel:
    """A simple attribute bag with a list of required fields.

    Subclasses declare ``required_fields``; a field counts as missing when it
    is absent, None or an empty string.
    """

    required_fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, /, **kwargs: Any):
        self._attributes: Dict[str, Any] = {}
        self._missing_fields: List[str] = []
        for name, value in {**(attributes or {}), **kwargs}.items():
            self.set_attribute(name, value)

    def get_attributes(self) -> Dict[str, Any]:
        return dict(self._attributes)

    def get_attribute(self, name: str) -> Any:
        return self._attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        self._attributes[name] = value

    def validate(self, attributes: Mapping[str, Any]) -> bool:
        self._missing_fields = [
            field
            for field in self.required_fields
            if attributes.get(field) is None or attributes.get(field) == ""
        ]
        return not self._missing_fields

    def get_missing_fields(self) -> List[str]:
        return list(self._missing_fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._attributes!r})"


def validate_model(model: Any) -> bool:
    """Validate a model against its own required-field contract.

    Args:
        model: The object to validate.

    Returns:
        True when the model is valid.

    Raises:
        ValidationError: If the object is not a Model or fails validation.
    """
    if not isinstance(model, Model):
        model_type = type(model).__name__
        raise ValidationError(f"Unknown model type: {model_type}", model_type=model_type)

    if model.validate(model.get_attributes()):
        return True

    missing_fields = list(model.get_missing_fields())
    model_type = type(model).__name__
    raise ValidationError(
        f"Unable to validate {model_type}, missing required fields: "
        f"{', '.join(missing_fields)}",
        missing_fields=missing_fields,
        model_type=model_type,
    )
