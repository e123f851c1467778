"""
Wire encoding for terminal transactions.

A transaction travels as a single string: ``0,`` followed by the field
fragments, followed by ``99,""``. Each fragment is the field name, a comma and
the double-quoted value, with nothing between consecutive fragments::

    0,AMOUNT,"10.00"ID,"123"99,""

Values are not escaped; they must not contain quotes or commas.
"""

from typing import Any, Dict, List, Mapping, Union

PREFIX = "0,"
AFFIX = '99,""'
SEPARATOR = ","

Fields = Union[Mapping[str, Any], Any]


def wrap(value: Any) -> str:
    """Quote a value for the wire."""
    return f'"{value}"'


def encode_fields(fields: Fields) -> List[str]:
    """Encode a field set, or a single free-form value, into fragments.

    Args:
        fields: A mapping of field name to value, or a single scalar. A
            scalar is encoded on its own without a field name.

    Returns:
        The fragments in the mapping's iteration order.
    """
    if not isinstance(fields, Mapping):
        return [wrap(fields)]
    return [f"{name}{SEPARATOR}{wrap(value)}" for name, value in fields.items()]


def encode_body(fields: Fields) -> str:
    return "".join(encode_fields(fields))


def sort_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the fields ordered by name."""
    return {name: fields[name] for name in sorted(fields)}


def prepare(body: str) -> str:
    """Frame a transaction body with the protocol prefix and affix."""
    return f"{PREFIX}{body}{AFFIX}"
