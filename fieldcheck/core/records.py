"""
Record adapters.

Normalize the two supported input shapes behind one accessor,
``Record.get(key) -> str``:
- StructuredRecord: parsed JSON-like documents (nested, scalar leaves
  coerced to string)
- FormRecord: flat field -> string maps such as decoded form-post bodies

``get`` never raises and never returns None. An absent field and a field
holding an empty string are indistinguishable downstream.
"""

import json
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, Mapping, Union
from urllib.parse import parse_qsl

from fieldcheck.core.exceptions import RecordFormatException
from fieldcheck.utils.logger import setup_logger

logger = setup_logger(__name__)


class Record(ABC):
    """Read-only string accessor over caller-owned input data"""

    @abstractmethod
    def get(self, key: str) -> str:
        """
        Get a field value as a string.

        Args:
            key: Field name

        Returns:
            Field value, or "" when absent or not representable as a string
        """
        pass

    def __getitem__(self, key: str) -> str:
        return self.get(key)


class StructuredRecord(Record):
    """
    Record over a structured document.

    Keys are looked up directly first; a missing key containing dots is
    then walked as a path: "address.city", "items.0.name".
    """

    def __init__(self, document: Any):
        self.document = document

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> 'StructuredRecord':
        """
        Build a record from JSON text.

        Raises:
            RecordFormatException: If the text is not valid JSON
        """
        try:
            return cls(json.loads(text))
        except (ValueError, RecursionError) as e:
            raise RecordFormatException(f"Invalid JSON document: {e}") from e

    def get(self, key: str) -> str:
        if isinstance(self.document, Mapping) and key in self.document:
            return self._stringify(self.document[key])
        if '.' in key:
            return self._stringify(self._get_path_value(key))
        return ""

    def _get_path_value(self, field_path: str) -> Any:
        """
        Get value using dot notation.

        Returns:
            Field value or None if not found
        """
        value = self.document
        for key in field_path.split('.'):
            if isinstance(value, Mapping):
                value = value.get(key)
            elif isinstance(value, (list, tuple)) and key.isascii() and key.isdigit() and int(key) < len(value):
                value = value[int(key)]
            else:
                return None

            if value is None:
                return None

        return value

    @staticmethod
    def _stringify(value: Any) -> str:
        """Coerce a scalar leaf to text; containers and null become empty"""
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            if value.is_integer():
                return str(int(value))
            return repr(value)
        if isinstance(value, Decimal):
            return str(value)
        return ""


class FormRecord(Record):
    """Record over a flat field -> string mapping"""

    def __init__(self, data: Mapping[str, str]):
        self.data = data

    @classmethod
    def from_query_string(cls, body: Union[str, bytes]) -> 'FormRecord':
        """
        Build a record from an application/x-www-form-urlencoded body.

        Repeated keys keep their last value; blank values are kept.
        """
        if isinstance(body, bytes):
            body = body.decode('utf-8', errors='replace')
        return cls(dict(parse_qsl(body, keep_blank_values=True)))

    def get(self, key: str) -> str:
        value = self.data.get(key)
        if isinstance(value, str):
            return value
        return ""


RecordInput = Union[Record, Mapping[str, Any], str, bytes]


def as_record(data: RecordInput) -> Record:
    """
    Select the record adapter for an input value.

    - Record: returned unchanged
    - str / bytes: parsed as JSON into a StructuredRecord
    - mapping with only string values: FormRecord
    - any other mapping: StructuredRecord

    Raises:
        RecordFormatException: If the input has none of these shapes
    """
    if isinstance(data, Record):
        return data
    if isinstance(data, (str, bytes)):
        return StructuredRecord.from_json(data)
    if isinstance(data, Mapping):
        if all(isinstance(v, str) for v in data.values()):
            logger.debug(f"Using form record for {len(data)} fields")
            return FormRecord(data)
        logger.debug("Using structured record")
        return StructuredRecord(data)

    raise RecordFormatException(
        f"Cannot build a record from {type(data).__name__}; "
        "expected a mapping, JSON text, or Record"
    )


def describe_record(record: Record) -> Dict[str, Any]:
    """Short description of a record for debug logs"""
    if isinstance(record, FormRecord):
        return {'type': 'form', 'fields': len(record.data)}
    if isinstance(record, StructuredRecord):
        return {'type': 'structured', 'root': type(record.document).__name__}
    return {'type': type(record).__name__}
