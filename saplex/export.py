"""JSON-friendly export of tokens, records and diagnostics."""

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from saplex.lexer.tokens import Token


def to_data(record: object) -> Any:
    """Convert a record into plain dicts, lists and scalars.

    Enum members are exported by name and `None` fields are kept.
    """
    match record:
        case Enum():
            return record.name
        case Token():
            return {
                "kind": record.kind.name,
                "ttype": to_data(record.ttype),
                "text": record.text,
                "span": to_data(record.span),
            }
        case _ if is_dataclass(record) and not isinstance(record, type):
            return {f.name: to_data(getattr(record, f.name)) for f in fields(record)}
        case list() | tuple():
            return [to_data(item) for item in record]
        case dict():
            return {str(key): to_data(value) for key, value in record.items()}
        case _:
            return record


def dumps(records: object, *, indent: int | None = None) -> str:
    return json.dumps(to_data(records), indent=indent)
