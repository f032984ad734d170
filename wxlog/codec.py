"""
Line codec for wxlog records.

A record is serialized as ``key=value`` pairs joined by ``|`` in the
configured field order, e.g.::

    day=Mon|condition=sunny|high=21|low=9

parse_input() is the strict path used for user input: keys are checked
against the schema, values may not contain the delimiter or a newline and must
be encodable as UTF-8, and missing fields are filled with "". parse_line() is
the lenient path used when reading the store back: any ``key=value`` segment
is accepted as-is (only the trailing newline is removed, so values round-trip
exactly) and missing fields are NOT filled in. The two are intentionally not
symmetric; format_record() reads absent keys as "" so either kind of record
can be printed.
"""
import logging
from typing import Iterable, Optional

from wxlog.models import DELIMITER, SEPARATOR, Record, StoreConfig

logger = logging.getLogger(__name__)

# --- Errors ---

class RecordError(ValueError):
    """Base class for record validation and decoding failures."""


class InvalidItem(RecordError):
    def __init__(self, item: str):
        super().__init__(f"invalid item: {item}")
        self.item = item


class UnknownField(RecordError):
    def __init__(self, field: str):
        super().__init__(f"unknown field: {field}")
        self.field = field


class InvalidValue(RecordError):
    def __init__(self, field: str, value: str, reason: str = f"may not contain '{DELIMITER}'"):
        super().__init__(f"value {reason}")
        self.field = field
        self.value = value


class MalformedSegment(RecordError):
    def __init__(self, segment: str, lineno: Optional[int] = None):
        msg = f"bad part: {segment}"
        super().__init__(msg if lineno is None else f"line {lineno}: {msg}")
        self.segment = segment
        self.lineno = lineno

# --- Encoding ---

def _check_value(key: str, value: str) -> None:
    if DELIMITER in value:
        raise InvalidValue(key, value)
    if "\n" in value:
        raise InvalidValue(key, value, "may not contain a newline")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidValue(key, value, "is not valid UTF-8") from None


def parse_input(items: Iterable[str], config: StoreConfig) -> Record:
    """
    Turn ``key=value`` command-line items into a complete record.

    Duplicate keys: the last occurrence wins. Nothing is returned unless
    every item validates.
    """
    record: Record = {}
    for item in items:
        key, sep, value = item.partition(SEPARATOR)
        if not sep:
            raise InvalidItem(item)
        if key not in config.fields:
            raise UnknownField(key)
        _check_value(key, value)
        if key in record:
            logger.debug("duplicate field %r, keeping last value", key)
        record[key] = value
    for f in config.fields:
        record.setdefault(f, "")
    return record


def format_record(record: Record, config: StoreConfig) -> str:
    return DELIMITER.join(f"{f}{SEPARATOR}{record.get(f, '')}" for f in config.fields)


def parse_line(line: str) -> Record:
    values: Record = {}
    # only the terminator goes; values keep their surrounding whitespace
    for part in line.rstrip("\n").split(DELIMITER):
        if not part:
            continue
        key, sep, value = part.partition(SEPARATOR)
        if not sep:
            raise MalformedSegment(part)
        values[key] = value
    return values
