# wxlog/summary.py
import re
from typing import Iterable, Optional

from wxlog.models import Record

_INT_RE = re.compile(r"([+-]?)0*([0-9]+)")
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

def parse_int(value: Optional[str]) -> Optional[int]:
    # plain decimal only: no whitespace, underscores or non-ASCII digits
    m = _INT_RE.fullmatch(value) if value is not None else None
    if m is None:
        return None
    sign, digits = m.groups()
    if len(digits) > 19:
        return None
    n = int(sign + digits)
    # out of int64 range counts as unparseable
    return n if INT64_MIN <= n <= INT64_MAX else None

def total(records: Iterable[Record], field: str) -> int:
    out = 0
    for r in records:
        n = parse_int(r.get(field))
        if n is not None:
            out += n
    return out

def summarize(records, numeric_field: str = "high") -> str:
    records = list(records)
    count = len(records)
    if not numeric_field:
        return f"count={count}"
    return f"count={count}, {numeric_field}_total={total(records, numeric_field)}"
