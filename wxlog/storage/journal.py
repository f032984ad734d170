import logging
from typing import Iterator, List

from wxlog.codec import MalformedSegment, format_record, parse_line
from wxlog.models import Record, StoreConfig

logger = logging.getLogger(__name__)


class Journal:
    """Append-only flat file of encoded records, one per line."""

    def __init__(self, config: StoreConfig):
        self.config = config
        self.path = config.path

    def ensure_dir(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def initialize(self) -> None:
        # truncates: every stored record is gone after this
        self.ensure_dir()
        with self.path.open("w", encoding="utf-8", newline="\n"):
            pass
        logger.debug("initialized empty store at %s", self.path)

    def append(self, rec: Record) -> None:
        line = format_record(rec, self.config)
        self.ensure_dir()
        with self.path.open("a", encoding="utf-8", newline="\n") as f:
            f.write(line + "\n")
        logger.debug("appended %s", line)

    def iter_records(self) -> Iterator[Record]:
        if not self.path.exists():
            return
        # split on "\n" only; a "\r" inside a value is data, not a line break
        with self.path.open("r", encoding="utf-8", newline="\n") as f:
            for lineno, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    rec = parse_line(line)
                except MalformedSegment as e:
                    raise MalformedSegment(e.segment, lineno) from e
                yield rec

    def load_all(self) -> List[Record]:
        """Read every record; a single bad line fails the whole read."""
        records = list(self.iter_records())
        logger.debug("loaded %d records from %s", len(records), self.path)
        return records
