from typing import Iterable, List
from wxlog.codec import format_record, parse_input
from wxlog.models import Record
from wxlog.storage.journal import Journal

def add(journal: Journal, items: Iterable[str]) -> Record:
    rec = parse_input(items, journal.config)  # raises before the file is touched
    journal.append(rec)
    return rec

def list_lines(journal: Journal) -> List[str]:
    return [format_record(r, journal.config) for r in journal.load_all()]  # <-- Always fresh read from file

def reset(journal: Journal) -> None:
    journal.initialize()
