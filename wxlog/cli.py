#!/usr/bin/env python3
"""
wxlog CLI entry point
Appends, lists and summarizes day/condition/high/low records in a flat file.
"""
import logging
import sys

from pydantic import ValidationError

from wxlog.codec import RecordError
from wxlog.config import load_config, log_level
from wxlog.domains import weather as weather_domain
from wxlog.storage.journal import Journal
from wxlog.summary import summarize

USAGE = "Usage: init | add key=value... | list | summary"
COMMANDS = ("init", "add", "list", "summary")

logger = logging.getLogger(__name__)

# ---------------- Helper functions -----------------

def error(msg) -> None:
    print(f"ERROR: {msg}", file=sys.stderr)

# ---------------- Main -----------------

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    verbose = '--verbose' in argv
    args = [a for a in argv if a != '--verbose']

    logging.basicConfig(level=log_level(verbose=verbose), stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")

    if not args:
        print(USAGE)
        return 2
    cmd, rest = args[0], args[1:]
    if cmd not in COMMANDS:
        print(f"Unknown command: {cmd}")
        print(USAGE)
        return 2

    try:
        config = load_config()
    except ValidationError as e:
        error(f"bad configuration: {e}")
        return 2
    journal = Journal(config)
    logger.debug("command=%s store=%s", cmd, config.path)

    if cmd == 'init':
        try:
            weather_domain.reset(journal)
        except OSError as e:
            error(e)
            return 1
        return 0

    if cmd == 'add':
        try:
            weather_domain.add(journal, rest)
        except RecordError as e:
            error(e)
            return 2
        except OSError as e:
            error(e)
            return 1
        return 0

    if cmd == 'list':
        try:
            lines = weather_domain.list_lines(journal)
        except (RecordError, OSError, UnicodeDecodeError) as e:
            error(e)
            return 1
        for line in lines:
            print(line)
        return 0

    # summary
    try:
        records = journal.load_all()
    except (RecordError, OSError, UnicodeDecodeError) as e:
        error(e)
        return 1
    print(summarize(records, config.numeric_field))
    return 0


def run():
    sys.exit(main())

if __name__ == '__main__':
    run()
