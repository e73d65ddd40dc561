"""bookcodes.

Usage:
  bookcodes [--format=<format>] [--json] <code>...
  bookcodes -h | --help

Options:
  -h --help          Show this screen

  --format=<format>  Output format: isbn13, isbn10, sbn, or urn.  Taken
                     from $BOOKCODES_FORMAT if not given, or isbn13.

  --json             Print a JSON object mapping each code to its
                     conversion, or to an error.

A code of '-' reads codes from standard input, one per line.
"""

import bookcodes

from docopt import docopt

import json
import logging
import sys


LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def log_level(name):
    """Turn a level name like 'debug' into its logging constant, or None."""

    if name.upper() not in LOG_LEVELS:
        return None
    return getattr(logging, name.upper())


def read_codes(args, stdin):
    for code in args:
        if code == "-":
            for line in stdin:
                line = line.strip()
                if line:
                    yield line
        else:
            yield code


def run(argv=None, stdin=None, stdout=None):
    arguments = docopt(__doc__, argv=argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    level = log_level(bookcodes.LOG_LEVEL)
    if level is None:
        print(f"Unknown log level '{bookcodes.LOG_LEVEL}', expected one of: {', '.join(LOG_LEVELS)}", file=stdout)
        return 2
    logging.basicConfig(level=level)

    fmt = arguments["--format"] or bookcodes.DEFAULT_FORMAT
    if fmt not in bookcodes.FORMATS:
        print(f"Unknown format '{fmt}', expected one of: {', '.join(bookcodes.FORMATS)}", file=stdout)
        return 2

    ok = True
    out = {}
    for code in read_codes(arguments["<code>"], stdin):
        try:
            converted = bookcodes.convert(code, fmt)
        except bookcodes.InvalidCode as e:
            ok = False
            if arguments["--json"]:
                out[code] = {"error": str(e)}
            else:
                print(f"{code}: {e}", file=stdout)
            continue

        if arguments["--json"]:
            out[code] = converted
        else:
            print(converted, file=stdout)

    if arguments["--json"]:
        print(json.dumps(out), file=stdout)

    return 0 if ok else 1


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
