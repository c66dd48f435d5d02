"""Command line entry point.

Reads a documentation record as JSON (as emitted by component introspection),
normalizes it and writes the result to stdout:

    docnorm button.json --source src/components/Button.jsx
    cat button.json | docnorm - --source src/components/Button.jsx
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .errors import DocnormError
from .models import DocRecord
from .pipeline import get_props
from .settings import Settings

log = logging.getLogger(__name__)


def _read_record(source: str) -> dict:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def _to_json(value):
    if hasattr(value, "to_dict"):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def main(argv: list[str] | None = None) -> int:
    """Normalize one documentation record."""
    parser = argparse.ArgumentParser(
        prog="docnorm",
        description="Merge doc-comment tags into a component documentation record.",
    )
    parser.add_argument("record", help="Record JSON file, or - for stdin")
    parser.add_argument("--source", help="Path of the component source file")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        data = _read_record(args.record)
        record = DocRecord.from_dict(data)
        result = get_props(record, args.source, settings=Settings.from_env())
    except (OSError, json.JSONDecodeError) as e:
        print(f"✗ Cannot read {args.record}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"✗ Invalid record in {args.record}:\n{e}", file=sys.stderr)
        return 1
    except DocnormError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    json.dump(result.to_dict(), sys.stdout, indent=args.indent, default=_to_json)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
