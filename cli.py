#!/usr/bin/env python3
"""
TCF v2 consent string command line interface.

Decodes the Core segment of a consent string and prints it as JSON.

Usage:
    python cli.py <consent_string>
    python cli.py -f <field> <consent_string>

Examples:
    python cli.py COztr8AOztr8AAKADBENAwCoAOBAAEIAAAwIAEJEAIIAQAGYAPABAACEgAgAEA
    python cli.py -f vendorsConsent COztr8AOztr8AAKADBENAwCoAOBAAEIAAAwIAEJEAIIAQAGYAPABAACEgAgAEA
"""

import datetime
import json
import sys

from tcstring import DecodeError, __version__, decode


def print_version() -> None:
    """Print version information."""
    print(f"tcstring {__version__}")


def print_help(prog_name: str) -> None:
    """Print help message."""
    print(f"IAB TCF v2 Consent String Decoder (v{__version__})")
    print("=" * 43)
    print()
    print("References:")
    print("  TCF v2 consent string format:")
    print("  https://github.com/InteractiveAdvertisingBureau/GDPR-Transparency-and-Consent-Framework")
    print()
    print("Usage:")
    print(f"  {prog_name} <consent_string>")
    print(f"  {prog_name} -f <field> <consent_string>")
    print()
    print("Options:")
    print("  -f <field>     Print only one field of the Core segment")
    print("  -h, --help     Show this help message")
    print("  -v, --version  Show version information")
    print()
    print("Output:")
    print("  Core segment as JSON, timestamps in ISO 8601 (UTC).")
    print("  An empty consent string prints null.")
    print()


def _json_default(value: object) -> str:
    if isinstance(value, datetime.datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: object) -> str:
    """Render a decoded value as indented JSON."""
    return json.dumps(value, indent=2, default=_json_default)


def do_decode(consent_string: str, field: "str | None" = None) -> int:
    """Decode a consent string and print it.

    Args:
        consent_string: Dot-delimited consent string.
        field: Optional Core field to print instead of the whole record.

    Returns:
        0 on success, 1 on error.
    """
    try:
        record = decode(consent_string)
    except DecodeError as e:
        print(f"Error: Decoding failed: {e}", file=sys.stderr)
        return 1

    if field is None:
        print(to_json(record))
        return 0

    if record is None or field not in record:
        print(f"Error: Unknown field: {field}", file=sys.stderr)
        return 1

    print(to_json(record[field]))
    return 0


def main() -> int:
    """CLI entry point."""
    args = sys.argv
    prog_name = args[0] if args else "cli.py"

    # Check for help flag or no arguments
    if len(args) < 2:
        print_help(prog_name)
        return 1

    if args[1] in ("-h", "--help"):
        print_help(prog_name)
        return 0

    if args[1] in ("-v", "--version"):
        print_version()
        return 0

    if args[1] == "-f":
        # Field mode: -f <field> <consent_string>
        if len(args) != 4:
            print("Error: -f requires a field name and a consent string", file=sys.stderr)
            print(f"Usage: {prog_name} -f <field> <consent_string>", file=sys.stderr)
            return 1

        return do_decode(args[3], field=args[2])

    if len(args) != 2:
        print("Error: Expected exactly one consent string", file=sys.stderr)
        print(f"Usage: {prog_name} <consent_string>", file=sys.stderr)
        return 1

    return do_decode(args[1])


if __name__ == "__main__":
    sys.exit(main())
