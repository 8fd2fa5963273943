"""
Command line front end: `pybase32 encode|decode`
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .codec import decode, encode
from .errors import Base32Error

log = logging.getLogger(__name__)

# Environment variable holding the default alphabet
ALPHABET_ENV = "PYBASE32_ALPHABET"

ALPHABET_CHOICES = ("standard", "rfc", "crockford")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(module)s:%(lineno)d] %(message)s"


def configure_logging(verbosity: int):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    default_alphabet = os.environ.get(ALPHABET_ENV, "standard").lower()
    if default_alphabet not in ALPHABET_CHOICES:
        default_alphabet = "standard"

    parser = argparse.ArgumentParser(
        prog="pybase32",
        description="Encode or decode base32 (RFC 4648 or Crockford).")
    parser.add_argument(
        "command",
        choices=("encode", "decode"),
        help="Operation to perform.")
    parser.add_argument(
        "-a", "--alphabet",
        choices=ALPHABET_CHOICES,
        default=default_alphabet,
        help=f"Alphabet to use (default: {default_alphabet}, from ${ALPHABET_ENV}).")
    parser.add_argument(
        "-i", "--input",
        help="Read from this file instead of stdin.")
    parser.add_argument(
        "-o", "--output",
        help="Write to this file instead of stdout.")
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log output (repeatable).")
    return parser


def _read_input(path: Optional[str]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _write_output(path: Optional[str], data: bytes):
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as f:
        f.write(data)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    data = _read_input(args.input)
    log.info("%s %d bytes with the %s alphabet", args.command, len(data), args.alphabet)

    if args.command == "encode":
        output = encode(data, args.alphabet).encode('ascii') + b"\n"
    else:
        try:
            output = decode(data.strip(), args.alphabet)
        except Base32Error as e:
            log.error("%s (%s)", e, e.error_type.value)
            return 1

    log.debug("Writing %d bytes.", len(output))
    _write_output(args.output, output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
