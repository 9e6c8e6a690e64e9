"""
Command line
============
    chacha-cli keygen > key.bin
    chacha-cli encrypt key.bin < plain.txt > sealed.bin
    chacha-cli decrypt key.bin < sealed.bin > plain.txt

Data moves over stdin/stdout; status lines go to stderr via logging.
Every error ends the run with exit status 1 and one line of diagnostics.
"""

import argparse
import io
import logging
import sys
from typing import BinaryIO, List, Optional

from . import __version__
from .cipher import ChaChaCipher
from .errors import ChaChaError
from .keys import build_cipher, load_key
from .sink import key_chunks, write_chunks
from .stream import Decryptor, Encryptor

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chacha-cli",
        description="ChaCha20-Poly1305 encryption of stdin to stdout.",
    )
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log debug detail to stderr")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    enc = sub.add_parser(
        "encrypt", help="Encrypt plaintext from stdin, emitting ciphertext to stdout")
    enc.add_argument("keypath", metavar="FILE", help="Path to key file")

    dec = sub.add_parser(
        "decrypt", help="Decrypt ciphertext from stdin, emitting plaintext to stdout")
    dec.add_argument("keypath", metavar="FILE", help="Path to key file")

    sub.add_parser("keygen", help="Generate a new key and write it to stdout")
    return parser


def run(args: argparse.Namespace, stdin: BinaryIO, stdout: BinaryIO) -> None:
    if args.command == "encrypt":
        logger.info(f"Encrypting with key: {args.keypath}")
        cipher = build_cipher(load_key(args.keypath))
        # Nothing reaches stdout until the whole message is sealed.
        staged = io.BytesIO()
        write_chunks(Encryptor(cipher, stdin), staged)
        write_chunks([staged.getvalue()], stdout)
    elif args.command == "decrypt":
        logger.info(f"Decrypting with key: {args.keypath}")
        cipher = build_cipher(load_key(args.keypath))
        write_chunks(Decryptor(cipher, stdin), stdout)
    elif args.command == "keygen":
        logger.info("Generating key...")
        write_chunks(key_chunks(ChaChaCipher.generate_key()), stdout)
    else:
        raise ValueError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None,
         stdin: Optional[BinaryIO] = None,
         stdout: Optional[BinaryIO] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    try:
        run(args, stdin, stdout)
    except (ChaChaError, OSError) as exc:
        logger.error(f"{args.command} failed: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
