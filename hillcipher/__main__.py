"""
Command line front end.

    python -m hillcipher encrypt --block-size 3 --key GYBNQKURP ACT
    python -m hillcipher decrypt --block-size 3 --key GYBNQKURP POH
    python -m hillcipher matrix --block-size 3 --key GYBNQKURP

Options not given on the command line fall back to the HILLCIPHER_SCHEME,
HILLCIPHER_BLOCK_SIZE and HILLCIPHER_KEY environment variables.
"""

import sys
import logging
import argparse
from typing import List, Optional

from . import __version__
from .cipher_core import HillCipher, HillConfig
from .exceptions import HillCipherError
from .linalg import determinant

BANNER = "Welcome to HillCipher! Your friendly (and a little outdated) cryptography companion."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hillcipher",
        description="Encrypt and decrypt text with the Hill cipher.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print the banner")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--scheme", help="Ordered alphabet (default: A-Z)")
    common.add_argument("--block-size", type=int, help="Symbols per block (default: 1)")
    common.add_argument("--key", help="Key of block-size squared symbols")

    sub = parser.add_subparsers(dest="command", required=True)

    p_enc = sub.add_parser("encrypt", parents=[common], help="Encrypt text")
    p_enc.add_argument("text", help="Plaintext over the scheme")

    p_dec = sub.add_parser("decrypt", parents=[common], help="Decrypt text")
    p_dec.add_argument("text", help="Ciphertext over the scheme")

    sub.add_parser("matrix", parents=[common], help="Show the key matrix and its modular inverse")

    return parser


def build_cipher(args: argparse.Namespace) -> HillCipher:
    """Merge command line options over the environment, then validate once."""
    config = HillConfig.from_env(
        scheme=args.scheme,
        block_size=args.block_size,
        key=args.key,
    )
    return HillCipher(config=config)


def _format_matrix(matrix) -> str:
    return "\n".join(" ".join(f"{int(x):4d}" for x in row) for row in matrix)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.quiet:
        print(BANNER)

    try:
        cipher = build_cipher(args)

        if args.command == "encrypt":
            print(cipher.encrypt(args.text))
        elif args.command == "decrypt":
            print(cipher.decrypt(args.text))
        else:
            cipher.config.require_ready()
            print("Key matrix:")
            print(_format_matrix(cipher.key_matrix))
            print(f"Determinant: {determinant(cipher.key_matrix)}")
            print(f"Inverse modulo {cipher.config.modulus}:")
            print(_format_matrix(cipher.config.inverse_matrix))
    except HillCipherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
