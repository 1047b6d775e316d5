"""Main CLI entry point for secure_msg."""

import argparse
import logging
import sys

from secure_msg import __version__
from secure_msg.cli.commands import cipher, history, keys


def _add_cipher_parser(subparsers, name: str) -> None:
    parser = subparsers.add_parser(
        name,
        help=f"{name.capitalize()} a message",
        description=f"{name.capitalize()} a message with a repeating-key shift cipher",
        epilog=(
            "Results containing unpaired surrogate characters are printed with \\uXXXX "
            "escapes and a warning; such printed text does not decrypt back to the original."
        ),
    )
    parser.add_argument("text", help=f"Text to {name}")
    parser.add_argument("-k", "--key", required=True, help="Key (at least 8 characters)")
    parser.add_argument(
        "--no-history",
        action="store_true",
        help="Do not record this operation in the history",
    )
    parser.add_argument(
        "--show-strength",
        action="store_true",
        help="Print the key strength score before the result",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="secure_msg",
        description="Obfuscate text with a repeating-key shift cipher (not secure encryption)",
        epilog="Use 'secure_msg <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--storage", help="Path to the history storage file")
    parser.add_argument(
        "--no-persist",
        action="store_true",
        help="Keep history in memory only for this run",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # secure_msg encrypt <text> --key <key>
    _add_cipher_parser(subparsers, "encrypt")

    # secure_msg decrypt <text> --key <key>
    _add_cipher_parser(subparsers, "decrypt")

    # secure_msg generate-key [--length N]
    gen_parser = subparsers.add_parser(
        "generate-key",
        help="Generate a random key",
        description="Generate a random key (non-cryptographic random source)",
    )
    gen_parser.add_argument("-n", "--length", type=int, default=None, help="Key length")

    # secure_msg strength <key>
    strength_parser = subparsers.add_parser(
        "strength",
        help="Rate a key",
        description="Score a key from 0 to 100 and suggest improvements",
    )
    strength_parser.add_argument("key", help="Key to rate")

    # secure_msg history [list|delete <id>|clear]
    history_parser = subparsers.add_parser(
        "history",
        help="Show or manage past operations",
        description="List, delete or clear recorded cipher operations",
    )
    history_sub = history_parser.add_subparsers(dest="history_action")
    history_sub.add_parser("list", help="List recorded operations")
    delete_parser = history_sub.add_parser("delete", help="Delete one entry")
    delete_parser.add_argument("id", help="ID of the entry to delete")
    clear_parser = history_sub.add_parser("clear", help="Delete all entries")
    clear_parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt",
    )

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "encrypt":
        return cipher.encrypt_command(args)
    elif args.command == "decrypt":
        return cipher.decrypt_command(args)
    elif args.command == "generate-key":
        return keys.generate_key_command(args)
    elif args.command == "strength":
        return keys.strength_command(args)
    elif args.command == "history":
        return history.history_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
