"""CLI commands for encrypting and decrypting a message."""

from secure_msg.models import CipherMode
from secure_msg.orchestration import CipherSession
from secure_msg.presenters import ConsolePresenter
from secure_msg.utils.service_factory import create_history_service

from .common import config_from_args


def encrypt_command(args) -> int:
    """Execute the encrypt subcommand."""
    return _run(args, CipherMode.ENCRYPT)


def decrypt_command(args) -> int:
    """Execute the decrypt subcommand."""
    return _run(args, CipherMode.DECRYPT)


def _run(args, mode: CipherMode) -> int:
    """Transform args.text with args.key in the given mode.

    Args:
        args: Parsed command-line arguments
        mode: Cipher mode to run in

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args, record_history=not args.no_history)
    presenter = ConsolePresenter()

    history = create_history_service(config, persist=not args.no_persist)
    session = CipherSession(config, history, presenter)
    session.set_mode(mode)
    session.set_input(args.text)
    session.set_key(args.key)

    if args.show_strength and mode is CipherMode.ENCRYPT:
        presenter.show_key_strength(session.strength)

    return 0 if session.run() is not None else 1
