"""CLI commands for generating and rating keys."""

from secure_msg.presenters import ConsolePresenter
from secure_msg.services import generate_random_key, score_key_strength

from .common import config_from_args


def generate_key_command(args) -> int:
    """Execute the generate-key subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()
    length = args.length if args.length is not None else config.random_key_length

    try:
        key = generate_random_key(length)
    except ValueError as e:
        presenter.show_error(str(e))
        return 1

    presenter.show_info(key)
    return 0


def strength_command(args) -> int:
    """Execute the strength subcommand."""
    config = config_from_args(args)
    presenter = ConsolePresenter()
    presenter.show_key_strength(score_key_strength(args.key, config.strong_key_length))
    return 0
