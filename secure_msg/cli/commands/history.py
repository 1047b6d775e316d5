"""CLI commands for viewing and managing the cipher history."""

from secure_msg.exceptions import SecureMsgException
from secure_msg.orchestration import ClearHistoryGate
from secure_msg.presenters import ConsolePresenter
from secure_msg.utils.service_factory import create_history_service

from .common import config_from_args


def history_command(args) -> int:
    """Execute the history subcommand (list, delete or clear).

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()
    history = create_history_service(config, persist=not args.no_persist)

    try:
        if args.history_action == "delete":
            if history.get_entry(args.id) is None:
                presenter.show_warning(f"No history entry with ID {args.id}")
            history.delete_entry(args.id)
            presenter.show_success(f"{len(history.entries)} entries remain")
            return 0

        if args.history_action == "clear":
            return _clear(history, presenter, assume_yes=args.yes)

        presenter.show_history(history.entries)
        return 0

    except SecureMsgException as e:
        presenter.show_error(f"Error: {e}")
        return 1


def _clear(history, presenter, assume_yes: bool) -> int:
    """Clear history behind a confirmation prompt."""
    if not history.entries:
        presenter.show_info("History is already empty")
        return 0

    gate = ClearHistoryGate(history)
    gate.request()

    if not assume_yes:
        count = len(history.entries)
        answer = input(f"Delete all {count} history entries? This cannot be undone [y/N] ")
        if answer.strip().lower() not in ("y", "yes"):
            gate.cancel()
            presenter.show_info("Cancelled")
            return 0

    gate.confirm()
    presenter.show_success("History cleared")
    return 0
