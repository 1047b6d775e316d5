"""Console presenter for CLI output."""

from secure_msg.models import HistoryEntry, KeyStrength


def _printable(text: str) -> str:
    """Escape lone surrogates so shifted text can always be written to stdout."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_output(self, output: str) -> None:
        """Display the result of a cipher operation."""
        printable = _printable(output)
        print(printable)
        if printable != output:
            self.show_warning(
                "Output contains characters that cannot be printed and were shown as "
                "\\u escapes; the printed text will not decrypt back to the original"
            )

    def show_key_strength(self, strength: KeyStrength) -> None:
        """Display a key strength score and its suggestions."""
        print(f"Strength: {strength.score}% ({strength.level})")
        for suggestion in strength.suggestions:
            print(f"  - {suggestion}")

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display the recorded history."""
        if not entries:
            print("No history yet")
            return

        print(f"\nHistory ({len(entries)} entries):")
        print("=" * 60)
        for entry in entries:
            stamp = entry.created_at.strftime("%Y-%m-%d %H:%M:%S")
            print(f"{entry.id}  {stamp}  [{entry.mode.value}]")
            print(f"    in:  {_printable(entry.input_text)}")
            print(f"    out: {_printable(entry.output_text)}")
