"""State of a simple directory browser."""

from __future__ import annotations

from pathlib import Path


def entry_label(path: Path | str) -> str:
    """The last component of a path, or the whole path when it has no name."""
    path = Path(path)
    return path.name or str(path)


class Files:
    """The directory being browsed, its entries and the last error."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.current_path = Path.cwd() if path is None else Path(path).absolute()
        self.path_names: list[Path] = []
        self.err: str | None = None
        self.reload_path_list()

    def reload_path_list(self) -> None:
        """Re-read the current directory; on failure keep the old entries and set err."""
        try:
            entries = list(self.current_path.iterdir())
        except OSError as exc:
            self.err = f"An error occurred: {exc!r}"
            return
        self.clear_err()
        self.path_names = entries

    def go_up(self) -> None:
        parent = self.current_path.parent
        if parent == self.current_path:
            self.err = "Cannot go up from the root directory"
            return
        self.current_path = parent
        self.reload_path_list()

    def enter_dir(self, dir_id: int) -> None:
        if not 0 <= dir_id < len(self.path_names):
            raise IndexError(f"no entry with index {dir_id}")
        self.current_path = self.path_names[dir_id]
        self.reload_path_list()

    def current(self) -> str:
        return str(self.current_path)

    def clear_err(self) -> None:
        self.err = None