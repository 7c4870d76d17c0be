"""User preferences: window geometry and data file locations."""

from dataclasses import dataclass
from pathlib import Path

from weddingbook.domain import require_non_null

DEFAULT_WINDOW_WIDTH = 740
DEFAULT_WINDOW_HEIGHT = 600
DEFAULT_ADDRESS_BOOK_FILE_PATH = Path("data") / "addressbook.json"
DEFAULT_WEDDING_BOOK_FILE_PATH = Path("data") / "weddingbook.json"


@dataclass(frozen=True)
class GuiSettings:
    """Window size and, once the user has moved it, position."""

    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    window_x: int | None = None
    window_y: int | None = None


class UserPrefs:
    """Mutable holder for GuiSettings and the two data file paths."""

    def __init__(self, to_copy: "UserPrefs | None" = None) -> None:
        self._gui_settings = GuiSettings()
        self._address_book_file_path = DEFAULT_ADDRESS_BOOK_FILE_PATH
        self._wedding_book_file_path = DEFAULT_WEDDING_BOOK_FILE_PATH
        if to_copy is not None:
            self.reset_data(to_copy)

    def reset_data(self, new_prefs) -> None:
        """Copy every setting from ``new_prefs`` (any ReadOnlyUserPrefs)."""
        require_non_null(new_prefs=new_prefs)
        self.set_gui_settings(new_prefs.get_gui_settings())
        self.set_address_book_file_path(new_prefs.get_address_book_file_path())
        self.set_wedding_book_file_path(new_prefs.get_wedding_book_file_path())

    def get_gui_settings(self) -> GuiSettings:
        return self._gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        require_non_null(gui_settings=gui_settings)
        self._gui_settings = gui_settings

    def get_address_book_file_path(self) -> Path:
        return self._address_book_file_path

    def set_address_book_file_path(self, path: Path) -> None:
        require_non_null(path=path)
        self._address_book_file_path = Path(path)

    def get_wedding_book_file_path(self) -> Path:
        return self._wedding_book_file_path

    def set_wedding_book_file_path(self, path: Path) -> None:
        require_non_null(path=path)
        self._wedding_book_file_path = Path(path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserPrefs):
            return NotImplemented
        return (
            self._gui_settings == other._gui_settings
            and self._address_book_file_path == other._address_book_file_path
            and self._wedding_book_file_path == other._wedding_book_file_path
        )

    def __repr__(self) -> str:
        return (
            f"UserPrefs(gui_settings={self._gui_settings!r}, "
            f"address_book_file_path={str(self._address_book_file_path)!r}, "
            f"wedding_book_file_path={str(self._wedding_book_file_path)!r})"
        )
