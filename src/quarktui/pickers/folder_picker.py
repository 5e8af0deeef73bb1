"""
Folder picker.

Like the file picker, but lists only folders and starts with an entry that
chooses the folder currently shown.
"""
from pathlib import Path
from typing import List, Optional

from quarktui.config import PICKER_MAX_PATH_LENGTH
from quarktui.core.style import style
from quarktui.dialogs.select import MenuOption, SelectMenu, SelectResult
from quarktui.pickers.common import (FileFilter, PickerChoice, PickerIcons,
                                     PickerLabels, filter_entries, is_root,
                                     list_directory, resolve_start_dir,
                                     truncate_path)
from quarktui.screen import run_screen
from quarktui.utils.logging_config import get_logger

logger = get_logger(__name__)


class FolderPicker:
    """State of a folder-browsing session."""

    def __init__(
        self,
        start_dir: Optional[str] = None,
        title: str = "Select a folder",
        filter: Optional[FileFilter] = None,
        show_hidden: bool = False,
        icons: Optional[PickerIcons] = None,
        labels: Optional[PickerLabels] = None,
        max_path_length: int = PICKER_MAX_PATH_LENGTH,
    ):
        self.directory = resolve_start_dir(start_dir)
        self.title = title
        self.filter = filter
        self.show_hidden = show_hidden
        self.icons = icons or PickerIcons()
        self.labels = labels or PickerLabels()
        self.max_path_length = max_path_length
        self.selected: Optional[Path] = None
        self._came_from: Optional[Path] = None
        self._subfolders = 0

    def options(self) -> List[MenuOption]:
        folders, _ = list_directory(self.directory, self.show_hidden)
        folders = filter_entries(folders, file_filter=self.filter)
        self._subfolders = len(folders)

        options = [MenuOption(
            style(f"{self.icons.select} {self.labels.select_folder}", "success"),
            PickerChoice("select", self.directory),
        )]
        if not is_root(self.directory):
            options.append(MenuOption(
                f"{self.icons.parent} {self.labels.parent}",
                PickerChoice("parent", self.directory.parent),
                hint=self.labels.parent_hint,
            ))
        for entry in folders:
            options.append(MenuOption(f"{self.icons.folder} {entry.name}", PickerChoice("open", entry.path)))
        options.append(MenuOption(f"{self.icons.cancel} {self.labels.cancel}", PickerChoice("cancel")))
        return options

    def info_lines(self) -> List[str]:
        location = f"{self.labels.location} {truncate_path(str(self.directory), self.max_path_length)}"
        count = f"Subfolders: {self._subfolders}" if self._subfolders else "No subfolders"
        return [location, count]

    def menu(self) -> SelectMenu:
        options = self.options()
        selected_index = 0
        if self._came_from is not None:
            for index, option in enumerate(options):
                if option.value.action == "open" and option.value.path == self._came_from:
                    selected_index = index
                    break
        return SelectMenu(self.title, options, selected_index, self.info_lines(), allow_number_keys=False)

    def handle(self, result: SelectResult) -> bool:
        """Apply a menu result; True when the session is over."""
        if not result.selected:
            return True
        choice: PickerChoice = result.value
        if choice.action == "select":
            self.selected = choice.path
            return True
        if choice.action in ("open", "parent"):
            self._came_from = self.directory if choice.action == "parent" else None
            self.directory = choice.path
            logger.debug(f"Folder picker moved to {self.directory}")
            return False
        return True

    def run(self) -> Optional[str]:
        while True:
            result = run_screen(self.menu())
            if not isinstance(result, SelectResult):
                return None
            if self.handle(result):
                return str(self.selected) if self.selected else None


def pick_folder(
    start_dir: Optional[str] = None,
    title: str = "Select a folder",
    filter: Optional[FileFilter] = None,
    show_hidden: bool = False,
    icons: Optional[PickerIcons] = None,
    labels: Optional[PickerLabels] = None,
    max_path_length: int = PICKER_MAX_PATH_LENGTH,
) -> Optional[str]:
    """Let the user browse to a folder.

    Returns:
        Path of the chosen folder, or None when cancelled
    """
    return FolderPicker(start_dir, title, filter, show_hidden, icons, labels, max_path_length).run()


def pick_folder_from_home(**options) -> Optional[str]:
    return pick_folder(start_dir=str(Path.home()), **options)
