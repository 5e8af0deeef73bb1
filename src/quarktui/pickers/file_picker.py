"""
File picker.

Browses the file system with a select menu: the parent directory first,
then folders, then the (filtered) files, then a cancel entry.
"""
from pathlib import Path
from typing import Iterable, List, Optional

from quarktui.config import PICKER_MAX_PATH_LENGTH
from quarktui.dialogs.select import MenuOption, SelectMenu, SelectResult
from quarktui.pickers.common import (FileFilter, PickerChoice, PickerIcons,
                                     PickerLabels, contents_summary, file_hint,
                                     filter_entries, is_root, list_directory,
                                     resolve_start_dir, truncate_path)
from quarktui.screen import run_screen
from quarktui.utils.logging_config import get_logger

logger = get_logger(__name__)


class FilePicker:
    """State of a file-browsing session.

    Args:
        start_dir: Directory to start in (defaults to the working directory)
        title: Menu title
        extensions: Only show files with these extensions (dot optional)
        filter: Custom predicate over (name, stat) for files
        show_hidden: Include dot-files and dot-folders
        icons: Icon overrides
        labels: Label overrides
        max_path_length: Maximum length of the location line
    """

    def __init__(
        self,
        start_dir: Optional[str] = None,
        title: str = "Select a file",
        extensions: Optional[Iterable[str]] = None,
        filter: Optional[FileFilter] = None,
        show_hidden: bool = False,
        icons: Optional[PickerIcons] = None,
        labels: Optional[PickerLabels] = None,
        max_path_length: int = PICKER_MAX_PATH_LENGTH,
    ):
        self.directory = resolve_start_dir(start_dir)
        self.title = title
        self.extensions = list(extensions) if extensions else None
        self.filter = filter
        self.show_hidden = show_hidden
        self.icons = icons or PickerIcons()
        self.labels = labels or PickerLabels()
        self.max_path_length = max_path_length
        self.selected: Optional[Path] = None
        self._came_from: Optional[Path] = None
        self._counts = (0, 0)

    def options(self) -> List[MenuOption]:
        folders, files = list_directory(self.directory, self.show_hidden)
        files = filter_entries(files, self.extensions, self.filter)

        options: List[MenuOption] = []
        if not is_root(self.directory):
            options.append(MenuOption(
                f"{self.icons.parent} {self.labels.parent}",
                PickerChoice("parent", self.directory.parent),
                hint=self.labels.parent_hint,
            ))
        for entry in folders:
            options.append(MenuOption(f"{self.icons.folder} {entry.name}", PickerChoice("open", entry.path)))
        for entry in files:
            options.append(MenuOption(
                f"{self.icons.for_file(entry.name)} {entry.name}",
                PickerChoice("file", entry.path),
                hint=file_hint(entry.name),
            ))
        options.append(MenuOption(f"{self.icons.cancel} {self.labels.cancel}", PickerChoice("cancel")))
        self._counts = (len(folders), len(files))
        return options

    def info_lines(self) -> List[str]:
        folders, files = self._counts
        location = f"{self.labels.location} {truncate_path(str(self.directory), self.max_path_length)}"
        summary = contents_summary(folders, files)
        return [location, f"{self.labels.contents} {summary}" if summary else self.labels.empty]

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
        if choice.action == "file":
            self.selected = choice.path
            return True
        if choice.action in ("open", "parent"):
            self._came_from = self.directory if choice.action == "parent" else None
            self.directory = choice.path
            logger.debug(f"File picker moved to {self.directory}")
            return False
        return True

    def run(self) -> Optional[str]:
        while True:
            result = run_screen(self.menu())
            if not isinstance(result, SelectResult):
                return None
            if self.handle(result):
                return str(self.selected) if self.selected else None


def pick_file(
    start_dir: Optional[str] = None,
    title: str = "Select a file",
    extensions: Optional[Iterable[str]] = None,
    filter: Optional[FileFilter] = None,
    show_hidden: bool = False,
    icons: Optional[PickerIcons] = None,
    labels: Optional[PickerLabels] = None,
    max_path_length: int = PICKER_MAX_PATH_LENGTH,
) -> Optional[str]:
    """Let the user browse to a file.

    Returns:
        Path of the chosen file, or None when cancelled
    """
    picker = FilePicker(start_dir, title, extensions, filter, show_hidden, icons, labels, max_path_length)
    return picker.run()


def pick_file_by_extension(extensions: Iterable[str], **options) -> Optional[str]:
    """pick_file restricted to the given extensions."""
    extensions = list(extensions)
    options.setdefault("title", f"Select a file ({', '.join(extensions)})")
    return pick_file(extensions=extensions, **options)
