"""
Shared helpers for the file and folder pickers.

Directory listing, icons, labels and path shortening. Listing never
raises: unreadable directories produce no entries and unreadable entries
are skipped, both logged as warnings.
"""
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from quarktui.config import PICKER_MAX_PATH_LENGTH
from quarktui.utils.logging_config import get_logger

logger = get_logger(__name__)

FILE_ICONS: Dict[str, str] = {
    # Documents
    ".pdf": "📕",
    ".doc": "📘",
    ".docx": "📘",
    ".txt": "📝",
    ".md": "📝",
    # Spreadsheets
    ".xls": "📊",
    ".xlsx": "📊",
    ".csv": "📊",
    # Images
    ".jpg": "🖼️",
    ".jpeg": "🖼️",
    ".png": "🖼️",
    ".gif": "🖼️",
    ".svg": "🖼️",
    ".webp": "🖼️",
    # Audio and video
    ".mp3": "🎵",
    ".wav": "🎵",
    ".flac": "🎵",
    ".mp4": "🎬",
    ".mkv": "🎬",
    ".mov": "🎬",
    # Archives
    ".zip": "📦",
    ".tar": "📦",
    ".gz": "📦",
    ".7z": "📦",
    # Code and config
    ".py": "🐍",
    ".js": "📜",
    ".ts": "📜",
    ".rs": "🦀",
    ".go": "🐹",
    ".html": "🌐",
    ".css": "🎨",
    ".json": "📋",
    ".yaml": "📋",
    ".yml": "📋",
    ".toml": "📋",
    ".sh": "🔧",
}

FileFilter = Callable[[str, os.stat_result], bool]


@dataclass
class PickerIcons:
    folder: str = "📁"
    parent: str = "📂"
    cancel: str = "❌"
    select: str = "✓"
    file: str = "📄"
    # Extension (with dot, lower case) -> icon, merged over FILE_ICONS
    files: Dict[str, str] = field(default_factory=dict)

    def for_file(self, name: str) -> str:
        suffix = Path(name).suffix.lower()
        return self.files.get(suffix) or FILE_ICONS.get(suffix) or self.file


@dataclass
class PickerLabels:
    parent: str = ".."
    parent_hint: str = "parent directory"
    cancel: str = "Cancel"
    select_folder: str = "Select this folder"
    location: str = "Location:"
    contents: str = "Contents:"
    empty: str = "Empty directory"


class Entry(NamedTuple):
    name: str
    path: Path
    is_dir: bool
    stat: Optional[os.stat_result]


class PickerChoice(NamedTuple):
    """Value behind a picker menu option."""
    action: str  # "open", "parent", "file", "select" or "cancel"
    path: Optional[Path] = None


def normalize_extensions(extensions: Optional[Iterable[str]]) -> Optional[Tuple[str, ...]]:
    """Lower-case extensions with a leading dot; None when no filter is set."""
    if not extensions:
        return None
    return tuple(ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in extensions)


def file_hint(name: str) -> str:
    suffix = Path(name).suffix
    return suffix[1:].upper() if suffix else "FILE"


def truncate_path(path: str, max_length: int = PICKER_MAX_PATH_LENGTH) -> str:
    """Shorten a path from the left, keeping its trailing components.

    Args:
        path: Path to shorten
        max_length: Maximum length of the result

    Returns:
        The path itself when it fits, otherwise ".../" followed by as many
        trailing components as fit, or "..." plus the raw tail when no
        component fits
    """
    path = str(path)
    if len(path) <= max_length:
        return path
    if max_length <= 3:
        return "..."[:max(0, max_length)]

    tail = path[-(max_length - 3):]
    parts = path.split(os.sep)
    if len(parts) <= 2 or not parts[-1]:
        return "..." + tail

    result = parts[-1]
    for part in reversed(parts[:-1]):
        if not part or len(result) + len(part) + 4 >= max_length:
            break
        result = f"{part}{os.sep}{result}"
    truncated = f"...{os.sep}{result}"
    return truncated if len(truncated) <= max_length else "..." + tail


def is_root(directory: Path) -> bool:
    return directory.parent == directory


def contents_summary(folders: int, files: int) -> Optional[str]:
    """Summary like "2 folders, 1 file"; None for an empty listing."""
    parts = []
    if folders:
        parts.append(f"{folders} folder{'s' if folders != 1 else ''}")
    if files:
        parts.append(f"{files} file{'s' if files != 1 else ''}")
    return ", ".join(parts) or None


def list_directory(directory: Path, show_hidden: bool = False) -> Tuple[List[Entry], List[Entry]]:
    """Read a directory into (folders, files), each sorted by name.

    Args:
        directory: Directory to read
        show_hidden: Include dot-files and dot-folders

    Returns:
        Tuple of folder entries and file entries
    """
    folders: List[Entry] = []
    files: List[Entry] = []
    try:
        children = list(directory.iterdir())
    except OSError as e:
        logger.warning(f"Cannot read directory {directory}: {e}")
        return folders, files

    for child in children:
        if not show_hidden and child.name.startswith("."):
            continue
        try:
            info = child.stat()
        except OSError as e:
            logger.warning(f"Skipping unreadable entry {child}: {e}")
            continue
        if stat.S_ISDIR(info.st_mode):
            folders.append(Entry(child.name, child, True, info))
        elif stat.S_ISREG(info.st_mode):
            files.append(Entry(child.name, child, False, info))

    folders.sort(key=lambda entry: entry.name.lower())
    files.sort(key=lambda entry: entry.name.lower())
    return folders, files


def filter_entries(
    entries: List[Entry],
    extensions: Optional[Iterable[str]] = None,
    file_filter: Optional[FileFilter] = None,
) -> List[Entry]:
    """Keep the entries accepted by ``file_filter`` or, without one, by the extensions."""
    if file_filter:
        return [entry for entry in entries if file_filter(entry.name, entry.stat)]
    wanted = normalize_extensions(extensions)
    if not wanted:
        return list(entries)
    return [entry for entry in entries if entry.name.lower().endswith(wanted)]


def resolve_start_dir(start_dir: Optional[str]) -> Path:
    """Absolute starting directory, falling back to the working directory."""
    if start_dir is None:
        return Path.cwd()
    directory = Path(start_dir).expanduser().resolve()
    if not directory.is_dir():
        logger.warning(f"Start directory {directory} is not a directory, using {Path.cwd()}")
        return Path.cwd()
    return directory
