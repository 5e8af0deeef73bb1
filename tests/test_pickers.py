import os
from pathlib import Path

import pytest

from quarktui.core.style import strip_ansi
from quarktui.dialogs import SelectResult
from quarktui.pickers import (FilePicker, FolderPicker, PickerIcons,
                              PickerLabels, list_directory, truncate_path)
from quarktui.pickers.common import (contents_summary, file_hint,
                                     filter_entries, normalize_extensions,
                                     resolve_start_dir)


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    root = tmp_path.resolve()
    for folder in ("beta", "Alpha", ".hidden"):
        (root / folder).mkdir()
    for name in ("notes.txt", "b.PDF", "image.png", ".env"):
        (root / name).write_text("x")
    (root / "Alpha" / "inner.txt").write_text("x")
    return root


def names(entries):
    return [entry.name for entry in entries]


def test_list_directory_sorts_and_hides(tree: Path) -> None:
    folders, files = list_directory(tree)
    assert names(folders) == ["Alpha", "beta"]
    assert names(files) == ["b.PDF", "image.png", "notes.txt"]
    assert all(entry.is_dir for entry in folders)


def test_list_directory_hidden(tree: Path) -> None:
    folders, files = list_directory(tree, show_hidden=True)
    assert names(folders)[0] == ".hidden"
    assert ".env" in names(files)


def test_list_directory_missing(tmp_path: Path) -> None:
    assert list_directory(tmp_path / "missing") == ([], [])


def test_list_directory_skips_broken_links(tree: Path) -> None:
    os.symlink(tree / "nowhere", tree / "dangling")
    _, files = list_directory(tree)
    assert "dangling" not in names(files)


def test_extension_filter(tree: Path) -> None:
    _, files = list_directory(tree)
    assert names(filter_entries(files, ["pdf"])) == ["b.PDF"]
    assert names(filter_entries(files, [".TXT", "png"])) == ["image.png", "notes.txt"]
    assert names(filter_entries(files)) == names(files)


def test_custom_filter_replaces_extensions(tree: Path) -> None:
    _, files = list_directory(tree)
    picked = filter_entries(files, [".txt"], file_filter=lambda name, info: name.startswith("i"))
    assert names(picked) == ["image.png"]


def test_normalize_extensions() -> None:
    assert normalize_extensions(["PDF", ".md"]) == (".pdf", ".md")
    assert normalize_extensions([]) is None


def test_truncate_path() -> None:
    path = os.sep.join(["", "home", "user", "projects", "very", "long", "path", "file.txt"])
    assert truncate_path(path, 20) == os.sep.join(["...", "path", "file.txt"])
    assert truncate_path("short", 45) == "short"
    assert truncate_path("a" * 50, 10) == "...aaaaaaa"


def test_truncate_path_tiny_limits() -> None:
    assert truncate_path("/a/long/path", 3) == "..."
    assert truncate_path("/a/long/path", 2) == ".."
    assert truncate_path("/a/long/path", 0) == ""
    assert truncate_path("/a/long/path", 4) == "...h"
    assert truncate_path(os.sep.join(["", "dir", "x" * 30]), 12) == "..." + "x" * 9


def test_contents_summary() -> None:
    assert contents_summary(2, 1) == "2 folders, 1 file"
    assert contents_summary(1, 0) == "1 folder"
    assert contents_summary(0, 3) == "3 files"
    assert contents_summary(0, 0) is None


def test_icons_and_hints() -> None:
    icons = PickerIcons(files={".py": "P"})
    assert icons.for_file("script.PY") == "P"
    assert icons.for_file("doc.pdf") == "📕"
    assert icons.for_file("unknown.xyz") == "📄"
    assert file_hint("archive.tar.gz") == "GZ"
    assert file_hint("Makefile") == "FILE"


def test_resolve_start_dir(tree: Path) -> None:
    assert resolve_start_dir(None) == Path.cwd()
    assert resolve_start_dir(str(tree)) == tree
    assert resolve_start_dir(str(tree / "notes.txt")) == Path.cwd()


def test_file_picker_options(tree: Path) -> None:
    picker = FilePicker(str(tree), extensions=["txt"])
    options = picker.options()
    assert [option.value.action for option in options] == ["parent", "open", "open", "file", "cancel"]
    assert strip_ansi(options[3].label) == "📝 notes.txt"
    assert options[3].hint == "TXT"
    assert picker.info_lines()[1] == "Contents: 2 folders, 1 file"


def test_file_picker_navigation(tree: Path) -> None:
    picker = FilePicker(str(tree), labels=PickerLabels(parent="Up"))
    alpha = picker.options()[1].value
    assert picker.handle(SelectResult("selected", alpha)) is False
    assert picker.directory == tree / "Alpha"

    menu = picker.menu()
    assert menu.options[0].label.endswith("Up")
    assert menu.allow_number_keys is False
    assert picker.handle(SelectResult("selected", menu.options[0].value)) is False
    assert picker.directory == tree
    # Coming back up re-selects the folder we left
    assert picker.menu().selected_index == 1


def test_file_picker_selects_file(tree: Path) -> None:
    picker = FilePicker(str(tree))
    choice = next(option.value for option in picker.options() if option.value.action == "file")
    assert picker.handle(SelectResult("selected", choice)) is True
    assert picker.selected == tree / "b.PDF"


def test_file_picker_cancel(tree: Path) -> None:
    picker = FilePicker(str(tree))
    assert picker.handle(SelectResult("cancelled")) is True
    assert picker.selected is None
    assert picker.handle(SelectResult("selected", picker.options()[-1].value)) is True
    assert picker.selected is None


def test_file_picker_empty_directory(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    picker = FilePicker(str(empty))
    picker.options()
    assert picker.info_lines()[1] == "Empty directory"


def test_folder_picker(tree: Path) -> None:
    picker = FolderPicker(str(tree))
    options = picker.options()
    assert [option.value.action for option in options] == ["select", "parent", "open", "open", "cancel"]
    assert "Select this folder" in strip_ansi(options[0].label)
    assert picker.info_lines()[1] == "Subfolders: 2"

    assert picker.handle(SelectResult("selected", options[2].value)) is False
    picker.options()
    assert picker.info_lines()[1] == "No subfolders"

    assert picker.handle(SelectResult("selected", picker.options()[0].value)) is True
    assert picker.selected == tree / "Alpha"


def test_folder_picker_filter(tree: Path) -> None:
    picker = FolderPicker(str(tree), filter=lambda name, info: name.islower())
    labels = [strip_ansi(option.label) for option in picker.options()]
    assert "📁 beta" in labels
    assert "📁 Alpha" not in labels
