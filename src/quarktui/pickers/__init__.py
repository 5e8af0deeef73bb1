"""
File and folder pickers for quarktui.
"""
from quarktui.pickers.common import (FILE_ICONS, PickerIcons, PickerLabels,
                                     list_directory, truncate_path)
from quarktui.pickers.file_picker import (FilePicker, pick_file,
                                          pick_file_by_extension)
from quarktui.pickers.folder_picker import (FolderPicker, pick_folder,
                                            pick_folder_from_home)

__all__ = [
    # Shared
    'FILE_ICONS',
    'PickerIcons',
    'PickerLabels',
    'list_directory',
    'truncate_path',

    # Files
    'FilePicker',
    'pick_file',
    'pick_file_by_extension',

    # Folders
    'FolderPicker',
    'pick_folder',
    'pick_folder_from_home',
]
