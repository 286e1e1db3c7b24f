"""
Collision safe creation of notification files.

Files are created with exclusive create semantics, so two notifications
written at the same time can never end up in the same file. When the name
is taken a sequence number is added before the extension: ``msg.smd.xml``,
``msg-1.smd.xml``, ``msg-2.smd.xml`` and so on.
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")


def sanitize_message_id(message_id: str) -> str:
    """Replace every character outside [A-Za-z0-9.-] with an underscore."""
    return _UNSAFE_CHARS.sub("_", message_id)


def split_extension(base_path: Union[str, Path], suffix: Optional[str] = None) -> tuple[str, str]:
    """
    Split a path into the part before and the extension after which the
    sequence number is inserted.

    When ``suffix`` is given and the file name ends with it, the suffix is
    the extension, also when the name consists of the suffix only.
    Otherwise the split is at the last '.' of the file name, unless that
    is its first character.
    """
    path = str(base_path)
    directory, name = os.path.split(path)

    if suffix and name.endswith(suffix):
        start_ext = len(path) - len(suffix)
    else:
        dot = name.rfind(".")
        if dot <= 0:
            return path, ""
        start_ext = len(path) - len(name) + dot

    return path[:start_ext], path[start_ext:]


@dataclass
class FileAllocation:
    """A newly created file reserved for one notification."""
    path: Path
    handle: BinaryIO

    def close(self) -> None:
        self.handle.close()

    def __enter__(self) -> "FileAllocation":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class UniqueFileAllocator:
    """Creates files that did not exist before, adding a sequence number on collision."""

    def __init__(self, suffix: Optional[str] = None):
        self.suffix = suffix

    def allocate(self, base_path: Union[str, Path]) -> FileAllocation:
        """
        Create a new file at base_path, or at the first free numbered variant.

        Args:
            base_path: Preferred path of the file

        Returns:
            Allocation with the path and a binary handle opened for writing

        Raises:
            OSError: On any failure other than the name being taken
        """
        name_only, ext = split_extension(base_path, self.suffix)
        target = Path(base_path)
        seq = 1

        while True:
            try:
                handle = open(target, "xb")
            except FileExistsError:
                target = Path(f"{name_only}-{seq}{ext}")
                seq += 1
                continue
            return FileAllocation(path=target, handle=handle)
