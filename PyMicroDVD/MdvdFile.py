from __future__ import annotations

from PyMicroDVD.Helpers.Time import DEFAULT_FRAME_RATE, ValidateFrameRate
from PyMicroDVD.MdvdLine import MdvdLine
from PyMicroDVD.SubtitleEntry import SubtitleEntry
from PyMicroDVD.SubtitleError import EntryCountMismatchError

class MdvdFile:
    """
    A reconstructable MicroDVD subtitle file.

    Attributes:
        frame_rate (float): Frames per second of the associated video, used to convert frames to times
        lines (list[MdvdLine]): Every single line, in the order it was read
    """
    def __init__(self, frame_rate : float = DEFAULT_FRAME_RATE, lines : list[MdvdLine]|None = None):
        self.frame_rate : float = ValidateFrameRate(frame_rate)
        self.lines : list[MdvdLine] = lines or []

    @property
    def linecount(self) -> int:
        return len(self.lines)

    def get_entries(self) -> list[SubtitleEntry]:
        """
        Get a timed entry for every line, in the same order as the lines
        """
        return [ line.to_subtitle_entry(self.frame_rate) for line in self.lines ]

    def update_entries(self, entries : list[SubtitleEntry]) -> None:
        """
        Update line times and text from a list of entries matching the lines one to one.

        Raises:
            EntryCountMismatchError: if the number of entries differs from the number of lines
        """
        if len(entries) != len(self.lines):
            raise EntryCountMismatchError(len(self.lines), len(entries))

        for line, entry in zip(self.lines, entries):
            line.update_from_entry(entry, self.frame_rate)
