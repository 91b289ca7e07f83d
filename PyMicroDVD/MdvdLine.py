from __future__ import annotations

from PyMicroDVD.MdvdFormatting import MdvdFormatting
from PyMicroDVD.SubtitleEntry import SubtitleEntry
from PyMicroDVD.Helpers.Time import FrameToTime, MillisecondsToFrame

class MdvdLine:
    """
    A single displayable line: one pipe-separated segment of a MicroDVD container line.

    Formatting holds the container line tags first, then the line's own tags, in the order
    they were read. Duplicates are allowed.
    """
    def __init__(self, start_frame : int, end_frame : int, formatting : list[MdvdFormatting]|None = None, text : str = ""):
        self.start_frame : int = start_frame
        self.end_frame : int = end_frame
        self.formatting : list[MdvdFormatting] = formatting or []
        self.text : str = text

    @property
    def frames(self) -> tuple[int, int]:
        return (self.start_frame, self.end_frame)

    def to_subtitle_entry(self, fps : float) -> SubtitleEntry:
        return SubtitleEntry(FrameToTime(self.start_frame, fps), FrameToTime(self.end_frame, fps), self.text)

    def update_from_entry(self, entry : SubtitleEntry, fps : float) -> None:
        """
        Update frames (and text, if provided) from an entry. Formatting is not modified.
        """
        self.start_frame = MillisecondsToFrame(entry.start_ms, fps)
        self.end_frame = MillisecondsToFrame(entry.end_ms, fps)
        if entry.text is not None:
            self.text = entry.text

    def __repr__(self) -> str:
        return f"MdvdLine({self.start_frame}, {self.end_frame}, {self.formatting!r}, {self.text!r})"
