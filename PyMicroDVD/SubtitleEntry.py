from __future__ import annotations
from datetime import timedelta

from PyMicroDVD.Helpers.Time import FormatMilliseconds, GetMilliseconds

class SubtitleEntry:
    """
    Format-agnostic timed text entry exchanged with callers.

    Times are absolute milliseconds. A text of None means "leave the text unchanged"
    when the entry is used to update a subtitle file.
    """
    def __init__(self, start_ms : int, end_ms : int, text : str|None = None):
        self.start_ms : int = start_ms
        self.end_ms : int = end_ms
        self.text : str|None = text

    @classmethod
    def Construct(cls, start : timedelta, end : timedelta, text : str|None = None) -> SubtitleEntry:
        """
        Create an entry from timedelta start and end times
        """
        return cls(GetMilliseconds(start), GetMilliseconds(end), text)

    @property
    def start(self) -> timedelta:
        return timedelta(milliseconds=self.start_ms)

    @property
    def end(self) -> timedelta:
        return timedelta(milliseconds=self.end_ms)

    @property
    def duration_ms(self) -> int:
        return self.end_ms - self.start_ms

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubtitleEntry):
            return NotImplemented
        return (self.start_ms, self.end_ms, self.text) == (other.start_ms, other.end_ms, other.text)

    def __repr__(self) -> str:
        return f"SubtitleEntry({self.start_ms}, {self.end_ms}, {self.text!r})"

    def __str__(self) -> str:
        return f"{FormatMilliseconds(self.start_ms)} --> {FormatMilliseconds(self.end_ms)}: {self.text or ''}"
