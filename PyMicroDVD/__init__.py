"""
PyMicroDVD - MicroDVD subtitle reading and writing

Reads frame-based MicroDVD (.sub) subtitles into timed entries and writes them back in canonical form,
merging lines that share the same frames and hoisting their shared formatting.

Basic Usage
-----------

# Parse subtitles and get timed entries
subtitles = parse("{0}{25}{y:i}Hello!|World")
entries = get_entries(subtitles)

# Change times or text, one entry per line
entries[0].text = "Goodbye!"
update_entries(subtitles, entries)

# Write canonical MicroDVD
data = serialize(subtitles)
"""
from __future__ import annotations

from PyMicroDVD.Formats.MicroDVDFileHandler import MicroDVDFileHandler
from PyMicroDVD.Helpers.Time import DEFAULT_FRAME_RATE
from PyMicroDVD.MdvdComposer import MdvdComposer, compose, serialize
from PyMicroDVD.MdvdFile import MdvdFile
from PyMicroDVD.MdvdFormatting import MdvdFormatting
from PyMicroDVD.MdvdLine import MdvdLine
from PyMicroDVD.MdvdParser import MdvdParser, parse
from PyMicroDVD.SubtitleEntry import SubtitleEntry
from PyMicroDVD.SubtitleError import (
    EntryCountMismatchError,
    ErrorAtLine,
    LineParserError,
    SubtitleError,
    SubtitleParseError,
)
from PyMicroDVD.version import __version__


def get_entries(subtitles : MdvdFile) -> list[SubtitleEntry]:
    """
    Get a timed entry for every subtitle line, in file order.
    """
    return subtitles.get_entries()

def update_entries(subtitles : MdvdFile, entries : list[SubtitleEntry]) -> None:
    """
    Update subtitle line times and text from entries, which must match the lines one to one.

    Entries with no text leave the line's text unchanged. Formatting is never changed.

    Raises
    ------
    EntryCountMismatchError
        If the number of entries is different from the number of lines.
    """
    subtitles.update_entries(entries)

def load_file(filepath : str, frame_rate : float = DEFAULT_FRAME_RATE) -> MdvdFile:
    """
    Load and parse a MicroDVD file, falling back to a legacy encoding if it is not valid UTF-8.

    Raises
    ------
    SubtitleParseError
        If a line of the file does not match the MicroDVD grammar.
    """
    return MicroDVDFileHandler(frame_rate).load_file(filepath)

def save_file(filepath : str, subtitles : MdvdFile) -> None:
    """
    Write subtitles to a file in canonical MicroDVD form.
    """
    MicroDVDFileHandler(subtitles.frame_rate).save_file(filepath, subtitles)


__all__ = [
    '__version__',
    'DEFAULT_FRAME_RATE',
    'EntryCountMismatchError',
    'ErrorAtLine',
    'LineParserError',
    'MdvdComposer',
    'MdvdFile',
    'MdvdFormatting',
    'MdvdLine',
    'MdvdParser',
    'MicroDVDFileHandler',
    'SubtitleEntry',
    'SubtitleError',
    'SubtitleParseError',
    'compose',
    'get_entries',
    'load_file',
    'parse',
    'save_file',
    'serialize',
    'update_entries',
]
