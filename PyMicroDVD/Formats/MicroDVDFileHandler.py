import logging
from typing import TextIO

from PyMicroDVD.Helpers.Localization import _
from PyMicroDVD.Helpers.Time import DEFAULT_FRAME_RATE, ValidateFrameRate
from PyMicroDVD.MdvdComposer import MdvdComposer
from PyMicroDVD.MdvdFile import MdvdFile
from PyMicroDVD.MdvdParser import MdvdParser
from PyMicroDVD.SubtitleError import SubtitleParseError
from PyMicroDVD.SubtitleFileHandler import (
    SubtitleFileHandler,
    default_encoding,
    fallback_encoding,
)

class MicroDVDFileHandler(SubtitleFileHandler):
    """
    File handler for the frame-based MicroDVD (.sub) format.

    Frames are converted to times with the handler's frame rate, which the file itself does not record.
    """

    SUPPORTED_EXTENSIONS = {'.sub': 10}

    def __init__(self, frame_rate : float = DEFAULT_FRAME_RATE):
        self.frame_rate = ValidateFrameRate(frame_rate)

    def load_file(self, path: str) -> MdvdFile:
        try:
            with open(path, 'r', encoding=default_encoding, newline='') as f:
                return self.parse_file(f)
        except UnicodeDecodeError:
            logging.info(_("Unable to read {path} as {encoding}, retrying with {fallback}").format(
                path=path, encoding=default_encoding, fallback=fallback_encoding))
            with open(path, 'r', encoding=fallback_encoding, newline='') as f:
                return self.parse_file(f)

    def parse_file(self, file_obj: TextIO) -> MdvdFile:
        """
        Parse MicroDVD file content
        """
        try:
            content = file_obj.read()
        except UnicodeDecodeError:
            raise  # Re-raise UnicodeDecodeError for fallback handling
        except Exception as e:
            raise SubtitleParseError(_("Failed to read file: {}").format(str(e)), e)

        return self.parse_string(content)

    def parse_string(self, content: str) -> MdvdFile:
        """
        Parse MicroDVD string content
        """
        return MdvdParser(self.frame_rate).parse_string(content)

    def compose(self, data: MdvdFile) -> str:
        """
        Compose subtitle lines into canonical MicroDVD text
        """
        return MdvdComposer().compose(data)
