from abc import ABC, abstractmethod
from typing import TextIO

from PyMicroDVD.MdvdFile import MdvdFile

# Default encodings for reading subtitle files
default_encoding = 'utf-8'
fallback_encoding = 'iso-8859-1'


class SubtitleFileHandler(ABC):
    """
    Abstract interface for reading and writing subtitle files.

    Implementations handle format-specific operations while callers work with timed entries.
    """

    SUPPORTED_EXTENSIONS: dict[str, int] = {}

    @abstractmethod
    def parse_file(self, file_obj: TextIO) -> MdvdFile:
        """
        Parse subtitle file content.

        Raises:
            SubtitleParseError: If parsing fails
        """
        raise NotImplementedError

    @abstractmethod
    def parse_string(self, content: str) -> MdvdFile:
        """
        Parse subtitle string content.

        Raises:
            SubtitleParseError: If parsing fails
        """
        raise NotImplementedError

    @abstractmethod
    def compose(self, data: MdvdFile) -> str:
        """
        Compose subtitle lines into text for saving or exporting.
        """
        raise NotImplementedError

    @abstractmethod
    def load_file(self, path: str) -> MdvdFile:
        """
        Open a subtitle file and parse it.

        Raises:
            SubtitleParseError: If parsing fails
            UnicodeDecodeError: If file is in an unsupported encoding
        """
        raise NotImplementedError

    def save_file(self, path: str, data: MdvdFile) -> None:
        """
        Compose subtitle lines and write them to a file as UTF-8.
        """
        with open(path, 'w', encoding=default_encoding, newline='') as f:
            f.write(self.compose(data))

    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler.
        """
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())

    def get_extension_priorities(self) -> dict[str, int]:
        """
        Get priority for each supported extension.

        Returns:
            dict: Mapping of file extensions to their priority (higher = more preferred)
        """
        return self.__class__.SUPPORTED_EXTENSIONS.copy()
