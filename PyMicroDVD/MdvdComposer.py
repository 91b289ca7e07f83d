import logging
from itertools import groupby

from PyMicroDVD.Helpers.Localization import _
from PyMicroDVD.MdvdFile import MdvdFile
from PyMicroDVD.MdvdFormatting import MdvdFormatting
from PyMicroDVD.MdvdLine import MdvdLine

_LINE_SEPARATOR = '\n'
_UNSAFE_TEXT_CHARACTERS = ('|', '\n', '\r')

class MdvdComposer:
    """
    Writes an MdvdFile in canonical MicroDVD form.

    Lines are ordered by time and lines sharing identical start and end frames are written as a single
    container line, with formatting shared by all of them written once with container line scope.
    """
    def compose(self, data : MdvdFile) -> str:
        sorted_lines = sorted(data.lines, key=lambda line: line.frames)

        container_lines = [
            self._compose_container_line(frames, list(group))
            for frames, group in groupby(sorted_lines, key=lambda line: line.frames)
        ]

        logging.debug(f"Composed {len(data.lines)} subtitle lines into {len(container_lines)} MicroDVD lines")
        return _LINE_SEPARATOR.join(container_lines)

    def _compose_container_line(self, frames : tuple[int, int], group : list[MdvdLine]) -> str:
        start_frame, end_frame = frames
        common_formatting = self._get_common_formatting(group)

        segments = [
            ''.join(formatting.to_tag(False) for formatting in self._get_individual_formatting(line, common_formatting)) + line.text
            for line in group
        ]

        for index, line in enumerate(group):
            if any(character in line.text for character in _UNSAFE_TEXT_CHARACTERS):
                logging.warning(_("Text at frames {start}-{end} contains a line separator and will not read back as a single line: {text}").format(
                    start=start_frame, end=end_frame, text=repr(line.text)))

            # A leading '{' is read back as a tag block if a '}' follows anywhere later on the line
            elif line.text.startswith('{') and '}' in '|'.join([line.text] + segments[index + 1:]):
                logging.warning(_("Text at frames {start}-{end} starts with '{{' and will be read back as formatting: {text}").format(
                    start=start_frame, end=end_frame, text=repr(line.text)))

        header = f"{{{start_frame}}}{{{end_frame}}}" + ''.join(formatting.to_tag(True) for formatting in sorted(common_formatting))
        return header + '|'.join(segments)

    def _get_common_formatting(self, group : list[MdvdLine]) -> set[MdvdFormatting]:
        """
        Formatting shared by every line in a group. A line on its own has no common formatting.
        """
        if len(group) < 2:
            return set()

        common = set(group[0].formatting)
        for line in group[1:]:
            common.intersection_update(line.formatting)

        # Tags that cannot be written with an uppercase first letter stay with each line
        return { formatting for formatting in common if formatting.can_group }

    def _get_individual_formatting(self, line : MdvdLine, common_formatting : set[MdvdFormatting]) -> list[MdvdFormatting]:
        """
        The line's formatting without the common formatting, duplicates removed, in first-seen order
        """
        return [ formatting for formatting in dict.fromkeys(line.formatting) if formatting not in common_formatting ]

def compose(data : MdvdFile) -> str:
    """
    Compose an MdvdFile into canonical MicroDVD text
    """
    return MdvdComposer().compose(data)

def serialize(data : MdvdFile) -> bytes:
    """
    Compose an MdvdFile into canonical MicroDVD text encoded as UTF-8
    """
    return compose(data).encode('utf-8')
