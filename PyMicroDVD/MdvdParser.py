import logging
import regex

from PyMicroDVD.Helpers.Localization import _
from PyMicroDVD.Helpers.Time import DEFAULT_FRAME_RATE, ValidateFrameRate
from PyMicroDVD.MdvdFile import MdvdFile
from PyMicroDVD.MdvdFormatting import MdvdFormatting
from PyMicroDVD.MdvdLine import MdvdLine
from PyMicroDVD.SubtitleError import ErrorAtLine, LineParserError

# A container line looks like "{0}{25}{C:$0000ff}{y:b,u}{f:DejaVuSans}{s:12}Hello!|{y:i}Hello2!"
_FRAME_PATTERN = regex.compile(r'\{(-?[0-9]+)\}')
_UNCLOSED_FRAME_PATTERN = regex.compile(r'\{-?[0-9]+')
_SEGMENT_PATTERN = regex.compile(r'((?:\{[^}]*\})*)([^|]*)')
_TAG_PATTERN = regex.compile(r'\{([^}]*)\}')

_UTF8_BOM = '\ufeff'

class MdvdParser:
    """
    Parses MicroDVD content into an MdvdFile.

    Each physical line holds a start and end frame followed by one or more segments separated by '|'.
    Every segment becomes an MdvdLine. Tags with an uppercase first letter apply to every segment of
    the physical line, other tags only to the segment they appear in.
    """
    def __init__(self, frame_rate : float = DEFAULT_FRAME_RATE):
        self.frame_rate = ValidateFrameRate(frame_rate)

    def parse_string(self, content : str) -> MdvdFile:
        """
        Parse MicroDVD text. Any malformed line aborts the parse.

        Raises:
            LineParserError: a line does not match the grammar (1-based line number)
            ErrorAtLine: a line is blank
        """
        if content.startswith(_UTF8_BOM):
            content = content[len(_UTF8_BOM):]

        lines : list[MdvdLine] = []
        physical_lines = self._split_lines(content)
        for line_number, line in enumerate(physical_lines, start=1):
            lines.extend(self._parse_container_line(line_number, line))

        logging.debug(f"Parsed {len(lines)} subtitle lines from {len(physical_lines)} MicroDVD lines")
        return MdvdFile(frame_rate=self.frame_rate, lines=lines)

    def _split_lines(self, content : str) -> list[str]:
        """
        Split on line feeds, dropping a carriage return before each one and the empty
        remainder after a final terminator.
        """
        if not content:
            return []

        lines = content.split('\n')
        if lines[-1] == '':
            lines.pop()

        return [ line[:-1] if line.endswith('\r') else line for line in lines ]

    def _parse_container_line(self, line_number : int, line : str) -> list[MdvdLine]:
        if not line.strip():
            raise ErrorAtLine(line_number)

        position = 0
        frames : list[int] = []
        for label in (_("start frame"), _("end frame")):
            match = _FRAME_PATTERN.match(line, position)
            if not match:
                raise LineParserError(line_number, self._describe_frame_error(line, position, label))
            frames.append(int(match.group(1)))
            position = match.end()

        segments : list[tuple[list[str], str]] = []
        while True:
            match = _SEGMENT_PATTERN.match(line, position)
            segments.append((_TAG_PATTERN.findall(match.group(1)), match.group(2)))
            position = match.end()
            if position >= len(line):
                break
            position += 1   # '|'

        start_frame, end_frame = frames
        return self._construct_lines(start_frame, end_frame, segments)

    def _describe_frame_error(self, line : str, position : int, label : str) -> str:
        column = position + 1
        if position >= len(line):
            return _("line ends before the {label}").format(label=label)
        if line[position] != '{':
            return _("expected '{{' before the {label} at column {column}").format(label=label, column=column)
        if _UNCLOSED_FRAME_PATTERN.match(line, position):
            return _("expected '}}' after the {label} at column {column}").format(label=label, column=column)
        return _("expected an integer {label} at column {column}").format(label=label, column=column + 1)

    def _construct_lines(self, start_frame : int, end_frame : int, segments : list[tuple[list[str], str]]) -> list[MdvdLine]:
        """
        Build one MdvdLine per segment, e.g. [(["C:$0000ff", "y:b,u"], "Hello!"), (["s:15"], "Hello2!")]
        yields two lines that both carry "c:$0000ff".
        """
        group_formatting : list[MdvdFormatting] = []
        segment_formatting : list[list[MdvdFormatting]] = []

        for tags, _text in segments:
            line_formatting = []
            for tag in tags:
                if MdvdFormatting.is_group_formatting(tag):
                    group_formatting.append(MdvdFormatting(tag))
                else:
                    line_formatting.append(MdvdFormatting(tag))
            segment_formatting.append(line_formatting)

        return [
            MdvdLine(start_frame, end_frame, group_formatting + line_formatting, text)
            for line_formatting, (_tags, text) in zip(segment_formatting, segments)
        ]

def parse(content : str, frame_rate : float = DEFAULT_FRAME_RATE) -> MdvdFile:
    """
    Parse MicroDVD text into an MdvdFile
    """
    return MdvdParser(frame_rate).parse_string(content)
