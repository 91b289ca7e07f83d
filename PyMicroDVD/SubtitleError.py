from PyMicroDVD.Helpers.Localization import _

class SubtitleError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return str(self.error)
        elif self.message:
            return self.message
        return super().__str__()

class SubtitleParseError(SubtitleError):
    """ Subtitle content could not be parsed """
    def __init__(self, message : str, error : Exception|None = None):
        super().__init__(message, error)

class LineParserError(SubtitleParseError):
    """
    A line did not match the MicroDVD grammar and the cause is known.
    Line numbers are 1-based.
    """
    def __init__(self, line_number : int, reason : str):
        super().__init__(_("Parse error at line {line} because of {reason}").format(line=line_number, reason=reason))
        self.line_number = line_number
        self.reason = reason

class ErrorAtLine(SubtitleParseError):
    """ A line did not match the MicroDVD grammar """
    def __init__(self, line_number : int):
        super().__init__(_("Parse error at line {line}").format(line=line_number))
        self.line_number = line_number

class EntryCountMismatchError(SubtitleError):
    """ The number of entries supplied for an update does not match the number of subtitle lines """
    def __init__(self, expected : int, actual : int):
        super().__init__(_("Expected {expected} subtitle entries but received {actual}").format(expected=expected, actual=actual))
        self.expected = expected
        self.actual = actual
