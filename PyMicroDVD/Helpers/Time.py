from datetime import timedelta

from PyMicroDVD.Helpers.Localization import _

DEFAULT_FRAME_RATE = 25.0

def ValidateFrameRate(fps : float) -> float:
    """
    Ensure a frame rate can be used to convert frames to times
    """
    if not fps > 0:
        raise ValueError(_("Frame rate must be greater than zero, got {fps}").format(fps=fps))
    return fps

def FrameToTime(frame : int, fps : float = DEFAULT_FRAME_RATE) -> int:
    """
    Convert a frame number to milliseconds, truncating toward zero.
    """
    return int(frame * 1000.0 / fps)

def TimeToFrame(seconds : float, fps : float = DEFAULT_FRAME_RATE) -> int:
    """
    Convert a time in seconds to a frame number, truncating toward zero.
    """
    return int(seconds * fps)

def MillisecondsToFrame(milliseconds : int, fps : float = DEFAULT_FRAME_RATE) -> int:
    return TimeToFrame(milliseconds / 1000.0, fps)

def GetMilliseconds(time : timedelta) -> int:
    """
    Whole milliseconds in a timedelta, truncating toward zero
    """
    return int((time.days * 86400 + time.seconds) * 1000 + time.microseconds / 1000)

def FormatMilliseconds(milliseconds : int) -> str:
    """
    Format milliseconds as HH:MM:SS,mmm for display
    """
    sign = "-" if milliseconds < 0 else ""
    milliseconds = abs(milliseconds)
    hours, remainder = divmod(milliseconds, 3600000)
    minutes, remainder = divmod(remainder, 60000)
    seconds, milliseconds = divmod(remainder, 1000)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"
