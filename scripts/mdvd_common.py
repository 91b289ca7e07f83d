import logging
import os
import sys

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PyMicroDVD.Helpers.Time import DEFAULT_FRAME_RATE
from PyMicroDVD.Formats.MicroDVDFileHandler import MicroDVDFileHandler

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str|None

def InitLogger(debug: bool = False, log_path: str|None = None) -> LoggerOptions:
    """ Initialise console logging and, optionally, a log file """
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'WARNING').upper()
        logging_level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    if log_path:
        try:
            file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
            file_handler.setLevel(logging_level)
            file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
            logging.getLogger('').addHandler(file_handler)
        except Exception as e:
            logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def HandleFormatListing() -> None:
    """ Print the supported subtitle formats and exit """
    print("Supported subtitle formats:", ", ".join(MicroDVDFileHandler().get_file_extensions()))
    sys.exit(0)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create an argument parser with the shared command line arguments
    """
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument('--list-formats', action='store_true')
    pre_args, _ = pre_parser.parse_known_args()
    if pre_args.list_formats:
        HandleFormatListing()

    parser = ArgumentParser(description=description)
    parser.add_argument('input', help="Path to subtitle file (see --list-formats for supported formats)")
    parser.add_argument('-o', '--output', help="Output subtitle file path (defaults to <input>.normalized.sub)")
    parser.add_argument('--stdout', action='store_true', help="Write the result to standard output instead of a file")
    parser.add_argument('--list-formats', action='store_true', help="List supported subtitle formats and exit")
    parser.add_argument('--fps', type=float, default=DEFAULT_FRAME_RATE, help=f"Frame rate of the video (default {DEFAULT_FRAME_RATE})")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    parser.add_argument('--logfile', type=str, default=None, help="Write log output to this file")
    return parser

def ValidateArgs(parser : ArgumentParser, args : Namespace) -> None:
    if args.fps <= 0:
        parser.error("--fps must be greater than zero")
