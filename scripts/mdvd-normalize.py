import logging
import os
import sys

from mdvd_common import CreateArgParser, InitLogger, ValidateArgs

from PyMicroDVD.Formats.MicroDVDFileHandler import MicroDVDFileHandler
from PyMicroDVD.Helpers import GetInputPath, GetOutputPath
from PyMicroDVD.MdvdFile import MdvdFile
from PyMicroDVD.SubtitleError import SubtitleError

parser = CreateArgParser("Rewrites MicroDVD subtitles in canonical form, merging lines that share the same frames")
parser.add_argument('--entries', action='store_true', help="Print the timed entries instead of writing subtitles")
args = parser.parse_args()
ValidateArgs(parser, args)

logger_options = InitLogger(args.debug, args.logfile)

try:
    input_path = GetInputPath(args.input)
    handler = MicroDVDFileHandler(args.fps)

    extension = os.path.splitext(input_path)[1].lower()
    if extension not in handler.get_file_extensions():
        logging.warning(f"{input_path} does not have a {', '.join(handler.get_file_extensions())} extension, reading it as MicroDVD")

    logging.info(f"Loading {input_path} at {args.fps} fps")
    subtitles : MdvdFile = handler.load_file(input_path)

    if args.entries:
        for entry in subtitles.get_entries():
            print(entry)

    elif args.stdout:
        sys.stdout.write(handler.compose(subtitles))
        sys.stdout.write('\n')

    else:
        output_path = args.output or GetOutputPath(input_path, "normalized")
        handler.save_file(output_path, subtitles)
        logging.info(f"Wrote {subtitles.linecount} lines to {output_path}")

except (SubtitleError, ValueError, OSError) as e:
    logging.error(str(e))
    sys.exit(1)
