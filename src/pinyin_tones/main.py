import argparse
import logging
import sys

from .config import load_settings
from .errors import PinyinTonesError
from .text import convert_text_file
from .vocabulary import convert_vocabulary_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pinyin-tones",
        description="Convert numbered pinyin (ni3 hao3) to tone marks (nǐ hǎo).",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to a TOML config file.")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level, e.g. INFO or WARNING.")
    parser.add_argument("--encoding", type=str, default=None, help="Encoding of input and output files.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    vocab = subparsers.add_parser(
        "vocab", help="Convert the pinyin column of a (Mandarin, pinyin, translation) list."
    )
    vocab.add_argument("input_path", type=str, help="The vocabulary file to read.")
    vocab.add_argument("output_path", type=str, help="The path to save the converted list.")
    vocab.add_argument("--sep", type=str, default=None, help="Field delimiter of the input file.")
    vocab.add_argument("--output-sep", type=str, default=None, help="Field delimiter of the output file.")
    vocab.add_argument(
        "--no-header",
        action="store_true",
        help="The input file has no header row.",
    )
    vocab.add_argument("--verbose", action="store_true", help="Show a progress bar.")

    text = subparsers.add_parser("text", help="Convert all numbered pinyin in a text or EPUB file.")
    text.add_argument("input_path", type=str, help="The text or EPUB file to read.")
    text.add_argument("output_path", type=str, help="The path to save the converted text.")
    text.add_argument("--echo", action="store_true", help="Also print the converted text.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    The main function for the script.

    Returns
    -------
    int
        The exit status: 0 on success, 1 if a file could not be read or written.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except PinyinTonesError as e:
        logging.basicConfig(format="%(levelname)s: %(message)s")
        logger.error("%s", e)
        return 1

    if args.log_level:
        settings.log_level = args.log_level
    if args.encoding:
        settings.encoding = args.encoding
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        logging.basicConfig(format="%(levelname)s: %(message)s")
        logger.error("Unknown log level: %s", settings.log_level)
        return 1
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        if args.command == "vocab":
            if args.sep:
                settings.sep = args.sep
            if args.output_sep:
                settings.output_sep = args.output_sep
            if args.no_header:
                settings.header = False
            convert_vocabulary_file(args.input_path, args.output_path, settings, verbose=args.verbose)
        else:
            converted = convert_text_file(args.input_path, args.output_path, settings)
            if args.echo:
                print(converted)
    except PinyinTonesError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
