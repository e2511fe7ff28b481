import argparse
import logging
import sys
from typing import Optional

from PIL import Image

from qoi_tools import QOIImage
from qoi_tools.exceptions import QOIError
from qoi_tools.header import FileHeader
from qoi_tools.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="qoi-tools command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    encode_parser = subparsers.add_parser("encode", help="Convert an image to QOI")
    encode_parser.add_argument("input_file", help="Input image file")
    encode_parser.add_argument("output_file", help="Output QOI file")
    encode_parser.add_argument(
        "--linear", action="store_true", help="Tag the output as linear RGB."
    )

    decode_parser = subparsers.add_parser("decode", help="Convert QOI to an image")
    decode_parser.add_argument("input_file", help="Input QOI file")
    decode_parser.add_argument("output_file", help="Output image file")
    decode_parser.add_argument(
        "--channels", type=int, choices=(3, 4), help="Output channel count."
    )

    show_parser = subparsers.add_parser("show", help="Show the file header")
    show_parser.add_argument("input_file", help="Input QOI file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    package_logger = logging.getLogger("qoi_tools")
    if args.verbose:
        package_logger.setLevel(logging.DEBUG)
    else:
        package_logger.setLevel(logging.INFO)

    try:
        if args.command == "encode":
            with Image.open(args.input_file) as image:
                qoi = QOIImage.frompil(
                    image, colorspace="linear" if args.linear else "srgb"
                )
            qoi.save(args.output_file)
            logger.info("Saved %r to %s", qoi, args.output_file)

        elif args.command == "decode":
            qoi = QOIImage.open(args.input_file, channels=args.channels)
            qoi.topil().save(args.output_file)
            logger.info("Saved %r to %s", qoi, args.output_file)

        elif args.command == "show":
            with open(args.input_file, "rb") as f:
                pprint(FileHeader.read(f))
    except QOIError as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    sys.exit(main())
