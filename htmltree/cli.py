import argparse
import logging
import sys

from dotenv import load_dotenv

from . import __version__
from .config import get_settings
from .errors import HTMLParseError, LoadError
from .loader import load_source
from .parser import parse
from .serializer import print_tree, render

logger = logging.getLogger(__name__)


def parse_params(pairs):
    """["name=World", ...] -> {"name": "World", ...}"""
    params = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(f"expected key=value, got {pair!r}")
        key, value = pair.split("=", 1)
        params[key] = value
    return params


def build_parser():
    parser = argparse.ArgumentParser(prog="htmltree", description="Parse an HTML document into a node tree")
    parser.add_argument("source", help="file path or http(s) URL")
    parser.add_argument("--render", action="store_true", help="print serialized HTML instead of the tree")
    parser.add_argument("-p", "--param", action="append", default=[], metavar="KEY=VALUE",
                        help="fill {{KEY}} placeholders (repeatable)")
    parser.add_argument("--keep-scripts", action="store_true", help="do not strip <script>/<style> blocks")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    load_dotenv()
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        params = parse_params(args.param)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        html = load_source(args.source, settings, strip_scripts=not args.keep_scripts)
        forest = parse(html, max_depth=settings.max_depth)
    except (LoadError, HTMLParseError) as e:
        print(f"[!] {e}", file=sys.stderr)
        return 1

    if params:
        for root in forest:
            root.apply_params_recursive(params)

    if args.render:
        print(render(forest))
    else:
        for root in forest:
            print_tree(root)
    return 0


if __name__ == "__main__":
    sys.exit(main())
