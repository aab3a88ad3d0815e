"""CLI Argument Parsing"""

import argparse
import argcomplete

from gtc import __version__


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='gtc',
        description='Translate a commit message into English, review it, and commit it',
        epilog='Example: gtc "バグを修正した"'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('message', metavar='MESSAGE', help='Commit message to translate into English')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show timing for each step')

    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)
