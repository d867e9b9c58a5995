from typing import Any, List, Optional, TypeAlias
import argparse
import logging
import sys

from portreview import __version__

##################################################################################################
# Command tree
##################################################################################################

ArgParser: TypeAlias = argparse.ArgumentParser
SubParser: TypeAlias = 'argparse._SubParsersAction[argparse.ArgumentParser]'

class Commands:
    """
    Registers subcommands on a root parser. The chosen name ends up in
    ``args.command``; choosing one is mandatory.
    """

    def __init__(self, parser: ArgParser) -> None:
        self.subparsers: SubParser = parser.add_subparsers(dest='command', metavar='command')
        self.subparsers.required = True

    class Command:
        def __init__(self, commands: 'Commands', name: str, help: Optional[str] = None) -> None:
            self.parser = commands.subparsers.add_parser(name, help=help)

        def __enter__(self) -> ArgParser:
            return self.parser

        def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
            pass

    def __call__(self, name: str, help: Optional[str] = None) -> 'Commands.Command':
        return Commands.Command(self, name, help=help)


def build_parser() -> ArgParser:
    parser = argparse.ArgumentParser(
        prog='portreview',
        description='Check a port repository against the template contracts.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    commands = Commands(parser)

    with commands('review', help='Runs a review on a port') as cmd:
        cmd.add_argument('url', type=str, help='A repository URL to review')
        cmd.add_argument('-s', '--skip-clone', action='store_true',
                         help='Reuse the existing local clone instead of cloning')

    return parser

##################################################################################################
# Main
##################################################################################################

def main(argv: Optional[List[str]] = None) -> int:
    from portreview.config import ConfigError, load_ports, log_level_from_env
    from portreview.messages import error
    from portreview.repository import ReviewError

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=log_level_from_env(), format='%(message)s')
    # GitPython logs every command it runs at debug level
    logging.getLogger('git').setLevel(logging.WARNING)

    try:
        # Catalog is validated at startup; the review itself does not consult it.
        load_ports()

        match args.command:
            case 'review':
                from portreview.tasks.review import review_main
                return review_main(args.url, skip_clone=args.skip_clone)

            case _:
                raise ValueError(f"Unknown command: {args.command}")

    except (ReviewError, ConfigError) as e:
        error(str(e))
        return 1


def run() -> None:
    if sys.platform.lower() == "win32":
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    sys.exit(main())
