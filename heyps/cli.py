import argparse
import logging
import sys

from rich.console import Console
from rich.text import Text

from heyps import __version__
from heyps.container import container
from heyps.entities.script import ScriptRequest
from heyps.entities.target import TargetQualifier
from heyps.exceptions import HeyPsError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _print_error(console: Console, exc: Exception) -> None:
    console.print(Text.assemble(("Error: ", "bold red"), str(exc)))


def build_parser(default_target: str) -> argparse.ArgumentParser:
    registry = container.get_app_registry()
    parser = argparse.ArgumentParser(
        prog="heyps",
        description="Executes an Adobe script in the target application.",
        epilog="Applications: "
        + ", ".join(f"{f.abbreviation} = {f.display_name}" for f in registry.families()),
    )
    parser.add_argument(
        "-a",
        "--app",
        required=True,
        type=str.lower,
        choices=registry.abbreviations(),
        help="The target Adobe application",
    )
    parser.add_argument(
        "-t",
        "--target",
        default=default_target,
        metavar="TARGET",
        help="Version to use: latest, beta or a release year such as 2023 "
        f"(default: {default_target})",
    )
    parser.add_argument(
        "-e",
        "--execute",
        required=True,
        metavar="FILE_PATH",
        help="The path to the script file to execute "
        "(relative paths are also looked up in the scripts directory)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    console = Console(stderr=True)
    try:
        settings = container.get_settings()
    except HeyPsError as e:
        _print_error(console, e)
        return 1

    args = build_parser(settings.default_target).parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        family = container.get_app_registry().lookup(args.app)
        target = TargetQualifier.parse(args.target)

        run_script = container.get_run_script_use_case()
        script_path = run_script.locate_script(args.execute)
        run_script.validate_script(script_path, family)

        resolved = container.get_resolve_application_use_case().execute(family, target)
        result = run_script.execute(
            ScriptRequest(file_path=script_path, resolved_app=resolved, family=family)
        )
    except HeyPsError as e:
        _print_error(console, e)
        return 1

    if result.output:
        print(result.output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
