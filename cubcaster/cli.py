"""Command line entry point: check a scene file and report what it holds."""

from __future__ import annotations

import sys

from .config import is_cub_filename, load_cub
from .errors import CubError, ErrorKind

SAVE_FLAG = "--save"


def _report_error(error: CubError) -> int:
    print("Error", file=sys.stderr)
    print(error, file=sys.stderr)
    return 1


def _check(path: str) -> int:
    try:
        config = load_cub(path)
    except CubError as error:
        return _report_error(error)
    width, height = config.resolution
    print(
        f"{path}: {width}x{height}, map {config.map.width}x{config.map.height}, "
        f"player {config.map.player}"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command with ``argv`` (without the program name)."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("You forgot the cub file name")
        return 2
    if len(args) == 1:
        if not is_cub_filename(args[0]):
            return _report_error(CubError(ErrorKind.NOT_CUB, args[0]))
        return _check(args[0])
    if len(args) == 2 and args[1] == SAVE_FLAG:
        return _check(args[0])
    print("WRONG")
    return 2


if __name__ == "__main__":
    sys.exit(main())