# randfile/cli.py

import argparse
import sys
import logging
from random import Random

from randfile.creator import create_random_file
from randfile.digest import file_digest
from randfile.options import PARAMETERS, Options
from randfile.writer import WriteFailure


logger = logging.getLogger(__name__)

PROG = "create-random-file"

EPILOG = """examples:
  create-random-file file1 1M                          1MB of random bytes
  create-random-file file3 3.5K --pattern AABBCC       3.5KB of a repeated pattern
  create-random-file file4 4K -p A -p B -p C           4KB of random runs of A, B and C
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Create a "random" file with a specified size, filled with '
                    'random bytes or with repeated patterns.',
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    groups = {}
    for spec in PARAMETERS:
        target = parser
        if spec.group:
            if spec.group not in groups:
                groups[spec.group] = parser.add_mutually_exclusive_group()
            target = groups[spec.group]

        if spec.positional and spec.aliases:
            target.add_argument(spec.name, nargs='?', help=spec.help)
            target.add_argument(*spec.aliases, dest=f"{spec.name}_option",
                                metavar=spec.name.upper(), help=f"Same as {spec.name.upper()}")
        elif spec.positional:
            target.add_argument(spec.name, help=spec.help)
        elif spec.kind == "bool":
            target.add_argument(*spec.flags, dest=spec.name, default=spec.default,
                                action=argparse.BooleanOptionalAction, help=spec.help)
        elif spec.kind == "flag":
            target.add_argument(*spec.flags, dest=spec.name, default=spec.default,
                                action='store_true', help=spec.help)
        elif spec.kind == "list":
            target.add_argument(*spec.flags, dest=spec.name, default=spec.default,
                                action='append', metavar=spec.metavar, help=spec.help)
        elif spec.kind == "int":
            target.add_argument(*spec.flags, dest=spec.name, default=spec.default,
                                type=int, help=spec.help)
        elif spec.kind == "choice":
            target.add_argument(*spec.flags, dest=spec.name, default=spec.default,
                                type=str.upper, choices=spec.choices, help=spec.help)
        else:
            target.add_argument(*spec.flags, dest=spec.name, default=spec.default,
                                help=spec.help)
    return parser


def _resolve_aliases(parser, args):
    """Fold ``-s 10K`` style option forms back into their positional."""
    for spec in PARAMETERS:
        if not (spec.positional and spec.aliases):
            continue
        value = getattr(args, spec.name)
        option = getattr(args, f"{spec.name}_option")
        if value is not None and option is not None and value != option:
            parser.error(f"{spec.name} given twice: {value!r} and {option!r}")
        value = value if value is not None else option
        if value is None and spec.required:
            parser.error(f"the following arguments are required: {spec.name}")
        setattr(args, spec.name, value)
    return args


def main(argv=None):
    parser = build_parser()
    args = _resolve_aliases(parser, parser.parse_args(argv))

    try:
        options = Options.from_namespace(args)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=getattr(logging, options.log_level),
        format="%(asctime)s,%(levelname)s,%(name)s,%(message)s",
    )

    rng = Random(options.seed)
    logger.debug("CLI,CREATE,START,name=%s,size=%s,seed=%s",
                 options.name, options.size, options.seed)

    try:
        result = create_random_file(rng=rng, **options.create_kwargs())
    except (WriteFailure, OSError) as e:
        logger.exception("CLI,CREATE,ERROR,%s", e)
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1

    logger.debug("CLI,CREATE,END,status=%d,outcome=%s", result.status, result.outcome.name)
    if not result.outcome.ok:
        print(f"{PROG}: {result}", file=sys.stderr)
        return 1

    if options.checksum and result.digest:
        on_disk = file_digest(options.name)
        if on_disk != result.digest:
            logger.error("CLI,CHECKSUM,MISMATCH,written=%s,on_disk=%s", result.digest, on_disk)
            print(f"{PROG}: checksum mismatch for {options.name}", file=sys.stderr)
            return 1

    print(result.message)
    if options.checksum and result.digest:
        print(f"{result.digest}  {options.name}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
