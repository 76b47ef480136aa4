from __future__ import annotations

import argparse
import contextlib
import io
import sys
from dataclasses import replace
from typing import List, Optional

from .api import LANGUAGES, options_for, run
from .compiler import compile_blocks
from .errors import EsoboxError, make_io_error
from .listing import format_program
from .state import TapePolicy

USAGE = "esobox <LANGUAGE> <FILE>\n       esobox <LANGUAGE> -- <ARGS>..."


def _binary(stream):
    return getattr(stream, 'buffer', stream)


def _flush(stream) -> None:
    try:
        stream.flush()
    except OSError as exc:
        raise make_io_error(exc) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="esobox",
        usage=USAGE,
        description="Run esoteric-language programs.",
        epilog="With `-- ARGS...` the source is read from stdin and the program input "
               "is ARGS joined with NUL bytes.",
    )
    parser.add_argument("lang", metavar="LANGUAGE", choices=sorted(LANGUAGES),
                        help="Name of the language to run (%(choices)s)")
    parser.add_argument("file", metavar="FILE", nargs="?",
                        help="Name of the source file to run")
    parser.add_argument("--tape-length", type=int, default=None,
                        help="Override the number of tape cells")
    parser.add_argument("--tape-policy", choices=[p.value for p in TapePolicy], default=None,
                        help="Override what happens at the tape edges")
    parser.add_argument("--dump-blocks", action="store_true",
                        help="Print the compiled basic blocks instead of running")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # everything after `--` is program input, never options
    prog_args: Optional[List[str]] = None
    if "--" in argv:
        idx = argv.index("--")
        prog_args = argv[idx + 1:]
        argv = argv[:idx]

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.file is not None and prog_args is not None:
        parser.error("FILE and -- ARGS cannot be used together")
    if args.file is None and prog_args is None:
        parser.error("one of FILE or -- ARGS is required")
    if args.tape_length is not None and args.tape_length <= 0:
        parser.error("--tape-length must be positive")

    options = options_for(args.lang)
    if args.tape_length is not None:
        options = replace(options, tape_length=args.tape_length)
    if args.tape_policy is not None:
        options = replace(options, tape_policy=TapePolicy(args.tape_policy))

    if prog_args is None:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: couldn't read {args.file}: {e}", file=sys.stderr)
            return 1
        stdin = _binary(sys.stdin)
    else:
        try:
            source = _binary(sys.stdin).read().decode('utf-8')
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: couldn't read source from stdin: {e}", file=sys.stderr)
            return 1
        stdin = io.BytesIO(b"\0".join(a.encode('utf-8') for a in prog_args))

    try:
        if args.dump_blocks:
            print(format_program(compile_blocks(source)))
        else:
            run(source, stdin, _binary(sys.stdout), options)
        _flush(sys.stdout)
    except EsoboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        # already reporting a failure
        with contextlib.suppress(OSError):
            sys.stdout.flush()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
