import argparse
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .alphabet import MAX_BASE, MIN_BASE, validate_base
from .codec import decode, encode
from .config import CodecConfig, load_config, save_config
from .errors import Base94Error, InvalidBase
from .history import log_event


def _base_arg(value: str) -> int:
    try:
        return validate_base(int(value))
    except InvalidBase as exc:
        raise argparse.ArgumentTypeError(str(exc))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid base: {value!r}")


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as fh:
        return fh.read()


def _write_output(path: str, output: bytes) -> None:
    if path == "-":
        sys.stdout.buffer.write(output)
        sys.stdout.flush()
        return
    with open(path, "wb") as fh:
        fh.write(output)


def _resolve_base(args: argparse.Namespace, config: CodecConfig) -> int:
    if args.base is not None:
        return args.base
    return config.default_base


def _run_encode(args: argparse.Namespace) -> None:
    config = load_config(args.config)
    base = _resolve_base(args, config)
    data = _read_input(args.input)
    output = encode(data, base).encode("ascii")
    _write_output(args.output, output)
    _record(args, config, base, len(data), len(output))


def _run_decode(args: argparse.Namespace) -> None:
    config = load_config(args.config)
    base = _resolve_base(args, config)
    raw = _read_input(args.input)
    # Editors and shells tend to append a newline; whitespace is never a symbol.
    text = raw.decode("utf-8").strip()
    output = decode(text, base)
    _write_output(args.output, output)
    _record(args, config, base, len(raw), len(output))


def _record(args: argparse.Namespace, config: CodecConfig, base: int, in_size: int, out_size: int) -> None:
    if args.no_history or not config.history:
        return
    log_event(
        action=args.command,
        payload={
            "base": base,
            "input": args.input,
            "output": args.output,
            "in_bytes": in_size,
            "out_bytes": out_size,
        },
    )


def _run_config(args: argparse.Namespace) -> str:
    config = load_config(args.config, apply_env=False)
    changed = False
    if args.default_base is not None:
        config.default_base = args.default_base
        changed = True
    if args.history is not None:
        config.history = args.history
        changed = True
    if changed:
        save_config(config, args.config)

    effective = load_config(args.config)
    lines = [
        f"default_base: {effective.default_base}",
        f"history: {'on' if effective.history else 'off'}",
    ]
    if changed:
        lines.append("Configuration saved.")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="base94",
        description="Encode or decode files in any base between 2 and 94.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--no-history", action="store_true", help="Do not record the operation in history."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default ~/.base94.json).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, func, help_text in (
        ("encode", _run_encode, "Encode a binary file to text."),
        ("decode", _run_decode, "Decode a text file back to binary."),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("input", help="The input file to read ('-' for stdin).")
        sub.add_argument("output", help="The output file to write ('-' for stdout).")
        sub.add_argument(
            "-b",
            "--base",
            type=_base_arg,
            default=None,
            help=f"Base between {MIN_BASE} and {MAX_BASE} (default from config, else {MAX_BASE}).",
        )
        sub.set_defaults(func=func)

    config_parser = subparsers.add_parser("config", help="Show or update saved settings.")
    config_parser.add_argument("--default-base", type=_base_arg, help="Base used when --base is omitted.")
    history_group = config_parser.add_mutually_exclusive_group()
    history_group.add_argument(
        "--history", dest="history", action="store_true", default=None, help="Record operations."
    )
    history_group.add_argument(
        "--no-history-default",
        dest="history",
        action="store_false",
        default=None,
        help="Do not record operations unless re-enabled.",
    )
    config_parser.set_defaults(func=_run_config)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        result = args.func(args)
    except Base94Error as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")
    except UnicodeDecodeError as exc:
        parser.exit(1, f"{parser.prog}: error: input is not valid UTF-8 text ({exc.reason} at byte {exc.start})\n")
    except OSError as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")
    if result is not None:
        print(result)


if __name__ == "__main__":
    main()
