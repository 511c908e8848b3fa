"""Command-line front door for lazylog.

Parses CLI options, loads the log text from a file or stdin, and either
renders it once (``--render``) or opens the interactive viewer.
"""

from __future__ import annotations

import argparse
import os
import shutil
import sys
from pathlib import Path

from .ansi import RESET, strip_ansi
from .config import AppConfig, load_app_config, save_skin_name
from .logs import configure_logging
from .styles import available_skin_names, is_known_skin, normalize_skin_name
from .view import App, Logger


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def decode_text(data: bytes) -> str:
    """Decode log bytes as UTF-8, replacing undecodable bytes."""
    return data.decode("utf-8-sig", errors="replace")


def read_text(path: Path) -> str:
    return decode_text(path.read_bytes())


def build_logger(app: App, text: str, title: str, subject: str = "") -> Logger:
    logger = Logger(app, title=title)
    logger.set_subject(subject)
    logger.set_text(text)
    return logger


def render_log(text: str, title: str, config: AppConfig, width: int) -> str:
    """Render the log body as the viewer would show it, one row per line."""
    app = App(config)
    logger = build_logger(app, text, title)
    logger.init(app)
    try:
        inner_width, _ = logger.inner_size(width, 1)
        out: list[str] = []
        for row in logger.screen_lines(inner_width):
            if config.no_color:
                row = strip_ansi(row)
            elif "\033" in row:
                row += RESET
            out.append(row)
            out.append("\n")
        return "".join(out)
    finally:
        logger.stop()


def run_viewer(text: str, title: str, subject: str, config: AppConfig) -> None:
    """Open the interactive viewer; keys come from the controlling terminal."""
    app = App(config)
    logger = build_logger(app, text, title, subject)
    logger.scroll_to_end()
    app.inject(logger)

    if sys.stdin.isatty():
        app.run(sys.stdin.fileno(), sys.stdout.fileno())
        return
    tty_fd = os.open("/dev/tty", os.O_RDONLY)
    try:
        app.run(tty_fd, sys.stdout.fileno())
    finally:
        os.close(tty_fd)


def main() -> None:
    """Parse CLI arguments and show a log file (or stdin) in the viewer."""
    parser = argparse.ArgumentParser(description="Browse, filter, save and copy logs in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="Log file to show; '-' or omitted reads stdin.")
    parser.add_argument("--title", default=None, help="View title (default: file name).")
    parser.add_argument("--subject", default="", help="Resource the logs belong to, shown next to the title.")
    parser.add_argument("--cluster", default=None, help="Cluster/context name used for saved dumps.")
    parser.add_argument("--dump-dir", type=Path, default=None, help="Directory for saved log dumps.")
    parser.add_argument(
        "--skin",
        default=None,
        help=f"Color skin ({', '.join(available_skin_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--render", action="store_true", help="Print the rendered log and exit.")
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument("--log-level", default="WARNING", help="Diagnostic log level.")
    parser.add_argument("--log-file", type=Path, default=None, help="Diagnostic log file path.")
    args = parser.parse_args()

    configure_logging(args.log_level, args.log_file)
    if args.skin is not None and is_known_skin(args.skin):
        save_skin_name(normalize_skin_name(args.skin))

    if args.path in (None, "-"):
        if sys.stdin.isatty():
            raise SystemExit("No log file given and nothing piped on stdin.")
        text = decode_text(sys.stdin.buffer.read())
        default_title = "stdin"
    else:
        path = Path(args.path)
        if not path.is_file():
            raise SystemExit(f"Log file not found: {path}")
        try:
            text = read_text(path)
        except OSError as exc:
            raise SystemExit(f"Cannot read {path}: {exc}") from exc
        default_title = path.name

    config = load_app_config(
        cluster=args.cluster,
        dump_dir=args.dump_dir,
        skin=args.skin,
        no_color=args.no_color,
    )
    title = args.title or default_title

    if args.render:
        width = args.width if args.width is not None else shutil.get_terminal_size((80, 24)).columns
        sys.stdout.write(render_log(text, title, config, width))
        return

    run_viewer(text, title, args.subject, config)


if __name__ == "__main__":
    main()
