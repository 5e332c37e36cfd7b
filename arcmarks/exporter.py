#!/usr/bin/env python3
"""Export Arc Browser bookmarks to HTML file."""

import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Tuple

from .arc_parser import ArcDataParser
from .arc_reader import ArcDataReader
from .errors import OutputWriteError
from .html_exporter import HTMLExporter


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREY = "\033[90m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    @staticmethod
    def background(color: str) -> str:
        """Convert foreground color to background color."""
        return color.replace("[3", "[4", 1)


class CustomFormatter(logging.Formatter):
    """Custom formatter for colored logging output."""

    def __init__(self):
        super().__init__()
        time_format = f"{Colors.GREY}%(asctime)s{Colors.RESET}"
        self.FORMATS = {
            logging.DEBUG: f"{time_format} {Colors.BOLD}{Colors.CYAN}DEBG{Colors.RESET} %(message)s",
            logging.INFO: f"{time_format} {Colors.BOLD}{Colors.GREEN}INFO{Colors.RESET} %(message)s",
            logging.WARNING: f"{time_format} {Colors.BOLD}{Colors.YELLOW}WARN{Colors.RESET} %(message)s",
            logging.ERROR: f"{time_format} {Colors.BOLD}{Colors.RED}ERRR{Colors.RESET} %(message)s",
            logging.CRITICAL: f"{time_format} {Colors.BOLD}{Colors.background(Colors.RED)}CRIT{Colors.RESET} %(message)s",
        }

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt, datefmt="%H:%M")
        return formatter.format(record)


def setup_logging(verbose: bool = False, silent: bool = False):
    """Configure logging with custom formatting."""
    if silent:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    handler = logging.StreamHandler()
    handler.setFormatter(CustomFormatter())

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)


def convert_to_html(data: Dict, escape: bool = False) -> Tuple[str, int, int]:
    """
    Convert a parsed StorableSidebar.json document to bookmark HTML.

    Returns:
        Tuple of (html, total_bookmarks, total_folders)
    """
    parser = ArcDataParser(data)
    folders, bookmarks, folder_count = parser.parse_with_counts()
    html_content = HTMLExporter(folders, escape=escape).export()
    return html_content, bookmarks, folder_count


def default_output_path(today: Optional[datetime] = None) -> Path:
    """Date-stamped file name in the current directory."""
    current_date = (today or datetime.now()).strftime("%Y_%m_%d")
    return Path(f"arc_bookmarks_{current_date}.html")


def _file_mode(output_path: Path) -> int:
    """Mode for the new file: keep an existing file's mode, else follow the umask."""
    if output_path.exists():
        return output_path.stat().st_mode & 0o777
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_html(html_content: str, output_path: Path):
    """Write the document in one step; never leaves a partial file behind."""
    logging.info("Writing HTML...")

    directory = output_path.parent
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=directory
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(html_content)
        os.chmod(tmp_name, _file_mode(output_path))
        os.replace(tmp_name, output_path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise OutputWriteError(f"Could not write {output_path}: {e}") from e

    logging.info(f"> HTML written to {output_path}.")


def export_to_html(
    input_path: Optional[Path] = None,
    output_path: Optional[Path] = None,
    escape: bool = False,
    verbose: bool = False,
    silent: bool = False,
) -> Tuple[int, int]:
    """
    Export Arc bookmarks to HTML file.

    Returns:
        Tuple of (total_bookmarks, total_folders)
    """
    setup_logging(verbose=verbose, silent=silent)

    data = ArcDataReader.read_data(input_path)
    html_content, total_bookmarks, total_folders = convert_to_html(data, escape=escape)

    if output_path is None:
        output_path = default_output_path()
    write_html(html_content, Path(output_path))

    return total_bookmarks, total_folders
