#!/usr/bin/env python3
"""Locate and read Arc's StorableSidebar.json."""

import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from .errors import InputNotFoundError


class ArcDataReader:
    """Handles reading and parsing Arc browser data."""

    FILENAME = "StorableSidebar.json"
    WINDOWS_PACKAGE_PREFIX = "TheBrowserCompany.Arc"

    @classmethod
    def get_arc_data_path(cls) -> Optional[Path]:
        """Get the path to Arc's data file based on the operating system."""
        if sys.platform == "win32":
            packages = Path.home() / "AppData" / "Local" / "Packages"
            if not packages.is_dir():
                return None
            arc_roots = [
                p for p in packages.iterdir()
                if p.name.startswith(cls.WINDOWS_PACKAGE_PREFIX)
            ]
            # Several Arc packages make the choice ambiguous
            if len(arc_roots) != 1:
                logging.debug(f"Found {len(arc_roots)} Arc package directories in {packages}")
                return None
            return arc_roots[0] / "LocalCache" / "Local" / "Arc" / cls.FILENAME

        # macOS
        return Path.home() / "Library" / "Application Support" / "Arc" / cls.FILENAME

    @classmethod
    def candidates(cls, input_path: Optional[Path] = None) -> List[Tuple[Path, str]]:
        """Paths to try, in order, with a label for log messages."""
        if input_path is not None:
            return [(Path(input_path), "the given path")]

        paths = [(Path(cls.FILENAME), "current directory")]
        library_path = cls.get_arc_data_path()
        if library_path is not None:
            paths.append((library_path, "Arc's data directory"))
        return paths

    @classmethod
    def read_data(cls, input_path: Optional[Path] = None) -> Dict:
        """Read Arc browser data from JSON file."""
        logging.info("Reading Arc browser data...")

        for path, label in cls.candidates(input_path):
            if not path.is_file():
                continue
            try:
                with path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                logging.warning(f"Could not read {path}: {e}")
                continue
            logging.info(f"> Found {cls.FILENAME} in {label}.")
            return data

        if input_path is not None:
            raise InputNotFoundError(f"File not found or unreadable: {input_path}")

        library_path = cls.get_arc_data_path()
        location = library_path.parent if library_path else "Arc's LocalCache/Local/Arc folder"
        raise InputNotFoundError(
            f'File not found. Look for "{cls.FILENAME}" '
            f'in the Arc browser data directory: {location}, '
            f'or copy it into the current directory'
        )
