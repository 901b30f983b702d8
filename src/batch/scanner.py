# src/batch/scanner.py — v1
"""Batch scanner — flatten a directory into an ordered candidate list.

Every regular file is returned, supported or not; classification and
skipping are the runner's job. Order is sorted path order so runs are
reproducible.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class BatchScanner:
    """List candidate files under a directory."""

    def scan(self, scan_root: Path, recursive: bool = True) -> list[Path]:
        """Discover all files in a directory.

        Args:
            scan_root: Root directory to scan.
            recursive: If True, scan subdirectories recursively.

        Returns:
            Sorted list of file paths.

        Raises:
            ValueError: If scan_root is not a directory.
        """
        if not scan_root.is_dir():
            msg = f"Scan root is not a directory: {scan_root}"
            raise ValueError(msg)

        pattern_fn = scan_root.rglob if recursive else scan_root.glob
        files = [path for path in sorted(pattern_fn("*")) if path.is_file()]

        logger.info(
            "Scanned %s: found %d files (recursive=%s)",
            scan_root, len(files), recursive,
        )
        return files


def scan_directory(scan_root: Path, recursive: bool = True) -> list[Path]:
    """Convenience wrapper around BatchScanner.scan()."""
    return BatchScanner().scan(scan_root, recursive=recursive)
