"""Conversion of netctl profiles into iwd network files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from netctl2iwd.constants import OUTPUT_FILE_MODE
from netctl2iwd.services.errors import ConversionError
from netctl2iwd.services.iwd_config import render_iwd_config
from netctl2iwd.services.netctl_profile import parse_network
from netctl2iwd.services.network import Network, iwd_file_name

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


@dataclass(frozen=True)
class ConversionReport:
    converted: tuple[tuple[str, Path], ...]
    failed: tuple[tuple[str, ConversionError], ...]


def _read_network(input_path: StrPath) -> Network:
    try:
        with open(input_path, "rb") as stream:
            return parse_network(stream)
    except OSError as exc:
        raise ConversionError.from_os_error(exc) from exc


def _write_exclusive(path: Path, content: str) -> None:
    """Create ``path`` owner-only and write it, never replacing an existing file."""
    try:
        # O_EXCL makes the existence check and the creation one atomic step.
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, OUTPUT_FILE_MODE)
    except OSError as exc:
        raise ConversionError.from_os_error(exc) from exc

    try:
        os.fchmod(fd, OUTPUT_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as output:
            fd = -1
            output.write(content)
    except OSError as exc:
        raise ConversionError.from_os_error(exc) from exc
    finally:
        if fd >= 0:
            os.close(fd)


def convert_one(input_path: StrPath, output_dir: StrPath) -> Path:
    """Convert a single netctl profile and return the written iwd file path."""
    network = _read_network(input_path)
    destination = Path(output_dir) / iwd_file_name(network)
    logger.debug("Writing %s to %s", input_path, destination)
    _write_exclusive(destination, render_iwd_config(network))
    return destination


def convert_files(inputs: Iterable[StrPath], output_dir: StrPath) -> ConversionReport:
    """Convert every profile independently, reporting each outcome."""
    converted: list[tuple[str, Path]] = []
    failed: list[tuple[str, ConversionError]] = []

    for input_path in inputs:
        name = os.fspath(input_path)
        try:
            destination = convert_one(input_path, output_dir)
        except ConversionError as exc:
            logger.error("Failed to convert %s: %s", name, exc)
            failed.append((name, exc))
        else:
            logger.info("Successfully converted %s", name)
            converted.append((name, destination))

    return ConversionReport(converted=tuple(converted), failed=tuple(failed))


def list_profiles(input_dir: StrPath) -> list[Path]:
    """List the regular files of a profile directory, sorted by name.

    Raises OSError when the directory itself cannot be read.
    """
    profiles = []
    with os.scandir(input_dir) as entries:
        for entry in entries:
            try:
                is_file = entry.is_file()
            except OSError as exc:
                logger.debug("Skipping %s: %s", entry.path, exc)
                continue
            if is_file:
                profiles.append(Path(entry.path))
            else:
                logger.debug("Skipping non-regular entry %s", entry.path)
    return sorted(profiles)


def convert_directory(input_dir: StrPath, output_dir: StrPath) -> ConversionReport:
    """Convert every regular file found in ``input_dir``."""
    logger.info("Reading profiles from %s", os.fspath(input_dir))
    return convert_files(list_profiles(input_dir), output_dir)
