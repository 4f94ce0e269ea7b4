"""Validation utilities for the roman cipher package.

This module provides the path checks shared by the scanning and export
functions, so every entry point reports bad paths the same way.
"""
from pathlib import Path

from .config import IMAGE_SUFFIXES


def validate_directory(path: Path, name: str = "Directory") -> None:
    """Validate that a path exists and is a directory.

    Args:
        path: Path object to validate
        name: Descriptive name for the path, used in error messages
              (e.g., "Scans folder")

    Raises:
        ValueError: If path does not exist or is not a directory
    """
    if not path.is_dir():
        raise ValueError(f"Error: {name} is not a valid directory: {path}")


def validate_image_file(path: Path, name: str = "Image") -> None:
    """Validate that a path is an existing file with a supported image suffix.

    The suffix check is case-insensitive, so "IMG_0001.JPG" is accepted.

    Args:
        path: Path object to validate
        name: Descriptive name for the image, used in error messages

    Raises:
        ValueError: If path is missing, not a file, or not a supported image

    Example:
        >>> from pathlib import Path
        >>> validate_image_file(Path("./photo.png"), "Cipher photo")
        # Raises ValueError if photo.png doesn't exist
    """
    if not path.is_file():
        raise ValueError(f"Error: {name} not found: {path}")
    if path.suffix.lower() not in IMAGE_SUFFIXES:
        raise ValueError(f"Error: {name} is not a supported image ({', '.join(IMAGE_SUFFIXES)}): {path}")


def validate_csv_output(path: Path, name: str = "CSV file") -> None:
    """Validate that a path can be used as a CSV output file.

    The file itself may not exist yet, but it must end in ".csv" and must not
    point at an existing directory.

    Args:
        path: Path object to validate
        name: Descriptive name for the output, used in error messages

    Raises:
        ValueError: If the path is a directory or lacks a .csv extension
    """
    if path.is_dir() or path.suffix.lower() != ".csv":
        raise ValueError(f"Error: {name} is not a valid CSV path: {path}")
