"""Scan a folder of cipher images and collect the results in a CSV file.

Every supported image in the folder (including subfolders) is passed through
OCR, classified and, for Roman numeral ciphers, decoded. One row per image is
written to the output CSV:

    file,valid,flavor,cipher,decoded,raw_text
    photos/card.jpg,True,roman,XII.XV.XXII.V,LOVE,XII XV XXII V
    photos/blank.png,False,,,,
"""
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .common.config import IMAGE_SUFFIXES
from .common.progress import ProgressPrinter
from .common.validators import validate_csv_output, validate_directory
from .detector import ClassificationResult
from .recognizer import ScanResult, read_cipher_image


RESULT_COLUMNS = ["file", "valid", "flavor", "cipher", "decoded", "raw_text"]


def find_cipher_images(folder: Path) -> List[Path]:
    """Return all supported images under a folder, sorted by path."""
    return sorted(
        path for path in folder.glob("**/*")
        if path.is_file() and path.suffix.lower() in IMAGE_SUFFIXES
    )


def scan_results_to_dataframe(results: List[ScanResult], base_folder: Optional[Path] = None) -> pd.DataFrame:
    """Flatten scan results into a DataFrame with RESULT_COLUMNS.

    File paths are made relative to base_folder when one is given.
    """
    rows = []
    for result in results:
        source = Path(result.source)
        if base_folder is not None and source.is_relative_to(base_folder):
            source = source.relative_to(base_folder)

        classification = result.classification
        rows.append({
            "file": source.as_posix(),
            "valid": classification.valid,
            "flavor": classification.flavor.value if classification.flavor else "",
            "cipher": classification.text,
            "decoded": result.decoded or "",
            # Keep the raw OCR output on one line in the CSV
            "raw_text": " ".join(result.raw_text.split()),
        })

    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def scan_cipher_images(scans_folder_path: str, output_csv_path: Optional[str] = None, keep_word_breaks: bool = False) -> str:
    """Read the cipher in every image of a folder and save the results as CSV.

    Args:
        scans_folder_path: Folder containing photos or scans of ciphers
        output_csv_path: Where to write the CSV. Defaults to a
                         "<folder>_decoded.csv" file next to the folder.
        keep_word_breaks: Rebuild words from dashes found in the recognized text

    Returns:
        str: Path to the written CSV file

    Raises:
        ValueError: If the folder doesn't exist, contains no images, or the
                    output path is not a CSV path
    """
    # Resolve so that "." still yields a folder name for the default output
    scans_folder_path = Path(scans_folder_path).resolve()
    validate_directory(scans_folder_path, "Scans folder")

    if output_csv_path is None:
        output_path = scans_folder_path.parent / (scans_folder_path.name + "_decoded.csv")
    else:
        output_path = Path(output_csv_path)
    validate_csv_output(output_path, "Results CSV")

    images = find_cipher_images(scans_folder_path)
    if not images:
        raise ValueError(f"Error: No images ({', '.join(IMAGE_SUFFIXES)}) found in {scans_folder_path}")

    progress = ProgressPrinter("Scanning cipher images", len(images))
    results = []
    for image in progress.track(images):
        try:
            result = read_cipher_image(str(image), keep_word_breaks=keep_word_breaks)
        except ValueError as e:
            # Unreadable images get an invalid row and the scan carries on
            print(f"\n{e}")
            result = ScanResult(
                source=str(image),
                raw_text="",
                classification=ClassificationResult.invalid(),
            )
        results.append(result)

    df = scan_results_to_dataframe(results, base_folder=scans_folder_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    recognized = int(df["valid"].sum())
    print(f"Recognized a cipher in {recognized} of {len(df)} images")

    return str(output_path)
