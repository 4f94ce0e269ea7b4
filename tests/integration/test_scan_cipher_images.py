"""Tests for scanning a folder of cipher images."""

import pandas as pd
import pytest

from roman_cipher.scan_cipher_images import (
    RESULT_COLUMNS,
    find_cipher_images,
    scan_cipher_images,
)


def test_find_cipher_images(scans_folder):
    """Test that only images are picked up, including subfolders."""
    images = find_cipher_images(scans_folder)
    assert [p.relative_to(scans_folder).as_posix() for p in images] == ["batch2/note.jpg", "card.png"]


def test_scan_cipher_images(scans_folder, fake_ocr, capsys):
    """Test the CSV written for a folder of images."""
    # Images are processed in sorted order: batch2/note.jpg, then card.png
    fake_ocr["texts"] = ["8 5 12 12 15", "xii. xv. xxii. v"]

    output = scan_cipher_images(str(scans_folder))
    assert output.endswith("photos_decoded.csv")

    df = pd.read_csv(output, keep_default_na=False)
    assert list(df.columns) == RESULT_COLUMNS
    assert df["file"].tolist() == ["batch2/note.jpg", "card.png"]
    assert df["flavor"].tolist() == ["numeric", "roman"]
    assert df["cipher"].tolist() == ["8.5.12.12.15", "XII.XV.XXII.V"]
    assert df["decoded"].tolist() == ["", "LOVE"]

    out = capsys.readouterr().out
    assert "Scanning cipher images...Done!" in out
    assert "Recognized a cipher in 2 of 2 images" in out


def test_scan_cipher_images_custom_output(scans_folder, tmp_path, fake_ocr):
    """Test an explicit output path and an unrecognized image."""
    fake_ocr["texts"] = ["@@@", "XII"]

    output = scan_cipher_images(str(scans_folder), str(tmp_path / "results" / "scan.csv"))

    df = pd.read_csv(output, keep_default_na=False)
    assert df["valid"].tolist() == [False, True]
    assert df.loc[0, "cipher"] == ""


def test_scan_cipher_images_missing_folder(tmp_path):
    """Test that a missing folder is reported."""
    with pytest.raises(ValueError, match="Scans folder"):
        scan_cipher_images(str(tmp_path / "missing"))


def test_scan_cipher_images_empty_folder(tmp_path):
    """Test that a folder without images is reported."""
    (tmp_path / "empty").mkdir()
    with pytest.raises(ValueError, match="No images"):
        scan_cipher_images(str(tmp_path / "empty"))


def test_scan_cipher_images_unreadable_image(scans_folder, fake_ocr, capsys):
    """Test that a corrupt image gets an invalid row and the scan continues."""
    (scans_folder / "broken.png").write_bytes(b"not really a png")
    # broken.png fails before OCR, so only the two readable images consume texts
    fake_ocr["texts"] = ["XII", "VIII V"]

    output = scan_cipher_images(str(scans_folder))

    df = pd.read_csv(output, keep_default_na=False)
    assert df["file"].tolist() == ["batch2/note.jpg", "broken.png", "card.png"]
    assert df["valid"].tolist() == [True, False, True]
    assert df.loc[1, "cipher"] == ""
    assert df.loc[1, "raw_text"] == ""
    assert df["decoded"].tolist() == ["L", "", "HE"]

    out = capsys.readouterr().out
    assert "Could not read image" in out
    assert "Scanning cipher images...Done!" in out


def test_scan_cipher_images_current_directory(scans_folder, fake_ocr, monkeypatch):
    """Test that scanning "." names the default output after the folder."""
    fake_ocr["texts"] = ["XII", "XV"]
    monkeypatch.chdir(scans_folder)

    output = scan_cipher_images(".")

    assert output == str(scans_folder.resolve().parent / "photos_decoded.csv")
    assert (scans_folder.parent / "photos_decoded.csv").is_file()
