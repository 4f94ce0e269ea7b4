"""Pytest fixtures for roman cipher tests."""

import cv2
import numpy as np
import pytest


@pytest.fixture
def hello_world_cipher():
    """Roman cipher for "HELLO WORLD"."""
    return "VIII.V.XII.XII.XV - XXIII.XV.XVIII.XII.IV"


@pytest.fixture
def blank_image():
    """Plain white BGR image, small enough to be upscaled before OCR."""
    return np.full((60, 200, 3), 255, dtype=np.uint8)


@pytest.fixture
def scans_folder(tmp_path, blank_image):
    """Folder with two images (one in a subfolder) and a non-image file."""
    folder = tmp_path / "photos"
    (folder / "batch2").mkdir(parents=True)

    cv2.imwrite(str(folder / "card.png"), blank_image)
    cv2.imwrite(str(folder / "batch2" / "note.jpg"), blank_image)
    (folder / "notes.txt").write_text("not an image")

    return folder


@pytest.fixture
def fake_ocr(monkeypatch):
    """Replace Tesseract with a lookup of canned text per call.

    Returns a dict; set fake_ocr["texts"] to the list of strings the fake
    engine should return, in call order.
    """
    state = {"texts": [], "calls": 0}

    def image_to_string(image, lang=None, config=None):
        text = state["texts"][state["calls"]]
        state["calls"] += 1
        return text

    monkeypatch.setattr("pytesseract.image_to_string", image_to_string)
    return state
