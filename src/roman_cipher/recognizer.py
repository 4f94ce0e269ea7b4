"""Read cipher text from photographs and scans.

This module is the boundary to the external OCR engine. It loads an image
with OpenCV, cleans it up for recognition, hands it to Tesseract through
pytesseract and passes the raw text on to the cipher format detector.

Recognition is treated as a black box: apart from restricting Tesseract to
the characters used by the cipher, no attempt is made to correct what the
engine returns. Repairing the text is the detector's job.
"""
from pathlib import Path
from typing import Optional

import cv2
import numpy as np
import pytesseract
from PIL import Image
from pydantic import BaseModel, ConfigDict

from .cipher import Flavor, decode
from .common.config import MIN_OCR_IMAGE_WIDTH, OCR_LANGUAGE, OCR_TESSERACT_CONFIG, TESSERACT_CMD
from .common.validators import validate_image_file
from .detector import ClassificationResult, classify


if TESSERACT_CMD:
    pytesseract.pytesseract.tesseract_cmd = TESSERACT_CMD


class ScanResult(BaseModel):
    """Everything learned from one cipher image.

    Attributes:
        source: Image file the text was read from
        raw_text: Text exactly as returned by the OCR engine
        classification: Detector result for the raw text
        decoded: Decoded plain text for Roman ciphers, None otherwise
    """

    model_config = ConfigDict(frozen=True)

    source: str
    raw_text: str
    classification: ClassificationResult
    decoded: Optional[str] = None


def load_image(image_path: Path) -> np.ndarray:
    """Load an image from disk as a BGR array.

    Raises:
        ValueError: If the file is missing, unsupported, or cannot be decoded
    """
    validate_image_file(image_path, "Cipher image")

    img = cv2.imread(str(image_path), cv2.IMREAD_COLOR)
    if img is None:
        raise ValueError(f"Error: Could not read image: {image_path}")
    return img


def preprocess_for_ocr(image: np.ndarray) -> np.ndarray:
    """Prepare an image for Tesseract.

    Steps:
    1. Convert to grayscale (color carries no information for the cipher)
    2. Upscale small images so thin strokes survive thresholding
    3. Binarize with Otsu's method to separate ink from background

    Args:
        image: BGR or grayscale image array

    Returns:
        Single-channel black and white image
    """
    if image.ndim == 3:
        gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    else:
        gray = image

    height, width = gray.shape[:2]
    if 0 < width < MIN_OCR_IMAGE_WIDTH:
        scale = MIN_OCR_IMAGE_WIDTH / width
        gray = cv2.resize(gray, (MIN_OCR_IMAGE_WIDTH, max(1, round(height * scale))), interpolation=cv2.INTER_CUBIC)

    # Light blur removes scanner speckles that Otsu would otherwise keep
    blurred = cv2.GaussianBlur(gray, (3, 3), 0)
    _, binary = cv2.threshold(blurred, 0, 255, cv2.THRESH_BINARY + cv2.THRESH_OTSU)
    return binary


def recognize_text(image: np.ndarray) -> str:
    """Run Tesseract on an image array and return the raw recognized text."""
    processed = preprocess_for_ocr(image)
    return pytesseract.image_to_string(
        Image.fromarray(processed),
        lang=OCR_LANGUAGE,
        config=OCR_TESSERACT_CONFIG,
    )


def interpret_recognized_text(raw_text: str, source: str = "", keep_word_breaks: bool = False) -> ScanResult:
    """Classify recognized text and decode it when it is a Roman cipher.

    Numeric ciphers are reported but not decoded, since the numeric flavor
    has no decoder.
    """
    classification = classify(raw_text, keep_word_breaks=keep_word_breaks)

    decoded = None
    if classification.valid and classification.flavor is Flavor.ROMAN:
        decoded = decode(classification.text)

    return ScanResult(
        source=source,
        raw_text=raw_text,
        classification=classification,
        decoded=decoded,
    )


def read_cipher_image(image_path: str, keep_word_breaks: bool = False) -> ScanResult:
    """Recognize, classify and decode the cipher in a single image.

    Args:
        image_path: Path to a photo or scan of a cipher
        keep_word_breaks: Rebuild words from dashes found in the recognized text

    Returns:
        ScanResult for the image. An image without a recognizable cipher
        still returns a result, with classification.valid set to False.

    Raises:
        ValueError: If the image cannot be loaded
        pytesseract.TesseractNotFoundError: If Tesseract is not installed

    Example:
        >>> result = read_cipher_image("./photos/postcard.jpg")
        >>> result.decoded
        'LOVE STAMP'
    """
    image_path = Path(image_path)
    image = load_image(image_path)
    raw_text = recognize_text(image)
    return interpret_recognized_text(raw_text, source=str(image_path), keep_word_breaks=keep_word_breaks)
