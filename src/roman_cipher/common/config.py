"""Configuration constants for the roman cipher package.

This module holds the settings for the external OCR engine (Tesseract), for
scanning folders of cipher images, and the schema of the optional JSON
configuration file read by the command line tool.

Environment Variables:
    TESSERACT_CMD: Full path to the tesseract executable, if it is not on PATH
    ROMAN_CIPHER_OCR_LANG: Tesseract language pack to use (default "eng")
"""
import os
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# Tesseract configuration
# pytesseract looks the binary up on PATH unless a command is given explicitly
TESSERACT_CMD = os.getenv("TESSERACT_CMD") or None
OCR_LANGUAGE = os.getenv("ROMAN_CIPHER_OCR_LANG", "eng")

# Only characters that can appear in either cipher flavor are recognized
OCR_CHAR_WHITELIST = "IVXLCDM0123456789.- "

# Page segmentation mode 6: treat the image as a single uniform block of text
OCR_PAGE_SEGMENTATION_MODE = 6

OCR_TESSERACT_CONFIG = (
    f"--psm {OCR_PAGE_SEGMENTATION_MODE} "
    f"-c tessedit_char_whitelist={OCR_CHAR_WHITELIST!r} "
    f"-c preserve_interword_spaces=1"
)

# Image formats picked up when scanning a folder (matched case-insensitively)
IMAGE_SUFFIXES = (".jpeg", ".jpg", ".png", ".bmp", ".tif", ".tiff", ".webp")

# Images narrower than this are upscaled before recognition
MIN_OCR_IMAGE_WIDTH = 1000


# Optional JSON configuration file for the command line tool.
# Every field has a default, so "{}" is a valid configuration:
#
#     {
#         "paths": {"scans_folder": "./photos", "results_csv": "./photos_decoded.csv"},
#         "options": {"flavor": "numeric", "keep_word_breaks": true}
#     }
class PathsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scans_folder: Optional[str] = None
    results_csv: Optional[str] = None
    reference_csv: str = "reference_table.csv"


class OptionsConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Flavor used when encoding from the menu
    flavor: Literal["roman", "numeric"] = "roman"
    # Rebuild words from dashes when classifying recognized text
    keep_word_breaks: bool = False


class CipherToolConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    paths: PathsConfig = Field(default_factory=PathsConfig)
    options: OptionsConfig = Field(default_factory=OptionsConfig)
