"""Main entry point for the roman cipher package."""
import sys
import argparse
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter

from .cipher import Flavor, decode, encode_both
from .common.config import CipherToolConfig
from .detector import classify
from .recognizer import read_cipher_image
from .reference_table import export_reference_table, format_reference_table
from .scan_cipher_images import scan_cipher_images


def print_menu():
    """Print the main menu."""
    print("\n=== Roman Cipher Tool ===\n")
    print("1. Encode text")
    print("2. Decode Roman numeral cipher")
    print("3. Clean up recognized cipher text")
    print("4. Read cipher from image")
    print("5. Scan folder of cipher images")
    print("6. Show reference table")
    print("7. Export reference table to CSV")
    print("0. Exit")


def load_config(config_path: Optional[str]) -> CipherToolConfig:
    """Load and validate configuration from a JSON file, or use defaults."""
    if config_path is None:
        return CipherToolConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    ta = TypeAdapter(CipherToolConfig)
    return ta.validate_json(config_path.read_bytes())


def prompt(message: str, default: Optional[str] = None) -> str:
    """Ask for a value, falling back to the default on empty input."""
    suffix = f" [{default}]" if default else ""
    value = input(f"{message}{suffix}: ").strip()
    return value or (default or "")


def main(argv=None):
    """Main menu for the roman cipher functions."""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Roman Cipher Tool')
    parser.add_argument('config', nargs='?', default=None, help='Optional path to configuration JSON file')
    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = load_config(args.config)
        if args.config:
            print(f"Loaded configuration from: {args.config}")
    except Exception as e:
        print(f"Error loading config: {e}")
        sys.exit(1)

    actions = {
        "1": run_encode,
        "2": run_decode,
        "3": run_classify,
        "4": run_read_image,
        "5": run_scan_folder,
        "6": run_show_reference,
        "7": run_export_reference,
    }

    while True:
        print_menu()
        try:
            choice = input("\nEnter your choice (0-7): ").strip()
        except (KeyboardInterrupt, EOFError):
            sys.exit(0)

        if choice == "0":
            sys.exit(0)
        elif choice in actions:
            actions[choice](config)
        else:
            print("Invalid choice. Please try again.")


def run_encode(config: CipherToolConfig):
    """Encode text and show both cipher renderings."""
    print("\n--- Encode text ---")

    try:
        text = prompt("Text to encode")
        if not text:
            print("Nothing to encode")
            return

        encoded = encode_both(text)
        if not encoded.roman:
            print("Text contains no letters A-Z")
            return

        # The configured flavor is shown first
        if config.options.flavor == Flavor.NUMERIC.value:
            print(f"Numeric cipher: {encoded.numeric}")
            print(f"Roman cipher:   {encoded.roman}")
        else:
            print(f"Roman cipher:   {encoded.roman}")
            print(f"Numeric cipher: {encoded.numeric}")
    except Exception as e:
        print(f"Error: {e}")


def run_decode(config: CipherToolConfig):
    """Decode a Roman numeral cipher."""
    print("\n--- Decode Roman numeral cipher ---")

    try:
        cipher = prompt("Cipher (letters separated by '.', words by ' - ')")
        if not cipher:
            print("Nothing to decode")
            return

        print(f"Decoded: {decode(cipher)}")
    except Exception as e:
        print(f"Error: {e}")


def run_classify(config: CipherToolConfig):
    """Turn noisy recognized text into a canonical cipher and decode it."""
    print("\n--- Clean up recognized cipher text ---")

    try:
        raw_text = prompt("Recognized text")
        result = classify(raw_text, keep_word_breaks=config.options.keep_word_breaks)
        if not result.valid:
            print("No cipher found in the text")
            return

        print(f"Detected {result.flavor.value} cipher: {result.text}")
        if result.flavor is Flavor.ROMAN:
            print(f"Decoded: {decode(result.text)}")
    except Exception as e:
        print(f"Error: {e}")


def run_read_image(config: CipherToolConfig):
    """Read and decode the cipher in a single image."""
    print("\n--- Read cipher from image ---")

    try:
        image_path = prompt("Image path")
        result = read_cipher_image(image_path, keep_word_breaks=config.options.keep_word_breaks)
        if not result.classification.valid:
            print(f"No cipher found in image (recognized: {result.raw_text.strip()!r})")
            return

        print(f"Detected {result.classification.flavor.value} cipher: {result.classification.text}")
        if result.decoded is not None:
            print(f"Decoded: {result.decoded}")
    except Exception as e:
        print(f"Error: {e}")


def run_scan_folder(config: CipherToolConfig):
    """Scan a folder of images and write the results to CSV."""
    print("\n--- Scan folder of cipher images ---")

    try:
        scans_folder = config.paths.scans_folder or prompt("Scans folder")
        output_file = scan_cipher_images(
            scans_folder,
            config.paths.results_csv,
            keep_word_breaks=config.options.keep_word_breaks,
        )
        print(f"Success! Results saved to: {output_file}")
    except Exception as e:
        print(f"Error: {e}")


def run_show_reference(config: CipherToolConfig):
    """Print the letter reference table."""
    print("\n--- Reference table ---\n")
    print(format_reference_table())


def run_export_reference(config: CipherToolConfig):
    """Export the letter reference table to CSV."""
    print("\n--- Export reference table to CSV ---")

    try:
        output_file = export_reference_table(config.paths.reference_csv)
        print(f"Success! Reference table saved to: {output_file}")
    except Exception as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
