#!/usr/bin/env python3
"""Notifier configuration validation script.

Usage: python scripts/validate_config.py path/to/notifier.yaml [--create-dir]
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from smd_notifier.config import ensure_delivery_directory, is_writable_directory, load_notifier_config
from smd_notifier.errors import ConfigurationError


def main():
    """Main validation function."""
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    config_path = Path(sys.argv[1])
    create_dir = "--create-dir" in sys.argv[2:]

    print(f"🔍 Validating notifier configuration {config_path}...")

    try:
        config = load_notifier_config(config_path)
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    print(f"  • target directory: {config.target_directory}")
    print(f"  • include receipt content: {config.include_receipt_content}")

    if create_dir:
        try:
            ensure_delivery_directory(config.target_directory)
        except ConfigurationError as e:
            print(f"❌ {e}")
            sys.exit(1)

    if is_writable_directory(config.target_directory):
        print("✅ Configuration is valid")
        sys.exit(0)

    print("❌ Target directory does not exist or is not writable")
    sys.exit(1)


if __name__ == "__main__":
    main()
