#!/usr/bin/env python3
"""
CLI Runner for the CircuitVision hardware analyzer
Run this script to start the interactive CLI interface.

Usage:
    python run_cli.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from circuitvision.config import get_settings
from cli.interface import CircuitVisionCLI


def main():
    """Main entry point for CLI"""
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"❌ Configuration error: {e}")
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print("🚀 Starting CircuitVision CLI...")
    print("-" * 50)

    try:
        CircuitVisionCLI(settings).run_interactive_session()
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
    except Exception as e:
        print(f"❌ Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
