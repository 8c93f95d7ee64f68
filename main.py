#!/usr/bin/env python3
"""
Prompt Refiner - CLI tool for turning free-form requests into structured JSON.

Usage:
    python main.py refine [--text TEXT | --text-file FILE | --sample N]
                          [--image-json FILE] [--pdf-json FILE] [--word-json FILE]
                          [--output FILE] [--config FILE] [--verbose]
    python main.py validate <json_file> [--verbose]
    python main.py samples

Examples:
    python main.py refine --text "I want to build a mobile app for delivery tracking."
    python main.py refine --sample 1 --output refined.json
    python main.py validate refined.json
"""

import sys

from prompt_refiner.cli import main


if __name__ == "__main__":
    sys.exit(main())
