#!/usr/bin/env python
"""
Run script for garment_lens.
Use: python run_classifier.py items.json
Or: garment-lens items.json (after pip install -e .)
"""
import sys

from garment_lens.cli import main


if __name__ == "__main__":
    sys.exit(main())
