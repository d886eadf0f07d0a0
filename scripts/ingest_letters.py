"""
Ingest shareholder letter PDFs into the document store.

Usage:
    python scripts/ingest_letters.py --folder data/letters
    python scripts/ingest_letters.py --file data/letters/berkshire-hathaway-2023.pdf
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.ingestion.ingest import main

load_dotenv()


if __name__ == "__main__":
    main()
