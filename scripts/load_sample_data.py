"""
Load sample shareholder letter passages into the document store.

Usage:
    python scripts/load_sample_data.py
"""

import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.ingestion.sample_data import load_sample_data
from src.rag.vector_store import get_vector_store

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Load environment
load_dotenv()


def main():
    try:
        count = load_sample_data(get_vector_store())
    except Exception as e:
        logger.error(f"Error loading sample data: {e}", exc_info=True)
        return 1

    print(f"\n✅ Sample data loaded. Total documents in store: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
