"""
Start the shareholder letter search API.

Usage:
    python scripts/start_api.py
    PORT=9000 python scripts/start_api.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn
import os
from dotenv import load_dotenv


def main():
    load_dotenv()

    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RAG_ENVIRONMENT", "development").lower() != "production"

    print("=" * 60)
    print("Shareholder Letter Search API")
    print("=" * 60)
    print(f"\n🚀 Starting server on http://localhost:{port}")
    print(f"🔎 Search: POST http://localhost:{port}/rag/search")
    print(f"💚 Health Check: http://localhost:{port}/health")
    print(f"\nPress CTRL+C to stop\n")

    uvicorn.run(
        "src.api.main:app",
        host="0.0.0.0",
        port=port,
        reload=reload,
        log_level="info"
    )


if __name__ == "__main__":
    main()
