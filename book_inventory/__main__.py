"""
Run the API server. From the project root:
  python -m book_inventory
Host and port come from HOST / PORT (see book_inventory.core.config).
"""

import sys

import uvicorn

from book_inventory.core.config import get_settings


def main() -> int:
    settings = get_settings()
    uvicorn.run(
        "book_inventory.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
