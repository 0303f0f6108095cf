#!/usr/bin/env python3
"""Helper script to check and create the .env file for the ledger configuration."""

from pathlib import Path
import sys

TEMPLATE = """# API Configuration
DAIRY_API_PREFIX=/api
# DAIRY_FRONTEND_ALLOWED_ORIGINS - JSON array or comma-separated list
# DAIRY_FRONTEND_ALLOWED_ORIGINS=http://localhost:5173,http://127.0.0.1:5173

# Data Paths
DAIRY_DATA_ROOT=./data
# DAIRY_STORE_FILE defaults to $DAIRY_DATA_ROOT/dairy_pro_v1.json
# DAIRY_STORE_FILE=./data/dairy_pro_v1.json

# Ledger behavior
DAIRY_DEFAULT_LOCATION_NAME=Main Farm
DAIRY_SEARCH_LIMIT=50
# Set to false to keep customer balances untouched when a product is deleted
DAIRY_REVERSE_BALANCES_ON_PRODUCT_DELETE=true
DAIRY_LOG_LEVEL=info
"""


def main():
    project_root = Path(__file__).parent
    env_file = project_root / ".env"

    print("=" * 60)
    print("Dairy Ledger Environment Checker")
    print("=" * 60)
    print()

    if env_file.exists():
        print(f"Found .env file at: {env_file}")
    else:
        env_file.write_text(TEMPLATE, encoding="utf-8")
        print(f"Created template .env file at: {env_file}")
    print()

    try:
        sys.path.insert(0, str(project_root / "src"))
        from dairy_ledger.config import settings
    except Exception as e:
        print(f"Error loading config: {e}")
        print()
        print("Make sure you're running this from the project root directory")
        return

    print("Effective configuration:")
    print("-" * 60)
    for name, value in settings.model_dump().items():
        print(f"{name} = {value}")
    print("-" * 60)
    print()

    store_file = settings.store_file
    if store_file.exists():
        print(f"Snapshot file present: {store_file} ({store_file.stat().st_size} bytes)")
    else:
        print(f"Snapshot file not created yet: {store_file}")
        print("It is written on first start, seeded with the default location.")


if __name__ == "__main__":
    main()
