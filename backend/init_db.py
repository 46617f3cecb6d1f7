"""
Data file initialization script
Run this to create the tracker data file and seed initial clients

    python init_db.py "Client A" "Client B"
"""
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from account_tracker.core.config import settings
from account_tracker.core.storage import JsonFileStorage, StorageError


def init_db(storage: JsonFileStorage):
    """Create the data file if it does not exist yet"""
    print(f"Data file: {storage.path.resolve()}")
    dataset = storage.load()
    print(f"✓ {len(dataset.clients)} clients, {len(dataset.responses)} responses")


def seed_clients(storage: JsonFileStorage, names):
    """Register clients that are not already present (case-insensitive)"""
    if not names:
        return

    print("\nSeeding clients...")
    try:
        with storage.transaction() as dataset:
            for raw in names:
                name = raw.strip()
                if not name:
                    continue
                if dataset.find_client_by_name(name):
                    print(f"- {name} already exists, skipped")
                    continue
                client = dataset.add_client(name, created_at=datetime.now(timezone.utc))
                print(f"✓ Created client #{client.id}: {client.name}")
        print("\n✓ Clients seeded successfully!")
    except StorageError as e:
        print(f"\n✗ Error seeding clients: {e}")


if __name__ == "__main__":
    print("=" * 60)
    print(f"{settings.APP_NAME} - Data Initialization")
    print("=" * 60)

    storage = JsonFileStorage(settings.DATA_FILE)
    init_db(storage)
    seed_clients(storage, sys.argv[1:])

    print("\n" + "=" * 60)
    print("Initialization complete!")
    print("=" * 60)
    print("\nYou can now access:")
    print(f"  - API: http://localhost:{settings.PORT}/api/clients")
    print(f"  - Dashboard: http://localhost:{settings.PORT}/")
    print("=" * 60)
