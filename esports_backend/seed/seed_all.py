# seed_all.py
# Orchestrates the seed scripts for a fresh database.

from sqlmodel import SQLModel

from esports_backend.core.database import sync_engine
from esports_backend.seed.seed_teams import seed_teams


def seed_all(engine=sync_engine):
    print("\n🌱 Starting database seeding...\n")

    # Tables may not exist yet when run as a script
    from esports_backend import models  # noqa: F401
    SQLModel.metadata.create_all(engine)

    print("➡️  Step 1: Seeding teams...")
    seed_teams(engine)

    print("\n✅ Database seeding complete.\n")


if __name__ == "__main__":
    seed_all()
