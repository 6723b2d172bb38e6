"""
seed_teams.py
-------------
Seeds the demo teams (as team logos) from league_config.py.

✅ Supports "delta seeding":
   - Only inserts missing teams (won't overwrite existing logos).
   - Safe to run multiple times.

Usage:
    python -m esports_backend.seed.seed_teams
"""

from sqlmodel import Session, select

from esports_backend.core.database import sync_engine
from esports_backend.core.league_config import demo_teams
from esports_backend.models.team_logo_model import TeamLogo


def seed_teams(engine=sync_engine):
    with Session(engine) as session:
        print("🏷️  Starting team seeding...")
        added = 0

        for team_data in demo_teams:
            existing = session.exec(
                select(TeamLogo).where(TeamLogo.team_name == team_data["team_name"])
            ).first()

            if existing:
                print(f"   🔁 Team already exists: {team_data['team_name']}")
                continue

            print(f"   ➕ Adding new team: {team_data['team_name']}")
            session.add(TeamLogo(team_name=team_data["team_name"], logo_url=team_data["logo_url"]))
            added += 1

        session.commit()
        print(f"✅ Team seeding complete! ({added} added)")
        return added


if __name__ == "__main__":
    seed_teams()
