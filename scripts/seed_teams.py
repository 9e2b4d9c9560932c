"""Seed the World Cup 2026 teams and the official results set."""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlmodel import Session
from worldcup_predictor.database import engine, create_db_and_tables
from worldcup_predictor.seed import ensure_official_set, seed_teams, set_playoff_winner


def main(argv):
    create_db_and_tables()

    with Session(engine) as session:
        created = seed_teams(session, force="--force" in argv)
        if created:
            print(f"Seeded {created} teams.")
        else:
            print("Teams already seeded. Use --force to re-seed.")

        official = ensure_official_set(session)
        print(f"Official results set: {official.id}")

        # --playoff=PED=DEN resolves a playoff slot
        for arg in argv:
            if arg.startswith("--playoff="):
                slot_code, _, winner_code = arg.split("=", 1)[1].partition("=")
                slot = set_playoff_winner(session, slot_code, winner_code or None)
                print(f"{slot.code} -> {slot.playoff_winner_id}")


if __name__ == "__main__":
    main(sys.argv[1:])
