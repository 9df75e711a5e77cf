#!/usr/bin/env python3
# =============================================================================
# scripts/seed_db.py - Seed Demo Data
# =============================================================================
# Creates the tables and a demo user with a handful of jokes.
#
# Usage:
#   python scripts/seed_db.py           # add demo data if it isn't there
#   python scripts/seed_db.py --reset   # drop everything first
#
# The demo user can log in as kody / twixrox.
# =============================================================================

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from core.services import JokeService, UserService
from lib.database import Database

DEMO_USERNAME = "kody"
DEMO_PASSWORD = "twixrox"

DEMO_JOKES = [
    {
        "name": "Road worker",
        "content": "I never wanted to believe that my Dad was stealing from his job "
                   "as a road worker. But when I got home, all the signs were there.",
    },
    {
        "name": "Frisbee",
        "content": "I was wondering why the frisbee was getting bigger, then it hit me.",
    },
    {
        "name": "Trees",
        "content": "Why do trees seem suspicious on sunny days? Dunno, they're just a bit shady.",
    },
    {
        "name": "Skeletons",
        "content": "Why don't skeletons ride roller coasters? They don't have the stomach for it.",
    },
    {
        "name": "Hippos",
        "content": "Why don't you find hippopotamuses hiding in trees? They're really good at it.",
    },
    {
        "name": "Dinner",
        "content": "What did one plate say to the other plate? Dinner is on me!",
    },
    {
        "name": "Elevator",
        "content": "My first time using an elevator was an uplifting experience. "
                   "The second time let me down.",
    },
]


def main():
    parser = argparse.ArgumentParser(description="Seed the jokes database")
    parser.add_argument("--reset", action="store_true", help="Drop all tables first")
    args = parser.parse_args()

    if args.reset:
        print("Dropping tables...")
        Database.drop_tables()

    Database.create_tables()

    with Database.new_session() as db:
        user = UserService.find_by_username(db, DEMO_USERNAME)
        if user is None:
            user = UserService.register(db, DEMO_USERNAME, DEMO_PASSWORD)
            print(f"Created user {DEMO_USERNAME}")
        else:
            print(f"User {DEMO_USERNAME} already exists")

        if JokeService.count_jokes(db) > 0:
            print("Jokes already seeded, nothing to do")
            return

        for joke in DEMO_JOKES:
            JokeService.create_joke(db, jokester_id=user.id, **joke)
        print(f"Created {len(DEMO_JOKES)} jokes")


if __name__ == "__main__":
    main()
