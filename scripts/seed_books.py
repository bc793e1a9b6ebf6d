#!/usr/bin/env python3
"""
Seed script: creates books via the API (no direct Elasticsearch access).
Run with the API up:
  python scripts/seed_books.py
  python scripts/seed_books.py --books 200 --username seeder
"""

import argparse
import random
import sys

import httpx

API_BASE = "http://localhost:8080"

TITLES = [
    "The Pragmatic Programmer", "Clean Code", "Fluent Python", "Designing Data-Intensive Applications",
    "Refactoring", "Domain-Driven Design", "The Mythical Man-Month", "Code Complete",
    "Structure and Interpretation of Computer Programs", "Effective Python", "Release It!",
    "Site Reliability Engineering", "Working Effectively with Legacy Code", "Database Internals",
]

AUTHORS = [
    "Andrew Hunt", "Robert C. Martin", "Luciano Ramalho", "Martin Kleppmann", "Martin Fowler",
    "Eric Evans", "Fred Brooks", "Steve McConnell", "Harold Abelson", "Brett Slatkin",
    "Michael Nygard", "Betsy Beyer", "Michael Feathers", "Alex Petrov",
]


def random_book(username: str) -> dict:
    return {
        "title": random.choice(TITLES),
        "author_name": random.choice(AUTHORS),
        "price": round(random.uniform(5, 80), 2),
        "ebook_available": random.random() > 0.5,
        "publish_date": f"{random.randint(1970, 2024)}-{random.randint(1, 12):02d}-{random.randint(1, 28):02d}",
        "username": username,
    }


def main():
    ap = argparse.ArgumentParser(description="Seed books via API")
    ap.add_argument("--books", type=int, default=50, help="Number of books to create")
    ap.add_argument("--username", default="seeder", help="Acting username recorded in activity")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created = 0
    errors = []
    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        for _ in range(args.books):
            r = client.post("/books", json=random_book(args.username))
            if r.status_code == 201:
                created += 1
            else:
                errors.append(f"{r.status_code} {r.text[:200]}")

    print(f"Created {created} books.")
    if errors:
        print(f"{len(errors)} failures, first: {errors[0]}")
        sys.exit(1)
    inventory = httpx.get(f"{args.base_url}/store", timeout=30.0).json()
    print(f"Store inventory: {inventory}")


if __name__ == "__main__":
    main()
