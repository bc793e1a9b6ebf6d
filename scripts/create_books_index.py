#!/usr/bin/env python3
"""
Create the Elasticsearch 'books' index with raw HTTP (no Python ES client).
The API creates it on startup too; use this when bootstrapping a cluster by hand:
  python scripts/create_books_index.py
  python scripts/create_books_index.py --recreate

Reads ELASTICSEARCH_URL from .env (default http://localhost:9200).
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx

from library.config import get_settings
from library.constants import BOOKS_INDEX
from library.search.elasticsearch_client import books_index_mappings

BODY = {
    "settings": {"index": {"number_of_replicas": 0}},
    "mappings": books_index_mappings(),
}


def main():
    ap = argparse.ArgumentParser(description="Create the books index")
    ap.add_argument("--recreate", action="store_true", help="Delete the index first if it exists")
    args = ap.parse_args()

    settings = get_settings()
    base = settings.elasticsearch_url.rstrip("/")
    url = f"{base}/{BOOKS_INDEX}"

    with httpx.Client(timeout=30.0, verify=settings.elasticsearch_verify_certs) as client:
        r = client.head(url)
        if r.status_code == 200:
            if not args.recreate:
                print(f"Index '{BOOKS_INDEX}' already exists. Pass --recreate to drop and create it again.")
                return
            client.delete(url).raise_for_status()
            print(f"Deleted index '{BOOKS_INDEX}'.")
        r = client.put(url, json=BODY)
        if r.status_code not in (200, 201):
            print(f"Failed to create index: {r.status_code}")
            print(r.text[:500])
            sys.exit(1)
    print(f"Created index '{BOOKS_INDEX}' with number_of_replicas=0.")


if __name__ == "__main__":
    main()
