#!/usr/bin/env python3
"""
Debug script to check the station_status feed against our station list.
Run from project root: python3 scripts/debug_feed.py [url]

Prints the envelope shape and which configured station IDs the feed is
missing (those show up red on the status page).
"""

import sys
from pathlib import Path

# Add project root so ebike_status can be imported
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import requests

from ebike_status.config import FEED_TIMEOUT, STATUS_URL
from ebike_status.errors import FeedError
from ebike_status.feed import decode_station_status
from ebike_status.stations import REGIONS, station_ids

url = sys.argv[1] if len(sys.argv) > 1 else STATUS_URL

print("\n--- station_status (raw) ---")
print(f"  URL: {url}")
try:
    r = requests.get(url, timeout=FEED_TIMEOUT)
    print(f"  Status: {r.status_code}")
    if r.status_code != 200:
        print(f"  Body (first 500 chars): {r.text[:500]}")
        sys.exit(1)
    r.encoding = "utf-8-sig"
    data = r.json()
except (requests.exceptions.RequestException, ValueError) as e:
    print(f"  ERROR: {e}")
    sys.exit(1)

print(f"  Top-level keys: {list(data.keys()) if isinstance(data, dict) else type(data)}")
print(f"  last_updated: {data.get('last_updated')}  ttl: {data.get('ttl')}  version: {data.get('version')}")

print("\n--- Decoded ---")
try:
    feed = decode_station_status(data)
except FeedError as e:
    print(f"  ERROR: {e}")
    sys.exit(1)
print(f"  Stations in feed: {len(feed.stations)}")
if feed.stations:
    print(f"  First station: {feed.stations[0]}")

print("\n--- Configured stations ---")
by_id = feed.by_id()
for region in REGIONS:
    for s in region.stations:
        status = by_id.get(s.id)
        if status is None:
            print(f"  MISSING {s.id:>4}  {s.name}")
        else:
            print(f"  OK      {s.id:>4}  {s.name}  ebikes={status.num_ebikes_available} bikes={status.num_bikes_available}")

missing = [sid for sid in station_ids() if sid not in by_id]
print(f"\n  {len(station_ids()) - len(missing)}/{len(station_ids())} configured stations found in feed")
sys.exit(1 if missing else 0)
