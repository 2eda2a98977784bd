#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2026 Biodex Contributors
"""Exercise a running Biodex API against the seeded demo data.

Checks the catalog listing, ranked search, filters, the quick search and the
detail lookup, printing which search mode answered each request. Exits
non-zero on the first failed check.

Usage:
    python scripts/verify_demo.py
    python scripts/verify_demo.py --base-url http://localhost:8000
"""

from __future__ import annotations

import argparse
import sys

import httpx

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

DEFAULT_BASE_URL = "http://localhost:8000"
TIMEOUT = 30.0

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def v1(base: str) -> str:
    return f"{base}/v1"


def get(client: httpx.Client, url: str, params: dict | None = None) -> dict:
    r = client.get(url, params=params)
    if r.status_code >= 400:
        print(f"  ERROR {r.status_code}: {r.text[:200]}", file=sys.stderr)
        r.raise_for_status()
    return r.json()


def check(condition: bool, message: str) -> None:
    if not condition:
        print(f"  FAIL: {message}", file=sys.stderr)
        sys.exit(1)
    print(f"  ok: {message}")


def names(body: dict) -> list[str]:
    return [item["scientific_name"] for item in body["data"]]


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def verify_listing(client: httpx.Client, base: str) -> None:
    body = get(client, f"{v1(base)}/species", params={"limit": 3})
    meta = body["metadata"]
    check(meta["mode"] == "basic-query", "listing without a term uses the basic query")
    check(len(body["data"]) <= 3, "limit is honoured")
    check(meta["count"] >= len(body["data"]), "count covers the whole catalog")
    featured = [item["featured"] for item in body["data"]]
    check(featured == sorted(featured, reverse=True), "featured species come first")


def verify_search(client: httpx.Client, base: str) -> None:
    body = get(client, f"{v1(base)}/species", params={"search": "panthera"})
    meta = body["metadata"]
    print(f"  mode: {meta['mode']}")
    check(meta["count"] >= 1, "search finds the Panthera species")
    check(all("Panthera" in name for name in names(body)), "only matching species returned")

    body = get(client, f"{v1(base)}/species", params={"search": "panthera", "iucn_status": "EN"})
    check(names(body) == ["Panthera tigris"], "iucn_status narrows ranked results")

    body = get(client, f"{v1(base)}/species", params={"search": "(,%)"})
    check(body["metadata"]["filters"]["search"] is None, "unsafe characters are stripped")


def verify_quick_search(client: httpx.Client, base: str) -> None:
    body = get(client, f"{v1(base)}/search", params={"q": "lynx"})
    check(names(body)[:1] == ["Lynx lynx"], "quick search returns the lynx")

    body = get(client, f"{v1(base)}/search", params={"q": ""})
    check(body["data"] == [], "empty quick search returns nothing")


def verify_detail(client: httpx.Client, base: str) -> None:
    body = get(client, f"{v1(base)}/species/panthera-leo")
    data = body["data"]
    check(data["common_name"] == "Lion", "detail by slug")
    check(data["taxonomy"] is not None, "detail carries taxonomy")

    by_id = get(client, f"{v1(base)}/species/{data['id']}")
    check(by_id["data"]["slug"] == "panthera-leo", "detail by id")

    r = client.get(f"{v1(base)}/species/not-a-species")
    check(r.status_code == 404, "unknown species is a 404")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    parser = argparse.ArgumentParser(description="Verify a running Biodex API")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    args = parser.parse_args()
    base = args.base_url.rstrip("/")

    with httpx.Client(timeout=TIMEOUT) as client:
        print("1. Catalog listing...")
        verify_listing(client, base)

        print("2. Catalog search...")
        verify_search(client, base)

        print("3. Quick search...")
        verify_quick_search(client, base)

        print("4. Species detail...")
        verify_detail(client, base)

    print()
    print("Done! All checks passed.")


if __name__ == "__main__":
    main()
