"""Smoke test against a running server.

Creates one user, fetches it back and lists everything.

Usage:
  python -m app &
  python scripts/live_smoketest.py [base_url]
"""

from __future__ import annotations

import json
import sys
import uuid

import httpx

from app.settings import get_settings


def main() -> int:
    s = get_settings()
    base_url = sys.argv[1] if len(sys.argv) > 1 else f"http://localhost:{s.port}"
    email = f"smoke-{uuid.uuid4().hex[:8]}@example.com"

    try:
        with httpx.Client(base_url=base_url, timeout=10.0) as client:
            r = client.post("/api/users", json={"name": "Smoke Test", "email": email})
            print("create:", r.status_code, json.dumps(r.json()))
            if r.status_code != 201:
                return 1

            user_id = r.json()["user"]["id"]
            r = client.get(f"/api/users/{user_id}")
            print("get:", r.status_code, json.dumps(r.json()))

            r = client.get("/api/users")
            print("list:", r.status_code, "total =", r.json().get("total"))
    except httpx.HTTPError as exc:
        print("exception:", type(exc).__name__, str(exc))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
