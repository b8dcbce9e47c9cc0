from __future__ import annotations

import sys
from pathlib import Path

# Allow running as: python scripts/users_smoketest.py
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from fastapi.testclient import TestClient

from app.main import create_app


def main() -> int:
    c = TestClient(create_app())

    r = c.get("/api/users")
    print("/api/users(empty)", r.status_code, r.json())

    r = c.post("/api/users", json={"name": "Ann", "email": "Ann@Example.com", "age": 30})
    print("POST /api/users", r.status_code, r.json())
    if r.status_code != 201:
        return 1
    user_id = r.json()["user"]["id"]

    r = c.post("/api/users", json={"name": "Ann again", "email": "ann@example.com"})
    print("POST /api/users(duplicate)", r.status_code, r.json())

    r = c.get(f"/api/users/{user_id}")
    print(f"/api/users/{user_id}", r.status_code, r.json())

    r = c.get("/api/users")
    print("/api/users(after)", r.status_code, r.json())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
