#!/usr/bin/env python3
"""
Pre-push / production readiness checks.
Run from backend dir with project venv active: python scripts/pre_push_checks.py
"""
import sys
from pathlib import Path

BACKEND = Path(__file__).resolve().parent.parent
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))


def check_imports():
    from educonnect.main import app
    paths = {getattr(r, "path", "") for r in app.routes}
    for required in ("/api/dashboard/stats", "/api/activities", "/api/courses", "/api/enrollments"):
        assert required in paths, f"missing route {required}"
    return "imports"


def check_rounding():
    from educonnect.services.dashboard import round_half_up
    assert round_half_up(2.675) == 2.68
    assert round_half_up(None) is None
    return "round_half_up"


def check_secret_key():
    from educonnect.config import settings, DEFAULT_SECRET_KEY
    if settings.is_production:
        assert settings.secret_key != DEFAULT_SECRET_KEY, "SECRET_KEY must be set in production"
    return "secret_key"


def check_init_db():
    from educonnect.database import init_sqlite_db
    init_sqlite_db()
    return "init_sqlite_db"


def main():
    checks = [check_imports, check_rounding, check_secret_key, check_init_db]
    for fn in checks:
        try:
            name = fn()
            print(f"OK {name}")
        except Exception as e:
            print(f"FAIL {fn.__name__}: {e}")
            return 1
    print("All pre-push checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
