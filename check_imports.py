#!/usr/bin/env python3
"""
Startup check - builds the API for every route variant and lists its routes.
Usage: PYTHONPATH=backend python check_imports.py
"""
import os
import sys
import tempfile


def main():
    with tempfile.TemporaryDirectory() as tmpdir:
        os.environ.setdefault("OFFERS_API_DB_PATH", tmpdir)
        try:
            from offers_api.config import ROUTE_VARIANTS
            from offers_api.db import OfferRepository
            from offers_api.main import ROUTE_TABLES, create_app

            repo = OfferRepository(tmpdir)
            for variant in ROUTE_VARIANTS:
                app = create_app(repo=repo, variant=variant)
                paths = sorted({getattr(r, "path", "") for r in app.routes})
                if len(ROUTE_TABLES[variant]) != 5:
                    raise RuntimeError(f"{variant}: expected 5 documented endpoints")
                print(f"OK: {variant} -> {', '.join(p for p in paths if p.startswith('/v1'))}")
            return 0
        except Exception as e:
            print(f"FAILED: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc(file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
