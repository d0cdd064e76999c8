"""Mint a development access token: python scripts/issue_token.py <user_id> [minutes]"""

import sys, pathlib
from datetime import timedelta
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from store_admin.core.config import settings
from store_admin.core.security import create_access_token


def main(argv: list[str]) -> int:
    if not argv:
        print(__doc__)
        return 2
    minutes = int(argv[1]) if len(argv) > 1 else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    print(create_access_token(argv[0], timedelta(minutes=minutes)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
