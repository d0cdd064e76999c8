import sys, pathlib, asyncio
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from sqlalchemy import text
from store_admin.core.config import settings
from store_admin.core.db import SessionLocal

async def main():
    print("ENV:", settings.ENV)
    print("JWT_ISSUER:", settings.JWT_ISSUER)
    print("JWT_AUDIENCE:", settings.JWT_AUDIENCE)
    print("DB_URL override:", bool(settings.DB_URL))
    print("DB_POOL_SIZE:", settings.DB_POOL_SIZE)
    print("DB_ISOLATION_LEVEL:", settings.DB_ISOLATION_LEVEL)
    print("RATE_LIMIT:", settings.API_RATE_LIMIT if settings.RATE_LIMIT_ENABLED else "disabled")
    print("VALIDATION_LOCALE:", settings.VALIDATION_LOCALE)
    async with SessionLocal() as s:
        one = await s.execute(text("SELECT 1"))
        print("db-ping:", one.scalar())

if __name__ == "__main__":
    asyncio.run(main())
