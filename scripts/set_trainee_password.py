#!/usr/bin/env python3
"""Create or replace the login credential of an existing trainee."""

import argparse
import asyncio
import getpass
import sys

from sqlalchemy import select

from app.core.security import get_password_hash
from app.database import AsyncSessionLocal, engine
from app.models import trainee_auth, trainees


async def set_password(phone: str, password: str) -> int:
    """Upsert the credential row for the active trainee with this phone."""
    async with AsyncSessionLocal() as db:
        result = await db.execute(
            select(trainees.c.id).where(
                trainees.c.phone == phone,
                trainees.c.is_active.is_(True),
            )
        )
        trainee_id = result.scalar_one_or_none()
        if trainee_id is None:
            print(f"❌ No active trainee with phone {phone}")
            return 1

        password_hash = get_password_hash(password)
        existing = await db.execute(
            select(trainee_auth.c.id).where(trainee_auth.c.phone == phone)
        )
        if existing.scalar_one_or_none() is None:
            await db.execute(
                trainee_auth.insert().values(
                    trainee_id=trainee_id,
                    phone=phone,
                    password_hash=password_hash,
                )
            )
        else:
            await db.execute(
                trainee_auth.update()
                .where(trainee_auth.c.phone == phone)
                .values(trainee_id=trainee_id, password_hash=password_hash, is_active=True)
            )
        await db.commit()

    await engine.dispose()
    print(f"✓ Credential set for trainee {trainee_id}")
    return 0


def main() -> int:
    """Parse arguments and set the password."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("phone", help="Trainee phone number")
    args = parser.parse_args()

    password = getpass.getpass("New password: ")
    if not password or password != getpass.getpass("Repeat password: "):
        print("❌ Passwords are empty or do not match")
        return 1

    return asyncio.run(set_password(args.phone.strip(), password))


if __name__ == "__main__":
    sys.exit(main())
