"""
Create the demo accounts and cash cards.

sarah1 / abc123 and kumar2 / xyz789 own cards;
hank-owns-no-cards / qrs456 authenticates but may not use the card API.
"""
import asyncio

from cashcards.db.seed import seed_demo_data
from cashcards.infrastructure.database import get_session, init_db


async def create_demo_data():
    await init_db()

    async for db in get_session():
        created = await seed_demo_data(db)
        if not created:
            print("Demo data already present")
            return
        await db.commit()
        print("Demo data created: sarah1 / abc123, kumar2 / xyz789, hank-owns-no-cards / qrs456")


if __name__ == "__main__":
    asyncio.run(create_demo_data())
