"""
Seed script -- populates the database with sample data for reviewers.

Run after migrations:
    python seed.py

Creates:
  - 10 sample beekeepers spread across Austria (Vienna, Lower Austria,
    Styria, Tyrol, Salzburg, Upper Austria, Carinthia)
  - 2-3 honey types per beekeeper with prices and jar sizes
"""

import asyncio

from sqlalchemy import text

from src.infrastructure.database import async_session_factory, engine
from src.infrastructure.repositories import BeekeeperRepository

WEEKDAY_HOURS = {
    day: "09:00-12:00, 14:00-18:00"
    for day in ("monday", "tuesday", "wednesday", "thursday", "friday")
}
SATURDAY_HOURS = {"saturday": "08:00-12:00"}


BEEKEEPERS = [
    {
        "name": "Imkerei Donaublick",
        "latitude": 48.2082, "longitude": 16.3738,
        "address": "Stephansplatz 1", "city": "Wien", "postal_code": "1010",
        "website": "https://donaublick.example.at",
        "opening_hours": {**WEEKDAY_HOURS, **SATURDAY_HOURS},
        "honey_types": [
            {"name": "Blütenhonig", "price": 8.50, "unit": "500g Glas"},
            {"name": "Akazienhonig", "price": 9.90, "unit": "500g Glas"},
            {"name": "Waldhonig", "price": 5.50, "unit": "250g Glas"},
        ],
    },
    {
        "name": "Bienenhof Prater",
        "latitude": 48.2166, "longitude": 16.3958,
        "address": "Prater 7", "city": "Wien", "postal_code": "1020",
        "opening_hours": SATURDAY_HOURS,
        "honey_types": [
            {"name": "Blütenhonig", "price": 7.90, "unit": "500g Glas"},
            {"name": "Lindenhonig", "price": 10.50, "unit": "500g Glas"},
        ],
    },
    {
        "name": "Wienerwald Honig",
        "latitude": 48.1845, "longitude": 16.1920,
        "address": "Hauptstraße 12", "city": "Purkersdorf", "postal_code": "3002",
        "website": "https://wienerwald-honig.example.at",
        "honey_types": [
            {"name": "Waldhonig", "price": 11.00, "unit": "500g Glas"},
            {"name": "Cremehonig", "price": 6.00, "unit": "250g Glas",
             "available": False},
        ],
    },
    {
        "name": "Wachauer Bienengarten",
        "latitude": 48.3806, "longitude": 15.4230,
        "address": "Marillengasse 3", "city": "Krems", "postal_code": "3500",
        "opening_hours": WEEKDAY_HOURS,
        "honey_types": [
            {"name": "Blütenhonig", "price": 8.00, "unit": "500g Glas"},
            {"name": "Rapshonig", "price": 7.00, "unit": "500g Glas"},
        ],
    },
    {
        "name": "Grazer Stadtimkerei",
        "latitude": 47.0707, "longitude": 15.4395,
        "address": "Herrengasse 16", "city": "Graz", "postal_code": "8010",
        "website": "https://stadtimkerei-graz.example.at",
        "honey_types": [
            {"name": "Kastanienhonig", "price": 12.50, "unit": "500g Glas"},
            {"name": "Blütenhonig", "price": 8.20, "unit": "1kg Glas"},
        ],
    },
    {
        "name": "Tiroler Alpenhonig",
        "latitude": 47.2692, "longitude": 11.4041,
        "address": "Maria-Theresien-Straße 18", "city": "Innsbruck",
        "postal_code": "6020",
        "opening_hours": {**WEEKDAY_HOURS, **SATURDAY_HOURS},
        "honey_types": [
            {"name": "Alpenrosenhonig", "price": 14.00, "unit": "500g Glas"},
            {"name": "Waldhonig", "price": 10.00, "unit": "500g Glas"},
        ],
    },
    {
        "name": "Salzburger Honigmanufaktur",
        "latitude": 47.8095, "longitude": 13.0550,
        "address": "Getreidegasse 9", "city": "Salzburg", "postal_code": "5020",
        "website": "https://honigmanufaktur.example.at",
        "honey_types": [
            {"name": "Blütenhonig", "price": 9.00, "unit": "500g Glas"},
            {"name": "Tannenhonig", "price": 13.50, "unit": "500g Glas"},
        ],
    },
    {
        "name": "Mühlviertler Bienenstand",
        "latitude": 48.3069, "longitude": 14.2858,
        "address": "Landstraße 40", "city": "Linz", "postal_code": "4020",
        "honey_types": [
            {"name": "Rapshonig", "price": 6.50, "unit": "500g Glas"},
            {"name": "Sommerhonig", "price": None, "unit": "500g Glas"},
        ],
    },
    {
        "name": "Wörthersee Imkerei",
        "latitude": 46.6247, "longitude": 14.3053,
        "address": "Neuer Platz 1", "city": "Klagenfurt", "postal_code": "9020",
        "opening_hours": WEEKDAY_HOURS,
        "honey_types": [
            {"name": "Lindenhonig", "price": 9.50, "unit": "500g Glas"},
            {"name": "Blütenhonig", "price": 4.90, "unit": "250g Glas"},
        ],
    },
    {
        "name": "Weinviertler Bienenweide",
        "latitude": 48.5707, "longitude": 16.5656,
        "address": "Kellergasse 5", "city": "Mistelbach", "postal_code": "2130",
        "honey_types": [
            {"name": "Sonnenblumenhonig", "price": 7.50, "unit": "500g Glas"},
        ],
    },
]


async def seed():
    async with async_session_factory() as session:
        # Check if already seeded
        result = await session.execute(text("SELECT count(*) FROM beekeepers"))
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
            return

        repo = BeekeeperRepository(session)
        for b in BEEKEEPERS:
            await repo.create_beekeeper(
                country="Österreich", is_active=True, is_verified=True, **b
            )
        print(f"  Created {len(BEEKEEPERS)} beekeepers")

        await session.commit()
        print("\nSeed complete!")


async def main():
    print("Seeding database...")
    await seed()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
