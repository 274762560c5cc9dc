"""
Seed script -- populates the database with sample data for reviewers.

Run after migrations:
    python seed.py

Creates:
  - 1 manager and 4 employees reporting to them
  - 5 client sites around Bengaluru
  - check-ins for today (mix of closed and open visits)

Bearer tokens are generated fresh and printed once; only their
hashes are stored.
"""

import asyncio
from datetime import datetime, timedelta, timezone

from sqlalchemy import text

from src.api.auth import generate_token, hash_token
from src.domain.distance import calculate_distance_km
from src.domain.enums import UserRole
from src.infrastructure.database import async_session_factory, engine
from src.infrastructure.models import CheckinModel, ClientModel, UserModel


MANAGER = {"name": "Kavya Rao", "email": "kavya@example.com"}

EMPLOYEES = [
    {"name": "Aarav Sharma", "email": "aarav@example.com"},
    {"name": "Priya Patel", "email": "priya@example.com"},
    {"name": "Rohan Mehta", "email": "rohan@example.com"},
    {"name": "Sneha Gupta", "email": "sneha@example.com"},
]

CLIENTS = [
    {"name": "Indiranagar Pharmacy", "address": "100 Feet Rd, Indiranagar", "lat": 12.9719, "lng": 77.6412},
    {"name": "Koramangala Foods", "address": "80 Feet Rd, Koramangala", "lat": 12.9352, "lng": 77.6245},
    {"name": "Whitefield Tech Park", "address": "ITPL Main Rd, Whitefield", "lat": 12.9698, "lng": 77.7500},
    {"name": "MG Road Retail", "address": "MG Road", "lat": 12.9756, "lng": 77.6050},
    {"name": "Jayanagar Clinic", "address": "4th Block, Jayanagar", "lat": 12.9250, "lng": 77.5938},
]


async def seed():
    async with async_session_factory() as session:
        # Check if already seeded
        result = await session.execute(text("SELECT count(*) FROM users"))
        if result.scalar() > 0:
            print("Database already seeded. Skipping.")
            return

        tokens: dict[str, str] = {}

        # ── Users ─────────────────────────────────────────────────────
        tokens[MANAGER["email"]] = generate_token()
        manager = UserModel(
            name=MANAGER["name"],
            email=MANAGER["email"],
            role=UserRole.MANAGER,
            api_token_hash=hash_token(tokens[MANAGER["email"]]),
        )
        session.add(manager)
        await session.flush()

        employees = []
        for e in EMPLOYEES:
            tokens[e["email"]] = generate_token()
            m = UserModel(
                name=e["name"],
                email=e["email"],
                role=UserRole.EMPLOYEE,
                manager_id=manager.id,
                api_token_hash=hash_token(tokens[e["email"]]),
            )
            session.add(m)
            employees.append(m)
        await session.flush()
        print(f"  Created 1 manager and {len(employees)} employees")

        # ── Clients ───────────────────────────────────────────────────
        clients = []
        for c in CLIENTS:
            m = ClientModel(
                name=c["name"], address=c["address"],
                latitude=c["lat"], longitude=c["lng"],
            )
            session.add(m)
            clients.append(m)
        await session.flush()
        print(f"  Created {len(clients)} clients")

        # ── Check-ins ─────────────────────────────────────────────────
        day = datetime.now(timezone.utc).replace(hour=3, minute=30, second=0, microsecond=0)
        visits = [
            # (employee, client, offset from client, start offset h, duration h)
            (0, 0, (0.0005, 0.0004), 0.0, 1.5),
            (0, 1, (0.0010, -0.0008), 2.0, 2.0),
            (1, 2, (0.0002, 0.0001), 0.5, 3.25),
            (1, 2, (-0.0003, 0.0006), 4.5, 1.0),
            (2, 3, (0.0200, 0.0150), 1.0, None),  # open, checked in far away
        ]
        for emp_idx, client_idx, (dlat, dlng), start_h, duration_h in visits:
            client = clients[client_idx]
            lat, lng = client.latitude + dlat, client.longitude + dlng
            checkin_time = day + timedelta(hours=start_h)
            session.add(
                CheckinModel(
                    employee_id=employees[emp_idx].id,
                    client_id=client.id,
                    latitude=lat,
                    longitude=lng,
                    distance_from_client_km=calculate_distance_km(
                        client.latitude, client.longitude, lat, lng
                    ),
                    checkin_time=checkin_time,
                    checkout_time=(
                        checkin_time + timedelta(hours=duration_h)
                        if duration_h is not None
                        else None
                    ),
                )
            )
        await session.flush()
        print(f"  Created {len(visits)} check-ins")

        await session.commit()

        print("\nBearer tokens (shown once):")
        for email, token in tokens.items():
            print(f"  {email:<22} {token}")
        print("\nSeed complete!")


async def main():
    print("Seeding database...")
    await seed()
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
