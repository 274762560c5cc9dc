"""
SQLAlchemy ORM models.

Tables
------
* ``users``     -- employees and their managers (self-referencing)
* ``clients``   -- customer sites employees visit
* ``checkins``  -- one visit: check-in position, distance to the client,
  check-in / check-out timestamps

Indexes
-------
* **B-Tree** on ``users.manager_id`` for the team look-up and on
  ``(checkins.employee_id, checkins.checkin_time)`` for the daily report.
* **Partial unique** on ``checkins.employee_id`` where ``checkout_time``
  is NULL, so an employee has at most one open visit.
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
    text,
)

from .database import Base
from src.domain.enums import UserRole


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    role = Column(Enum(UserRole), default=UserRole.EMPLOYEE, nullable=False)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    # SHA-256 hex digest of the bearer token, never the token itself
    api_token_hash = Column(String(64), unique=True, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (Index("idx_users_manager", "manager_id"),)


class ClientModel(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    address = Column(String(500), nullable=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class CheckinModel(Base):
    __tablename__ = "checkins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)

    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    distance_from_client_km = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)

    checkin_time = Column(DateTime(timezone=True), nullable=False)
    checkout_time = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index("idx_checkins_employee_time", "employee_id", "checkin_time"),
        Index("idx_checkins_client", "client_id"),
        # at most one open visit per employee
        Index(
            "uq_checkins_open_per_employee",
            "employee_id",
            unique=True,
            postgresql_where=text("checkout_time IS NULL"),
            sqlite_where=text("checkout_time IS NULL"),
        ),
    )
