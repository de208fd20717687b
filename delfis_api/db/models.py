"""SQLAlchemy models for the relational entities."""
from __future__ import annotations

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .session import Base


class UserRole(Base):
    __tablename__ = "user_role"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)


class Plan(Base):
    __tablename__ = "plan"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)


class Theme(Base):
    __tablename__ = "theme"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    description = Column(Text, nullable=True)

    # Busca e unicidade do nome ignoram maiúsculas/minúsculas.
    __table_args__ = (Index("uq_theme_name_lower", func.lower(name), unique=True),)


class AppUser(Base):
    __tablename__ = "app_user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    username = Column(String(50), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(Text, nullable=False)
    level = Column(Integer, nullable=False, default=1)
    points = Column(Integer, nullable=False, default=0)
    coins = Column(Integer, nullable=False, default=0)
    birth_date = Column(Date, nullable=True)
    picture_url = Column(Text, nullable=True)
    plan_id = Column(Integer, ForeignKey("plan.id"), nullable=True, index=True)
    user_role_id = Column(Integer, ForeignKey("user_role.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relações somente leitura: a escrita acontece pelas colunas *_id.
    plan = relationship("Plan", lazy="joined", viewonly=True)
    user_role = relationship("UserRole", lazy="joined", viewonly=True)


class Streak(Base):
    __tablename__ = "streak"

    id = Column(Integer, primary_key=True, index=True)
    initial_date = Column(Date, nullable=False)
    final_date = Column(Date, nullable=True)
    app_user_id = Column(Integer, ForeignKey("app_user.id"), nullable=False, index=True)

    app_user = relationship("AppUser", lazy="joined", viewonly=True)
