"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

import logging
from datetime import date
from typing import Generic, Optional, TypeVar

from sqlalchemy import delete, func, inspect, select
from sqlalchemy.exc import IntegrityError

from delfis_api.db.models import AppUser, Plan, Streak, Theme, UserRole
from delfis_api.db.session import get_session
from delfis_api.repositories.results import WriteResult, classify_integrity_error

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class SQLRepository(Generic[ModelT]):
    """CRUD helpers wrapping the SQLAlchemy session for a single model."""

    model: type[ModelT]

    def _all(self, stmt) -> list[ModelT]:
        with get_session() as session:
            return list(session.execute(stmt).scalars().all())

    def _first(self, stmt) -> Optional[ModelT]:
        with get_session() as session:
            return session.execute(stmt.limit(1)).scalars().first()

    # -------------------------- reads --------------------------
    def find_all(self) -> list[ModelT]:
        return self._all(select(self.model).order_by(self.model.id))

    def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        with get_session() as session:
            return session.get(self.model, entity_id)

    # -------------------------- writes --------------------------
    def save(self, entity: ModelT) -> WriteResult[ModelT]:
        """
        Insert ``entity`` when it has no id, otherwise copy its columns onto the
        stored row. Constraint violations come back as a WriteResult.
        """
        with get_session() as session:
            if entity.id is None:
                target = entity
                session.add(target)
            else:
                target = session.get(self.model, entity.id)
                if target is None:
                    target = self.model()
                    session.add(target)
                for attr in inspect(self.model).column_attrs:
                    setattr(target, attr.key, getattr(entity, attr.key))
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                status = classify_integrity_error(exc)
                logger.warning(f"{self.model.__name__}: escrita rejeitada ({status.value}): {exc.orig}")
                return WriteResult(status, detail=str(exc.orig))
            saved = session.get(self.model, target.id, populate_existing=True)
            logger.info(f"{self.model.__name__} {saved.id} salvo.")
            return WriteResult.success(saved)

    def delete_by_id(self, entity_id: int) -> WriteResult[None]:
        with get_session() as session:
            try:
                session.execute(delete(self.model).where(self.model.id == entity_id))
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                status = classify_integrity_error(exc)
                logger.warning(f"{self.model.__name__} {entity_id}: exclusão rejeitada ({status.value}).")
                return WriteResult(status, detail=str(exc.orig))
        logger.info(f"{self.model.__name__} {entity_id} removido.")
        return WriteResult.success()


class UserRoleRepository(SQLRepository[UserRole]):
    model = UserRole

    def find_by_name(self, name: str) -> Optional[UserRole]:
        return self._first(select(UserRole).where(UserRole.name == name))


class PlanRepository(SQLRepository[Plan]):
    model = Plan

    def find_by_name(self, name: str) -> Optional[Plan]:
        return self._first(select(Plan).where(Plan.name == name))


class ThemeRepository(SQLRepository[Theme]):
    model = Theme

    def find_by_name_ignore_case(self, name: str) -> Optional[Theme]:
        return self._first(select(Theme).where(func.lower(Theme.name) == (name or "").lower()))


class AppUserRepository(SQLRepository[AppUser]):
    model = AppUser

    def find_by_username(self, username: str) -> Optional[AppUser]:
        return self._first(select(AppUser).where(AppUser.username == username))

    def find_by_email(self, email: str) -> Optional[AppUser]:
        return self._first(select(AppUser).where(AppUser.email == email))

    def find_by_plan_id(self, plan_id: int) -> list[AppUser]:
        return self._all(select(AppUser).where(AppUser.plan_id == plan_id).order_by(AppUser.id))

    def find_by_user_role_id(self, user_role_id: int) -> list[AppUser]:
        return self._all(select(AppUser).where(AppUser.user_role_id == user_role_id).order_by(AppUser.id))

    def find_leaderboard(self) -> list[AppUser]:
        stmt = select(AppUser).order_by(AppUser.points.desc(), AppUser.level.desc(), AppUser.id)
        return self._all(stmt)


class StreakRepository(SQLRepository[Streak]):
    model = Streak

    def find_by_app_user_id(self, app_user_id: int) -> list[Streak]:
        return self._all(select(Streak).where(Streak.app_user_id == app_user_id).order_by(Streak.id))

    def find_by_initial_date_before(self, initial_date: date) -> list[Streak]:
        stmt = select(Streak).where(Streak.initial_date < initial_date).order_by(Streak.id)
        return self._all(stmt)
