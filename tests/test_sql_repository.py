"""
Smoke tests for the SQL repositories against a temporary SQLite database.
"""
from __future__ import annotations

from datetime import date

from delfis_api.db.models import AppUser, Plan, Streak, Theme, UserRole
from delfis_api.repositories.results import WriteStatus
from delfis_api.repositories.sql_repository import (
    AppUserRepository,
    PlanRepository,
    StreakRepository,
    ThemeRepository,
    UserRoleRepository,
)


def _user(username: str, **extra) -> AppUser:
    values = dict(name=username.upper(), username=username, email=f"{username}@delfis.com", password="hash")
    values.update(extra)
    return AppUser(**values)


def test_role_insert_and_duplicate_name(db_env):
    repo = UserRoleRepository()
    first = repo.save(UserRole(name="ADMIN"))
    assert first.ok
    assert first.entity.id is not None
    assert repo.find_by_name("ADMIN").id == first.entity.id

    again = repo.save(UserRole(name="ADMIN"))
    assert again.status is WriteStatus.UNIQUE_VIOLATION
    assert len(repo.find_all()) == 1


def test_save_with_id_replaces_stored_row(db_env):
    repo = UserRoleRepository()
    role = repo.save(UserRole(name="ADMIN")).entity
    result = repo.save(UserRole(id=role.id, name="MOD"))
    assert result.ok
    assert repo.find_by_id(role.id).name == "MOD"
    assert repo.find_by_name("ADMIN") is None


def test_unknown_reference_is_reported(db_env):
    result = AppUserRepository().save(_user("ana", plan_id=999))
    assert result.status is WriteStatus.REFERENCE_VIOLATION
    assert AppUserRepository().find_all() == []


def test_delete_blocked_by_dependent_rows(db_env):
    plan = PlanRepository().save(Plan(name="PREMIUM")).entity
    users = AppUserRepository()
    assert users.save(_user("ana", plan_id=plan.id)).ok

    result = PlanRepository().delete_by_id(plan.id)
    assert result.status is WriteStatus.REFERENCE_VIOLATION
    assert PlanRepository().find_by_id(plan.id) is not None
    assert [u.username for u in users.find_by_plan_id(plan.id)] == ["ana"]


def test_theme_name_is_unique_ignoring_case(db_env):
    repo = ThemeRepository()
    assert repo.save(Theme(name="Puzzles")).ok
    assert repo.find_by_name_ignore_case("PUZZLES").name == "Puzzles"
    assert repo.save(Theme(name="puzzles")).status is WriteStatus.UNIQUE_VIOLATION


def test_leaderboard_orders_by_points_then_level(db_env):
    repo = AppUserRepository()
    repo.save(_user("low", points=10, level=5))
    repo.save(_user("mid", points=50, level=2))
    repo.save(_user("top", points=50, level=3))
    assert [u.username for u in repo.find_leaderboard()] == ["top", "mid", "low"]


def test_streaks_before_date_is_strict(db_env):
    user = AppUserRepository().save(_user("ana")).entity
    streaks = StreakRepository()
    streaks.save(Streak(initial_date=date(2024, 1, 1), app_user_id=user.id))
    streaks.save(Streak(initial_date=date(2024, 2, 1), app_user_id=user.id))

    found = streaks.find_by_initial_date_before(date(2024, 2, 1))
    assert [s.initial_date for s in found] == [date(2024, 1, 1)]
    assert found[0].app_user.username == "ana"
    assert len(streaks.find_by_app_user_id(user.id)) == 2
