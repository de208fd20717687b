"""Delfis API: CRUD endpoints for users, roles, plans, themes, streaks and sudokus."""
