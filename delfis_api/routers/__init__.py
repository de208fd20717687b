"""
FastAPI routers grouped by entity (user-role, plan, theme, app-user, streak, sudoku).

Each module exposes an APIRouter mounted under ``/api/<entity>`` by the
application factory (app.py). Routers stay thin: services hold the rules and
``error_handlers`` turns service errors into HTTP responses.
"""
