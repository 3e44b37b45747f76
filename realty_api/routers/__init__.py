"""
FastAPI routers grouped by collection (projects, clients, contacts,
subscribers) plus health and the server-rendered pages.

Each module exposes an APIRouter that app.py includes.
"""
