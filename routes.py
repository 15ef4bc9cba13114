# routes.py
from fastapi import FastAPI
from controller.store_controller import store_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(store_router)
