"""
FastAPI dependencies resolving objects built by the application factory.
"""
from fastapi import Request

from bfhl.core.config import Settings
from bfhl.services.bfhl_service import BFHLService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_bfhl_service(request: Request) -> BFHLService:
    return request.app.state.bfhl_service
