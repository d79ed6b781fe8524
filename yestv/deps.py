from fastapi import Request

from .auth import AuthService
from .catalog import CatalogService
from .clients import ClientDirectory
from .playback import PlaybackLog


def get_catalog(request: Request) -> CatalogService:
    return request.app.state.catalog


def get_clients(request: Request) -> ClientDirectory:
    return request.app.state.clients


def get_playback(request: Request) -> PlaybackLog:
    return request.app.state.playback


def get_auth(request: Request) -> AuthService:
    return request.app.state.auth
