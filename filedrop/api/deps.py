"""Shared FastAPI dependencies."""

from fastapi import FastAPI, Request

from filedrop.core.config import Settings
from filedrop.core.storage import FileStore, LocalFileStore


def file_store_for(app: FastAPI) -> FileStore:
    """File store of the application, created on first use."""
    store = getattr(app.state, "file_store", None)
    if store is None:
        store = LocalFileStore(app.state.settings.upload_dir)
        app.state.file_store = store
    return store


def get_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_file_store(request: Request) -> FileStore:
    return file_store_for(request.app)
