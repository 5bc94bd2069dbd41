"""
Shared fixtures for the test suite: throwaway SQLite databases and a fake file store.
"""
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.pool import NullPool

from database import build_engine, build_sessionmaker, create_tables
from exceptions import ExternalServiceError
from services.storage import UploadedFile


def memory_engine() -> AsyncEngine:
    """Single shared in-memory connection; use from one event loop."""
    return build_engine("sqlite+aiosqlite://")


def file_engine(path: str) -> AsyncEngine:
    """Fresh connection per session; safe when each request runs on its own event loop."""
    return build_engine(f"sqlite+aiosqlite:///{path}", poolclass=NullPool)


session_factory = build_sessionmaker
create_schema = create_tables


class FakeStorage:
    """Stands in for ImageKitClient; records calls and can be told to fail."""

    def __init__(self, fail_delete: bool = False):
        self.fail_delete = fail_delete
        self.deleted: list[str] = []
        self.uploaded: list[str] = []

    async def delete_file(self, file_id: str) -> None:
        if self.fail_delete:
            raise ExternalServiceError("Failed to delete file", "storage unavailable")
        self.deleted.append(file_id)

    async def upload_file(self, content: bytes, file_name: str) -> UploadedFile:
        self.uploaded.append(file_name)
        return UploadedFile(
            file_id=f"fid-{len(self.uploaded)}",
            name=file_name,
            url=f"https://ik.example/{file_name}",
            thumb_url=f"https://ik.example/tr:n-thumb/{file_name}",
            size=len(content),
            file_type="image",
        )

    async def upload_from_url(self, url: str, file_name=None) -> UploadedFile:
        return await self.upload_file(b"remote", file_name or url.rsplit("/", 1)[-1])
