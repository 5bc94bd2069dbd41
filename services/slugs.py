import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from utils.slug import slugify


async def unique_slug(session: AsyncSession, model, name: str) -> str:
    """Slug from name; suffixed when taken (trashed rows still hold their slug)."""
    slug = slugify(name)
    existing = await session.execute(select(model.id).where(model.slug == slug))
    if existing.first() is not None:
        slug = f"{slug}-{uuid.uuid4().hex[:6]}"
    return slug
