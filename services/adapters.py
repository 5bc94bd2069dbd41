"""
Per-resource hooks used by ListEngine and MutationTransaction: which rows are
live, what search touches, how an entity is built and patched.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Mapping, TypeVar

from sqlalchemy import ColumnElement, Select, column, or_, select

from models import Brand, Category, Media
from utils.slug import slugify

ModelT = TypeVar("ModelT")

# Keys present in an update request; absent keys are left untouched.
PartialFields = Mapping[str, Any]


class ResourceAdapter(ABC, Generic[ModelT]):
    model: ClassVar[type]
    label: ClassVar[str] = "Resource"
    searchable_fields: ClassVar[tuple[str, ...]] = ()
    patchable_fields: ClassVar[frozenset[str]] = frozenset()
    identifier_column: ClassVar[str] = "id"
    paginate_by_default: ClassVar[bool] = False

    @property
    def identifier(self):
        return getattr(self.model, self.identifier_column)

    def base_query(self) -> Select:
        return select(self.model).where(self.model.deleted_at.is_(None))

    def trashed_query(self) -> Select:
        return select(self.model).where(self.model.deleted_at.is_not(None))

    def search_clause(self, term: str) -> ColumnElement[bool]:
        """Case-insensitive substring match on any searchable field; % and _ match literally."""
        return or_(*(getattr(self.model, f).icontains(term, autoescape=True) for f in self.searchable_fields))

    def sort_column(self, field: str):
        """Mapped column when known; otherwise the name goes to the store unchanged."""
        col = self.model.__table__.columns.get(field)
        return col if col is not None else column(field)

    @abstractmethod
    def build_entity(self, fields: Mapping[str, Any]) -> ModelT:
        """New, unsaved entity from create fields; fills resource defaults."""

    def apply_patch(self, entity: ModelT, fields: PartialFields) -> None:
        for key, value in fields.items():
            if key in self.patchable_fields:
                setattr(entity, key, value)


class BrandAdapter(ResourceAdapter[Brand]):
    model = Brand
    label = "Brand"
    searchable_fields = ("name",)
    patchable_fields = frozenset({"name", "slug", "status"})

    def build_entity(self, fields: Mapping[str, Any]) -> Brand:
        return Brand(
            name=fields["name"],
            slug=fields.get("slug") or slugify(fields["name"]),
            status=fields.get("status") or "active",
        )


class CategoryAdapter(ResourceAdapter[Category]):
    model = Category
    label = "Category"
    searchable_fields = ("name",)
    patchable_fields = frozenset({"name", "slug", "description", "status", "media_id"})

    def build_entity(self, fields: Mapping[str, Any]) -> Category:
        return Category(
            name=fields["name"],
            slug=fields.get("slug") or slugify(fields["name"]),
            description=fields.get("description"),
            status=fields.get("status") or "active",
            media_id=fields.get("media_id"),
        )


class MediaAdapter(ResourceAdapter[Media]):
    model = Media
    label = "Media"
    searchable_fields = ("file_name",)
    patchable_fields = frozenset(
        {"file_id", "file_name", "url", "thumb_url", "file_type", "size", "description"}
    )

    def build_entity(self, fields: Mapping[str, Any]) -> Media:
        return Media(
            file_id=fields["file_id"],
            file_name=fields["file_name"],
            url=fields["url"],
            thumb_url=fields.get("thumb_url"),
            file_type=fields.get("file_type"),
            size=fields.get("size") or 0,
            description=fields.get("description"),
        )
