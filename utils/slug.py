import re


def slugify(name: str) -> str:
    """'Acme Beauty & Co.' -> 'acme-beauty-co'."""
    slug = re.sub(r"[^a-z0-9-]", "-", name.strip().lower())
    slug = re.sub(r"-+", "-", slug).strip("-")
    return slug or "item"
