from typing import Any, Optional

from credcheck.errors import ValidationError
from credcheck.models.schema import MetadataResult
from credcheck.services.reader import Reader
from credcheck.services.url_check import is_url

DEFAULT_TITLE = "Article"


def extract_title(payload: Any) -> str:
    """Prefer data.title, then a top-level title, then the default."""
    if not isinstance(payload, dict):
        return DEFAULT_TITLE
    data = payload.get("data")
    if isinstance(data, dict) and data.get("title"):
        return str(data["title"])
    if payload.get("title"):
        return str(payload["title"])
    return DEFAULT_TITLE


def resolve_metadata(article: Optional[str], *, reader: Reader) -> MetadataResult:
    if not article:
        raise ValidationError("Article URL is required")
    if not is_url(article):
        raise ValidationError("Valid URL is required")

    url = article.strip()
    return MetadataResult(title=extract_title(reader.fetch_json(url)), url=url)
