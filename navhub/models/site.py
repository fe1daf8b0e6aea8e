# navhub/models/site.py

from typing import Any, Optional
from pydantic import BaseModel


DEFAULT_SITE_NAME = "NavHub"
DEFAULT_DOMAIN = "localhost"
DEFAULT_ICON = "/favicon.png"
DEFAULT_KEYWORDS = "navigation,bookmarks,websites,tools"
DEFAULT_LOCALE = "zh_CN"
DEFAULT_VERSION = "0.1"


class SiteConfig(BaseModel):
    """
    Site-level display metadata read from the data directory's config.json.
    """

    domain: str = DEFAULT_DOMAIN
    name: str = DEFAULT_SITE_NAME
    description: str = ""
    icon: str = DEFAULT_ICON
    image: str = DEFAULT_ICON
    keywords: str = DEFAULT_KEYWORDS
    locale: str = DEFAULT_LOCALE
    author: str = ""
    contact_email: Optional[str] = None
    version: str = DEFAULT_VERSION

    @classmethod
    def from_raw(cls, data: Optional[dict[str, Any]]) -> "SiteConfig":
        """Build a config where every missing or empty field takes its default."""
        data = data if isinstance(data, dict) else {}

        def pick(key: str, default: str) -> str:
            value = data.get(key)
            if value is None or not str(value).strip():
                return default
            return str(value).strip()

        name = pick("name", DEFAULT_SITE_NAME)
        icon = pick("icon", DEFAULT_ICON)
        contact = data.get("contactEmail") or data.get("contact_email")

        return cls(
            domain=pick("domain", DEFAULT_DOMAIN),
            name=name,
            description=pick("description", f"{name} - curated website directory"),
            icon=icon,
            image=pick("image", DEFAULT_ICON),
            keywords=pick("keywords", DEFAULT_KEYWORDS),
            locale=pick("locale", DEFAULT_LOCALE),
            author=pick("author", ""),
            contact_email=str(contact) if contact else None,
            version=pick("version", DEFAULT_VERSION),
        )
