# navhub/config.py

import os
from typing import Optional
import yaml
from pydantic import BaseModel, Field
import anyio


class LibraryConfig(BaseModel):
    path: str = "./data"
    groups_dir: str = "groups"
    group_metadata_file: str = "_group.json"
    site_file: str = "config.json"

    @property
    def groups_path(self) -> str:
        return os.path.join(self.path, self.groups_dir)

    @property
    def site_path(self) -> str:
        return os.path.join(self.path, self.site_file)


class SearchConfig(BaseModel):
    """Configuration for the normalized search view cache."""
    cache_size: int = Field(default=4096, ge=1)


class RecommendationConfig(BaseModel):
    """Configuration for related-item scoring."""
    rare_tag_weight: float = 8.0
    common_tag_weight: float = 5.0
    coverage_weight: float = 6.0
    same_group_bonus: float = 4.0
    diversity_penalty: float = 0.05
    default_limit: int = Field(default=6, ge=0)


class APIConfig(BaseModel):
    """Configuration for the read-only JSON API."""
    host: str = "127.0.0.1"
    port: int = 8010
    cors_origins: list[str] = Field(default_factory=lambda: [
        "http://localhost:5173",   # Vite dev server
        "http://127.0.0.1:5173",   # Vite dev server (IP variant)
        "http://localhost:4173",   # Vite preview
    ])
    cors_methods: list[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_headers: list[str] = Field(default_factory=lambda: ["Content-Type", "X-Request-ID"])
    debug: bool = False


class Config(BaseModel):
    library: LibraryConfig = Field(default_factory=LibraryConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    recommendations: RecommendationConfig = Field(default_factory=RecommendationConfig)
    api: APIConfig = Field(default_factory=APIConfig)

    @property
    def data_path(self) -> str:
        return self.library.path


def _get_env_value(name: str) -> Optional[str]:
    """Get environment variable value, treating empty as unset."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _get_env_int(name: str) -> Optional[int]:
    value = _get_env_value(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer") from e


def _apply_env_overrides(config: Config) -> Config:
    api_host = _get_env_value("API_HOST")
    if api_host is not None:
        config.api.host = api_host

    api_port = _get_env_int("API_PORT")
    if api_port is not None:
        config.api.port = api_port

    data_path = _get_env_value("DATA_PATH")
    if data_path is not None:
        config.library.path = data_path

    return config


async def load_config(config_path: Optional[str] = None) -> Config:
    """Load configuration from YAML file (async)."""
    path = anyio.Path(config_path or "configs/settings.yaml")
    if await path.exists():
        text = await path.read_text(encoding="utf-8")
        data = await anyio.to_thread.run_sync(yaml.safe_load, text)
        config = Config(**data) if data else Config()
        return _apply_env_overrides(config)

    return _apply_env_overrides(Config())

