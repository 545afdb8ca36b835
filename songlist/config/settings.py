"""Application settings loaded from environment variables via pydantic-settings.

Values are read from (highest priority first):

  1. Environment variables, e.g. ``CACHE_BACKEND=redis``
  2. A ``.env`` file in the working directory
  3. The defaults below

Field ``redis_url`` maps to env var ``REDIS_URL`` and so on.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """songlist application settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === NetEase Cloud Music ===
    netease_playlist_url: str = "https://music.163.com/api/v6/playlist/detail"
    netease_song_url: str = "https://music.163.com/api/v3/song/detail"
    http_timeout: float = 10.0

    # === Batch resolution ===
    # The song-detail endpoint accepts at most 500 ids per request.
    chunk_size: int = Field(default=500, ge=1, le=500)
    # 0 = launch every chunk at once.
    max_concurrent_chunks: int = Field(default=0, ge=0)

    # === Cache ===
    cache_backend: str = "memory"  # "memory" or "redis"
    cache_namespace: str = "net"
    cache_ttl: int = Field(default=0, ge=0)  # seconds; 0 = no expiry
    cache_max_size: int = Field(default=100_000, ge=1)
    redis_url: str = "redis://localhost:6379/0"
    redis_timeout: float = 2.0

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 8081
    app_env: str = "development"
    log_level: str = "INFO"
