from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List

class Settings(BaseSettings):
    """Application settings."""

    # JMA bosai (AMeDAS) settings
    jma_base_url: str = "https://www.jma.go.jp"
    amedas_latest_time_path: str = "/bosai/amedas/data/latest_time.txt"
    amedas_map_path: str = "/bosai/amedas/data/map/{key}.json"

    # Outbound request settings (single attempt, no retries)
    request: Dict = {
        "timeout": 30
    }

    # Number of characters of an unparseable body kept for diagnostics
    malformed_prefix_length: int = 200

    # AMeDAS quality flags accepted as a usable value (0 = normal)
    valid_quality_flags: List[int] = [0]

    # Static reference data
    airports_file: str = "data/airports.json"
    default_airport_id: str = "haneda"

    # Prefix for the in-memory route cache (static airport data only)
    cache_prefix: str = "amedas_wind"

    cors_origins: List[str] = ["*"]

    @property
    def latest_time_url(self) -> str:
        return f"{self.jma_base_url}{self.amedas_latest_time_path}"

    def snapshot_url(self, key: str) -> str:
        """Provider URL for one 10-minute map snapshot."""
        return f"{self.jma_base_url}{self.amedas_map_path.format(key=key)}"

    model_config = SettingsConfigDict(
        env_prefix="amedas_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
