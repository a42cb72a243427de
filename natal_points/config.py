from functools import lru_cache
from typing import Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HouseSystem = Literal["P","K","W","R","C","B","M","O","X"]  # Placidus, Koch, Whole Sign, ...
NodeType = Literal["true","mean"]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    # Ephemeriden
    se_ephe_path: str | None = None            # z.B. /opt/ephe; ohne Pfad rechnet swe mit Moshier
    house_system: HouseSystem = "P"
    node_type: NodeType = "true"

    # Server / Doku
    public_base_url: str | None = None
    render_external_hostname: str | None = None
    port: int = 3000
    log_level: str = "info"

    @field_validator("se_ephe_path", "public_base_url", "render_external_hostname")
    @classmethod
    def strip_empty(cls, v: str | None) -> str | None:
        v = (v or "").strip()
        return v or None

    @property
    def runtime_base_url(self) -> str | None:
        """Öffentliche URL: PUBLIC_BASE_URL, sonst aus dem Render-Hostnamen gebildet."""
        if self.public_base_url:
            return self.public_base_url.rstrip("/")
        if self.render_external_hostname:
            return f"https://{self.render_external_hostname}"
        return None

@lru_cache
def get_settings() -> Settings:
    return Settings()
