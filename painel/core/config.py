from datetime import tzinfo
from functools import lru_cache
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # APP
    APP_NAME: str = "Painel de Ganhos API"
    ENV: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE_PATH: Optional[str] = None

    # Calendário local usado pelos filtros "Hoje" e "Mês" (None = fuso do host)
    TIMEZONE: Optional[str] = None

    # Canvas do gráfico (mesmas constantes do SVG do painel)
    CHART_WIDTH: float = 1000
    CHART_HEIGHT: float = 180
    CHART_PADDING: float = 20

    # CORS (aceita string separada por vírgulas no .env)
    CORS_ORIGINS: Optional[str] = None

    @field_validator("TIMEZONE")
    @classmethod
    def _known_timezone(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Fuso horário desconhecido: {v}") from exc
        return v

    @field_validator("CHART_WIDTH", "CHART_HEIGHT")
    @classmethod
    def _positive_canvas(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Dimensões do gráfico devem ser positivas.")
        return v

    @model_validator(mode="after")
    def _padding_fits_canvas(self) -> "Settings":
        if self.CHART_PADDING < 0:
            raise ValueError("CHART_PADDING não pode ser negativo.")
        if 2 * self.CHART_PADDING >= min(self.CHART_WIDTH, self.CHART_HEIGHT):
            raise ValueError("CHART_PADDING não deixa área desenhável no gráfico.")
        return self

    @property
    def TZINFO(self) -> Optional[tzinfo]:
        return ZoneInfo(self.TIMEZONE) if self.TIMEZONE else None

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        v = self.CORS_ORIGINS
        if not v:
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # Pydantic v2 settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignora chaves extras no .env
    )

@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
