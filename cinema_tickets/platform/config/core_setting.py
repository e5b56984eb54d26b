from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Tickets'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Logs args/return values and writes log files when True

    # Ticket price file (KEY=value lines: INFANT_PRICE, CHILD_PRICE, ADULT_PRICE)
    TICKET_CONFIG_PATH: Optional[str] = None

    @field_validator('TICKET_CONFIG_PATH', mode='before')
    @classmethod
    def resolve_ticket_config_path(cls, v: Optional[str]) -> Optional[str]:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            path = Path(v)
            return str(path if path.is_absolute() else _PROJECT_ROOT / path)
        return v


settings = Settings()  # type: ignore
