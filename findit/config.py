from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Directories scanned for vuln-code-snippet markers
    challenge_source_dirs: list[str] = ["data/static/vulncode"]
    codefixes_dir: str = "data/static/codefixes"

    # Localization
    i18n_dir: str = "data/i18n"
    default_locale: str = "en"

    class Config:
        env_file = ".env"


settings = Settings()

# Ensure data directory exists
data_dir = Path("data")
data_dir.mkdir(exist_ok=True)
