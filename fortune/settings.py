from pydantic import BaseModel, ValidationError
import os
from typing import Literal, Mapping, Optional
from urllib.parse import quote
from dotenv import load_dotenv

# Load .env if present at project root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
env_path = os.path.join(ROOT, ".env")
if os.path.exists(env_path):
    load_dotenv(env_path)


class ConfigError(Exception):
    pass


_REQUIRED_ENV = (
    "FORTUNE_DB_HOST",
    "FORTUNE_DB_PORT",
    "FORTUNE_DB_NAME",
    "FORTUNE_DB_USER",
    "FORTUNE_DB_PASSWORD_FILE",
)


class Settings(BaseModel):
    DB_HOST: str
    DB_PORT: int
    DB_NAME: str
    DB_USER: str
    DB_PASSWORD: str
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    model_config = {"frozen": True}

    @property
    def database_url(self) -> str:
        return "postgresql+psycopg2://{}:{}@{}:{}/{}".format(
            quote(self.DB_USER, safe=""),
            quote(self.DB_PASSWORD, safe=""),
            self.DB_HOST,
            self.DB_PORT,
            self.DB_NAME,
        )


def _read_password(path: str) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read().strip()
    except OSError as e:
        raise ConfigError(f"cannot read FORTUNE_DB_PASSWORD_FILE {path!r}: {e}")


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the process environment (or the given mapping).

    Raises ConfigError when a variable is missing or malformed or the
    password file can't be read.
    """
    env = os.environ if environ is None else environ
    missing = [name for name in _REQUIRED_ENV if not env.get(name)]
    if missing:
        raise ConfigError(f"missing environment variables: {', '.join(missing)}")

    try:
        return Settings(
            DB_HOST=env["FORTUNE_DB_HOST"],
            DB_PORT=env["FORTUNE_DB_PORT"],
            DB_NAME=env["FORTUNE_DB_NAME"],
            DB_USER=env["FORTUNE_DB_USER"],
            DB_PASSWORD=_read_password(env["FORTUNE_DB_PASSWORD_FILE"]),
            HOST=env.get("HOST", "0.0.0.0"),
            PORT=env.get("PORT", "8080"),
            LOG_LEVEL=env.get("LOG_LEVEL", "INFO").upper(),
        )
    except ValidationError as e:
        raise ConfigError(f"invalid settings: {e}")
