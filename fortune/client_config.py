import tomllib

from pydantic import BaseModel, Field, ValidationError

from .limits import MIN_USERNAME_LENGTH, MAX_USERNAME_LENGTH

DEFAULT_CONFIG_PATH = "config.toml"


class ConfigError(Exception):
    pass


class ServerConfig(BaseModel):
    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)


class UserConfig(BaseModel):
    name: str = Field(min_length=MIN_USERNAME_LENGTH, max_length=MAX_USERNAME_LENGTH)


class ClientConfig(BaseModel):
    server: ServerConfig
    user: UserConfig

    model_config = {"frozen": True}

    @property
    def server_url(self) -> str:
        return f"http://{self.server.host}:{self.server.port}"


def load_config(path: str = DEFAULT_CONFIG_PATH) -> ClientConfig:
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{path} is missing or malformed: {e}")

    try:
        return ClientConfig.model_validate(raw)
    except ValidationError as e:
        problems = "; ".join(
            "{}: {}".format(".".join(str(part) for part in err["loc"]), err["msg"])
            for err in e.errors()
        )
        raise ConfigError(f"{path} is invalid: {problems}")
