from pydantic_settings import BaseSettings

PUSHOVER_URI = "https://api.pushover.net/1/messages.json"


class Settings(BaseSettings):
    uri: str = PUSHOVER_URI
    token: str = ""

    # HTTP transport
    timeout: float = 15
    verify_tls: bool = True
    follow_redirects: bool = True
    verbose: bool = False

    model_config = {"env_prefix": "PUSHOVER_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
