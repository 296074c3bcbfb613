from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "BOOKER_"}

    base_url: str = "https://restful-booker.herokuapp.com"
    timeout: float = 30.0
    log_level: str = "INFO"
    live_tests: bool = False
