from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Skill
    skill: str = ""  # Import path, e.g. "my_skill.lambda_function:skill"
    skill_path: str = "/alexa"
    validate_requests: bool = True  # Only disable for local development

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SKILL_GATEWAY_",
        "extra": "ignore",
    }


settings = Settings()
