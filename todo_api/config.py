from typing import List, Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Todo API"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"  # Environment: "dev", "staging", "prod"

    # Database (MongoDB)
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "todo-nextjs-app"
    MONGODB_USERS_COLLECTION: str = "users"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # HTTP
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # ==========================================================================
    # Todo behaviour
    # ==========================================================================

    # Create the todo-list document on first add for an unseen userId
    TODO_UPSERT_USERS: bool = True
    # Answer 404 when toggle/replace/delete matches no task (default: silent 200)
    TODO_STRICT_NOT_FOUND: bool = False
    # "full": PUT writes every mutable field, omitted ones as null
    # "partial": PUT writes only the supplied fields
    TODO_REPLACE_MODE: Literal["full", "partial"] = "full"

    # Security
    PASSWORD_BCRYPT_ROUNDS: int = 12

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
