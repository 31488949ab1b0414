import os
from typing import List, Literal, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, field_validator

load_dotenv()


PG_ENV = {
    "host": "PG_HOST",
    "port": "PG_PORT",
    "dbname": "PG_DB",
    "user": "PG_USER",
    "password": "PG_PASSWORD",
}


class PostgresConfig(BaseModel):
    host: str
    port: int
    dbname: str
    user: str
    password: SecretStr

    @classmethod
    def from_env(cls) -> "PostgresConfig":
        return cls(**{field: os.environ[var] for field, var in PG_ENV.items()})

    def connect_kwargs(self) -> dict:
        kwargs = self.model_dump()
        kwargs["password"] = self.password.get_secret_value()
        return kwargs


class AppSettings(BaseModel):
    checkpointer: Literal["memory", "postgres"] = "memory"
    thread_id: str = "signup_demo"
    encrypt_keys: List[str] = Field(default_factory=lambda: ["values", "event"])
    log_level: str = "INFO"
    postgres: Optional[PostgresConfig] = None

    @field_validator("encrypt_keys", mode="before")
    @classmethod
    def split_keys(cls, v):
        if isinstance(v, str):
            return [k.strip() for k in v.split(",") if k.strip()]
        return v

    @classmethod
    def from_env(cls) -> "AppSettings":
        backend = os.getenv("SIGNUP_CHECKPOINTER", "memory").strip().lower()
        data = {
            "checkpointer": backend,
            "thread_id": os.getenv("SIGNUP_THREAD_ID", "signup_demo"),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
        }
        if "SIGNUP_ENCRYPT_KEYS" in os.environ:
            data["encrypt_keys"] = os.environ["SIGNUP_ENCRYPT_KEYS"]
        if backend == "postgres":
            data["postgres"] = PostgresConfig.from_env()
        return cls(**data)

    def run_config(self) -> dict:
        return {
            "configurable": {
                "thread_id": self.thread_id,
                "encrypt_keys": list(self.encrypt_keys),
            }
        }
