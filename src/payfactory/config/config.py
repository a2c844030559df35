import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class LoggingConfig(BaseModel):
    level: str = os.getenv("PAYFACTORY_LOG_LEVEL", "INFO")
    enqueue: bool = os.getenv("PAYFACTORY_LOG_ENQUEUE", "false").lower() == "true"


class AppConfig(BaseModel):
    logging: LoggingConfig = LoggingConfig()


config = AppConfig()
