from payfactory.config.config import AppConfig, LoggingConfig, config

__all__ = ["AppConfig", "LoggingConfig", "config"]
