"""
Logging configuration for the vendor refunds engine
"""

from dataclasses import dataclass
from typing import Any, Dict
from pydantic import BaseModel, Field


@dataclass
class FileHandlerConfig:
    """File handler configuration"""

    enabled: bool = False
    log_dir: str = "logs"
    max_file_size: int = 10485760  # 10MB
    backup_count: int = 5
    app_log_enabled: bool = True
    error_log_enabled: bool = True


@dataclass
class ConsoleHandlerConfig:
    """Console handler configuration"""

    enabled: bool = True
    level: str = "INFO"


class LoggingConfig(BaseModel):
    """Complete logging configuration"""

    level: str = "INFO"
    format: str = "console"  # json or console

    # Handler configurations
    file: FileHandlerConfig = Field(default_factory=FileHandlerConfig)
    console: ConsoleHandlerConfig = Field(default_factory=ConsoleHandlerConfig)

    @classmethod
    def from_settings(cls, logging_settings) -> "LoggingConfig":
        """Build a logging config from LoggingSettings"""
        return cls(
            level=logging_settings.LOG_LEVEL,
            format=logging_settings.LOG_FORMAT,
            file=FileHandlerConfig(
                enabled=logging_settings.LOG_TO_FILE,
                log_dir=logging_settings.LOG_DIR,
            ),
            console=ConsoleHandlerConfig(level=logging_settings.LOG_LEVEL),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "level": self.level,
            "format": self.format,
            "file": {
                "enabled": self.file.enabled,
                "log_dir": self.file.log_dir,
                "max_file_size": self.file.max_file_size,
                "backup_count": self.file.backup_count,
                "app_log_enabled": self.file.app_log_enabled,
                "error_log_enabled": self.file.error_log_enabled,
            },
            "console": {
                "enabled": self.console.enabled,
                "level": self.console.level,
            },
        }
