"""
Configuration schemas for callback lists.

Typed Pydantic configurations; defaults give a working setup without any
override file.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Console logging settings"""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Root log level")
    show_time: bool = Field(True, description="Show timestamps")
    show_path: bool = Field(False, description="Show source file paths")
    compact_errors: bool = Field(True, description="Compact rich tracebacks")


class CallbackListConfig(BaseModel):
    """Settings applied to a CallbackList built from config"""

    label: Optional[str] = Field(None, description="Name used for the list's logger and repr")
    log_calls: bool = Field(False, description="Log every handler invocation at DEBUG level")


class Config(BaseModel):
    """Root configuration"""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    callbacks: CallbackListConfig = Field(default_factory=CallbackListConfig)
