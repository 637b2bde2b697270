"""Updater configuration model."""

import ipaddress
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

from common import constants


class RunMode(str, Enum):
    """What a run does to the hosts file."""

    UPDATE = "update"
    UNINSTALL = "uninstall"
    RESTORE = "restore"


class UpdaterConfig(BaseModel):
    """Settings consumed by the updater pipeline."""

    input_path: str = Field(
        default=constants.DEFAULT_HOSTS_PATH,
        description="Hosts file whose content is preserved above the generated block",
    )
    output_path: str = Field(
        default=constants.DEFAULT_HOSTS_PATH,
        description="Hosts file that receives the final content",
    )
    sentinel_address: str = Field(
        default=constants.DEFAULT_SENTINEL_ADDRESS,
        description="Address every blocked domain is mapped to",
    )
    blacklist_sources: str = Field(
        default=constants.DEFAULT_BLACKLIST_SOURCES,
        description="File listing blacklist source URLs, one per line",
    )
    whitelist_sources: str = Field(
        default=constants.DEFAULT_WHITELIST_SOURCES,
        description="File listing whitelist source URLs, one per line",
    )
    timeout: int = Field(
        default=constants.DEFAULT_HTTP_TIMEOUT,
        ge=0,
        le=constants.MAX_HTTP_TIMEOUT,
        description="Per-source request timeout in seconds (0 disables it)",
    )
    mode: RunMode = Field(default=RunMode.UPDATE, description="Run mode")
    apply_whitelist: bool = Field(
        default=False,
        description="Drop whitelisted domains from the generated block",
    )
    replace_generated_block: bool = Field(
        default=False,
        description="Replace a previous generated block instead of appending",
    )
    backup: bool = Field(
        default=False,
        description="Copy the output file to backup_path before overwriting it",
    )
    backup_path: Optional[str] = Field(
        default=None,
        description="Backup location (default: output_path + '.bak')",
    )

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "input_path": "/etc/hosts",
                "output_path": "/etc/hosts",
                "sentinel_address": "0.0.0.0",
                "blacklist_sources": "./lists/blacklist.sources",
                "whitelist_sources": "./lists/whitelist.sources",
                "timeout": 30,
                "mode": "update",
            }
        },
    )

    @field_validator("sentinel_address")
    @classmethod
    def check_sentinel(cls, value: str) -> str:
        ipaddress.ip_address(value)
        return value

    @model_validator(mode="after")
    def default_backup_path(self) -> "UpdaterConfig":
        if not self.backup_path:
            self.backup_path = self.output_path + constants.BACKUP_SUFFIX
        return self
