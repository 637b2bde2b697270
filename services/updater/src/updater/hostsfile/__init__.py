"""Hosts file generation package."""

from updater.hostsfile.builder import (
    build_final_hosts_file,
    count_blocked_websites,
    generated_header,
    read_hosts_file,
    strip_generated_block,
)
from updater.hostsfile.writer import write_hosts_file
from updater.hostsfile.backup import backup_hosts_file, restore_hosts_file

__all__ = [
    "build_final_hosts_file",
    "count_blocked_websites",
    "generated_header",
    "read_hosts_file",
    "strip_generated_block",
    "write_hosts_file",
    "backup_hosts_file",
    "restore_hosts_file",
]
