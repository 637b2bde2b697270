"""Main updater service orchestration."""

import asyncio
import argparse
import sys
from datetime import datetime
from typing import List, Optional, Tuple
import structlog
from common import setup_logging, constants, PipelineException, HostsFileError
from schemas import RunMode, RunSummary, UpdaterConfig
from updater.config import load_settings
from updater.fetchers import download_and_merge_sources
from updater.hostsfile import (
    backup_hosts_file,
    build_final_hosts_file,
    count_blocked_websites,
    read_hosts_file,
    restore_hosts_file,
    strip_generated_block,
    write_hosts_file,
)
from updater.parsers import DomainListParser
from updater.sources import read_sources_from_file

logger = structlog.get_logger()


class UpdaterService:
    """Main updater orchestrator."""

    def __init__(self, config: UpdaterConfig):
        """
        Initialize updater service.

        Args:
            config: Validated updater settings
        """
        self.config = config
        self.stats = {
            "sources_fetched": 0,
            "sources_failed": 0,
        }

    async def collect_domains(self, category: str, sources_path: str) -> Tuple[List[str], int]:
        """
        Load, download and extract the domains of one category.

        Args:
            category: blacklist or whitelist
            sources_path: File listing the category's source URLs

        Returns:
            Tuple of (sorted unique domains, number of sources)
        """
        sources = read_sources_from_file(sources_path)
        logger.info("Collecting domains", category=category, sources=len(sources))

        blob = await download_and_merge_sources(
            sources, timeout=self.config.timeout, stats=self.stats
        )
        domains = DomainListParser(category).parse(blob)

        return domains, len(sources)

    async def update(self, now: Optional[datetime] = None) -> RunSummary:
        """
        Regenerate the hosts file from the configured sources.

        Args:
            now: Timestamp for the generated header (default: current time)

        Returns:
            Summary of the run
        """
        blacklist, blacklist_sources = await self.collect_domains(
            "blacklist", self.config.blacklist_sources
        )
        whitelist, whitelist_sources = await self.collect_domains(
            "whitelist", self.config.whitelist_sources
        )

        final_hosts = build_final_hosts_file(blacklist, whitelist, self.config, now=now)

        if self.config.backup:
            backup_hosts_file(self.config.output_path, self.config.backup_path)

        # Without replace_generated_block every run appends another block.
        written = write_hosts_file(self.config.output_path, final_hosts)

        blocked = count_blocked_websites(final_hosts, self.config.sentinel_address)

        return RunSummary(
            mode=RunMode.UPDATE,
            status="success" if written else "write_failed",
            output_path=self.config.output_path,
            blocked=blocked,
            sources={"blacklist": blacklist_sources, "whitelist": whitelist_sources},
            domains={"blacklist": len(blacklist), "whitelist": len(whitelist)},
            sources_failed=self.stats["sources_failed"],
        )

    def uninstall(self) -> RunSummary:
        """
        Remove the generated block from the output hosts file.

        Returns:
            Summary of the run
        """
        path = self.config.output_path
        status = "success"

        try:
            content = read_hosts_file(path)
        except HostsFileError as e:
            logger.error("Cannot uninstall, hosts file unreadable", path=path, error=str(e))
            return RunSummary(mode=RunMode.UNINSTALL, status="uninstall_failed", output_path=path)

        stripped = strip_generated_block(content)

        if stripped == content:
            logger.info("No generated block found", path=path)
        else:
            if self.config.backup:
                backup_hosts_file(path, self.config.backup_path)
            if not write_hosts_file(path, stripped):
                status = "write_failed"

        return RunSummary(
            mode=RunMode.UNINSTALL,
            status=status,
            output_path=path,
            blocked=count_blocked_websites(stripped, self.config.sentinel_address),
        )

    def restore(self) -> RunSummary:
        """
        Put the backup back in place of the output hosts file.

        Returns:
            Summary of the run
        """
        path = self.config.output_path
        restored = restore_hosts_file(self.config.backup_path, path)
        blocked = 0

        if restored:
            blocked = count_blocked_websites(read_hosts_file(path), self.config.sentinel_address)

        return RunSummary(
            mode=RunMode.RESTORE,
            status="success" if restored else "restore_failed",
            output_path=path,
            blocked=blocked,
        )

    async def run(self, now: Optional[datetime] = None) -> RunSummary:
        """
        Run the configured mode.

        Returns:
            Summary of the run

        Raises:
            PipelineException: If the run fails unexpectedly
        """
        logger.info(
            "Starting updater",
            mode=self.config.mode.value,
            output_path=self.config.output_path,
        )

        try:
            if self.config.mode is RunMode.UNINSTALL:
                summary = self.uninstall()
            elif self.config.mode is RunMode.RESTORE:
                summary = self.restore()
            else:
                summary = await self.update(now=now)

        except PipelineException:
            raise

        except Exception as e:
            logger.error(
                "Updater run failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise PipelineException(f"Updater run failed: {str(e)}") from e

        logger.info("Updater run complete", **summary.model_dump(mode="json"))
        return summary


def build_parser() -> argparse.ArgumentParser:
    """Command line interface of the updater."""
    parser = argparse.ArgumentParser(
        prog="aeigo",
        description="Merge remote blocklists into the local hosts file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {constants.VERSION} ({constants.RELEASE_DATE}) {constants.PROJECT_URL}",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML settings file",
    )
    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=[mode.value for mode in RunMode],
        help="Run mode (default: update)",
    )
    parser.add_argument("--input", dest="input_path", default=None, help="Hosts file to preserve")
    parser.add_argument("--output", dest="output_path", default=None, help="Hosts file to write")
    parser.add_argument(
        "--sentinel",
        dest="sentinel_address",
        default=None,
        help=f"Block address, must be an IP address (default: {constants.DEFAULT_SENTINEL_ADDRESS})",
    )
    parser.add_argument("--blacklist-sources", default=None, help="Blacklist sources file")
    parser.add_argument("--whitelist-sources", default=None, help="Whitelist sources file")
    parser.add_argument(
        "--timeout",
        type=int,
        default=None,
        help=f"Per-source timeout in seconds, 0 disables it (default: {constants.DEFAULT_HTTP_TIMEOUT})",
    )
    parser.add_argument(
        "--apply-whitelist",
        action="store_true",
        default=None,
        help="Drop whitelisted domains from the generated block",
    )
    parser.add_argument(
        "--replace-generated-block",
        action="store_true",
        default=None,
        help="Replace the previous generated block instead of appending a new one",
    )
    parser.add_argument(
        "--backup",
        action="store_true",
        default=None,
        help="Back up the output file before changing it",
    )
    parser.add_argument("--backup-path", default=None, help="Backup file location")
    parser.add_argument(
        "--log-level",
        type=str,
        default=constants.DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    parser.add_argument("--debug", action="store_true", help="Shortcut for --log-level DEBUG")
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Output logs in JSON format",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    global logger
    logger = setup_logging(
        level="DEBUG" if args.debug else args.log_level,
        service_name=constants.SERVICE_NAME,
        json_format=args.json_logs,
    )

    overrides = {
        "mode": args.mode,
        "input_path": args.input_path,
        "output_path": args.output_path,
        "sentinel_address": args.sentinel_address,
        "blacklist_sources": args.blacklist_sources,
        "whitelist_sources": args.whitelist_sources,
        "timeout": args.timeout,
        "apply_whitelist": args.apply_whitelist,
        "replace_generated_block": args.replace_generated_block,
        "backup": args.backup,
        "backup_path": args.backup_path,
    }

    try:
        config = load_settings(args.config, overrides)
        summary = asyncio.run(UpdaterService(config).run())

    except KeyboardInterrupt:
        logger.info("Updater interrupted by user")
        sys.exit(0)

    except Exception as e:
        logger.error("Updater failed", error=str(e))
        sys.exit(1)

    if summary.mode is RunMode.UPDATE:
        print(f"\ndone, {summary.blocked} websites blocked.\n")
    else:
        print(f"\n{summary.mode.value}: {summary.status}\n")
    sys.exit(0)


if __name__ == "__main__":
    main()
