"""
Command-line demonstration of the configuration provider.

Loads application config, sets up logging, builds the configured settings
store and prints each typed setting to standard output.

Usage:
    python main.py --env dev
    python main.py --store-url sqlite:///configuration_store.db
    python main.py --create-table --set AppSettings:NotifyOnUpload=False
"""

import argparse
import sys
from datetime import date
from typing import Optional, Sequence, TextIO

from confprovider.config.settings import deep_merge, load_config
from confprovider.providers.base_provider import ConfigurationProviderBase
from confprovider.providers.factory import build_provider
from confprovider.stores.base_store import SettingsStore
from confprovider.stores.database_store import DatabaseSettingsStore
from confprovider.utils.exceptions import ConfigurationProviderError
from confprovider.utils.logger import get_logger, setup_logging


def long_date(value: date) -> str:
    """Format a date as e.g. "Monday, October 1, 1"."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def print_settings(provider: ConfigurationProviderBase, out: TextIO = sys.stdout) -> None:
    """Write every typed setting, one per line."""
    print(provider.email_templates_path, file=out)
    print(provider.payment_gateway_service_url, file=out)
    print(long_date(provider.fiscal_year_start), file=out)
    print(provider.notify_on_upload, file=out)

    connection = provider.db_connection_information
    print(connection.name, file=out)
    print(connection.connection_string, file=out)
    print(connection.provider_name, file=out)


def apply_admin_actions(store: SettingsStore, create_table: bool, assignments: Sequence[str]) -> None:
    """Create the settings table and write KEY=VALUE assignments."""
    if create_table:
        if not isinstance(store, DatabaseSettingsStore):
            raise ConfigurationProviderError(f"--create-table needs a database store, not {store}")
        store.create_table()
    for assignment in assignments:
        key, sep, value = assignment.partition('=')
        if not sep:
            raise ConfigurationProviderError(f"Expected SECTION:KEY=VALUE, got {assignment!r}")
        store.set(key, value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print every typed application setting read from the configured store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--env", type=str, default=None,
                        help="Config environment (default: $CONFIG_PROVIDER_ENV or dev)")
    parser.add_argument("--config-dir", type=str, default=None,
                        help="Directory holding base.yaml and <env>.yaml")
    parser.add_argument("--store-url", type=str, default=None,
                        help="SQLAlchemy URL of the settings database, overrides the config")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Log level, overrides the config")
    parser.add_argument("--create-table", action="store_true",
                        help="Create the settings table before reading (database stores only)")
    parser.add_argument("--set", dest="assignments", action="append", default=[], metavar="SECTION:KEY=VALUE",
                        help="Store a setting before reading; may be repeated")
    return parser


def main(argv: Optional[Sequence[str]] = None, out: TextIO = sys.stdout) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logger = get_logger(__name__)

    config = load_config(args.env, config_dir=args.config_dir)
    overrides = {}
    if args.store_url:
        overrides['store'] = {'kind': 'database', 'url': args.store_url}
    if args.log_level:
        overrides['logging'] = {'level': args.log_level}
    if overrides:
        config = type(config)(**deep_merge(config.model_dump(), overrides))

    setup_logging(
        level=config.logging.level,
        log_file=config.logging.file,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        format_type=config.logging.format,
        console=config.logging.console
    )
    logger.info(f"Configuration provider started in {config.environment} environment")

    try:
        provider = build_provider(config, load=False)
        apply_admin_actions(provider.store, args.create_table, args.assignments)
        provider.store.load()
        print_settings(provider, out)
    except ConfigurationProviderError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except Exception as e:
        logger.error(f"Fatal error reading configuration: {e}", exc_info=True)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
