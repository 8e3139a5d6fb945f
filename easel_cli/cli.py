"""
Easel CLI - Main entry point.

Starts an interactive shape catalog session, optionally seeded from a YAML
configuration file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from easel_catalog import CatalogConfig
from easel_catalog.config import VALID_LOG_LEVELS
from easel_geometry import ShapeFactory
from easel_logging import LogEvent, create_logger

from .session import CatalogSession


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Easel - Interactive in-memory shape catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Empty catalog
  easel

  # Seed shapes and settings from YAML
  easel --config config/session.yaml

  # Scripted session
  printf '1\\ncircle\\n0 0\\n5\\n4\\n1\\n7\\n' | easel --log-level INFO
"""
    )

    parser.add_argument(
        "--config",
        help="Path to session config YAML"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=sorted(VALID_LOG_LEVELS),
        help="Override log level from config (default: WARNING)"
    )

    args = parser.parse_args(argv)

    try:
        config = CatalogConfig.from_yaml(args.config) if args.config else CatalogConfig()
        factory = ShapeFactory()
        catalog = config.build_catalog(factory)
    except (FileNotFoundError, ValueError) as e:
        create_logger("cli", level=logging.ERROR).error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load configuration",
            metadata={'config': args.config},
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    level = args.log_level or config.log_level
    logger = create_logger("session", level=getattr(logging, level))
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message=f"Session '{config.session_name}' configured",
        metadata={
            'config': args.config,
            'origin_tolerance': config.origin_tolerance,
            'log_level': level,
        }
    )
    if config.shapes:
        logger.info(
            event=LogEvent.CATALOG_SEEDED,
            message=f"Seeded {len(catalog)} shape(s)",
            metadata={'count': len(catalog)}
        )

    CatalogSession(catalog, factory, logger=logger).run()


if __name__ == '__main__':
    main()
