import argparse
import logging
import sys
from typing import List, Optional

from tasador.connectors.json_file import JsonFileConnector
from tasador.core.config import get_settings
from tasador.core.errors import TasadorError
from tasador.core.logging_config import setup_logging
from tasador.services.catalog import write_listings

logger = logging.getLogger(__name__)


def normalize_catalog(input_path: Optional[str] = None, output_path: Optional[str] = None) -> int:
    settings = get_settings()
    input_path = input_path or settings.raw_catalog_path
    output_path = output_path or settings.catalog_path

    logger.info("Normalizing catalog %s", input_path)
    connector = JsonFileConnector(input_path)
    # Build the full result before writing so a bad input never leaves partial output.
    normalized = [connector.normalize_fields(raw) for raw in connector.fetch_listings()]
    write_listings(output_path, normalized)
    logger.info("Saved %s normalized listings to %s", len(normalized), output_path)
    return len(normalized)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Normalize a raw car catalog into marca/modelo/version.")
    parser.add_argument("--input", dest="input_path", help="raw catalog JSON (default: RAW_CATALOG_PATH)")
    parser.add_argument("--output", dest="output_path", help="normalized catalog JSON (default: CATALOG_PATH)")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    try:
        normalize_catalog(args.input_path, args.output_path)
    except TasadorError as exc:
        logger.error("Normalization failed: %s", exc.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
