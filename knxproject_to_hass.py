"""Read a KNX project file and generate Home Assistant or linknx configuration"""
import argparse
import logging
import sys
from pathlib import Path

from ets_to_hass import __version__
from ets_to_hass.config import load_config
from ets_to_hass.converter import ProjectConverter
from ets_to_hass.exceptions import ConverterError
from ets_to_hass.utils.addressing import ADDRESS_STYLES
from ets_to_hass.utils.config_validator import LOG_LEVELS, OUTPUT_FORMATS

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='Reads a KNX project file and writes Home Assistant or linknx configuration to stdout')
    parser.add_argument("file_path", type=Path, help='Path to the input KNX project (.knxproj)')
    parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS, default=None,
                        help="Output format (default: homeass)")
    parser.add_argument("-a", "--addr", choices=list(ADDRESS_STYLES), default=None,
                        help="Group address style, overrides the project setting")
    parser.add_argument("-n", "--full-name", action="store_true", default=None,
                        help="Add building part, floor and room to entity names")
    parser.add_argument("-k", "--ha-knx", action="store_true", default=None,
                        help="Include level knx in output file")
    parser.add_argument("-l", "--hook", "--lambda", dest="hook", type=str, default=None,
                        help="Python file with a customize(model) function")
    parser.add_argument("-t", "--trace", choices=LOG_LEVELS, default=None,
                        help="Log level (default: info)")
    parser.add_argument("--knxPW", type=str, default=None, help="Password for KNX project file if protected")
    parser.add_argument("-c", "--config", type=str, default=None, help="JSON file with default options")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main function"""
    args = parse_args(argv)
    try:
        config = load_config(args.config).merged(
            output_format=args.format,
            address_style=args.addr,
            full_name=args.full_name,
            wrap_knx=args.ha_knx,
            hook_path=args.hook,
            log_level=args.trace,
            password=args.knxPW,
        )
    except ConverterError as err:
        logging.basicConfig(level=logging.INFO, stream=sys.stderr)
        logger.error("%s", err)
        return 1

    # log to stderr, so that redirecting stdout captures only generated data
    logging.basicConfig(level=config.logging_level, stream=sys.stderr,
                        format='%(levelname)s %(name)s: %(message)s')
    logger.debug("options: %s", config)

    try:
        output = ProjectConverter(config).convert(args.file_path)
    except ConverterError as err:
        logger.error("%s", err)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
