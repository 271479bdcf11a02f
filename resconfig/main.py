#!/usr/bin/env python3
# Path: resconfig/main.py
"""
resconfig - Main Entry Point

Parses Android resource folder names and picks the folders that best
match a device configuration.

Data Flow:
    INPUT:  Folder names, device profiles (dictionary/devices/*.yaml)
    PROCESS: Qualifier parsing, best-match resolution
    OUTPUT: Readable descriptions, matches, JSON reports

Usage:
    resconfig parse values-en-rUS drawable-hdpi
    resconfig match --reference values-en-rUS-xhdpi values values-en values-fr
    resconfig match --device nexus_5 --all drawable drawable-hdpi drawable-xxhdpi
    resconfig devices
"""

import argparse
import json
import sys
from typing import Optional

from .config_loader import ConfigLoader
from .configuration.folder_configuration import FolderConfiguration
from .constants import (
    RES_QUALIFIER_SEP,
    ResourceFolderType,
    STATUS_OK, STATUS_FAIL, STATUS_INFO,
    MENU_SEPARATOR,
)
from .core.logger import setup_ipo_logging, get_output_logger
from .devices import DeviceLoader
from .matcher import BestMatchResolver, ResourceFolder


def initialize_system() -> ConfigLoader:
    """
    Load configuration and set up logging.

    Returns:
        ConfigLoader instance

    Raises:
        ValueError: If configuration is invalid
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', False)
    )

    return config


def folder_type_of(folder_name: str, config: ConfigLoader) -> ResourceFolderType:
    """Return the resource type of a folder name, or the configured default."""
    base = folder_name.split(RES_QUALIFIER_SEP, 1)[0]
    try:
        return ResourceFolderType(base)
    except ValueError:
        return config.get('default_folder_type', ResourceFolderType.VALUES)


def describe(configuration: FolderConfiguration, config: ConfigLoader) -> FolderConfiguration:
    """Return the configuration to display, normalized if configured."""
    if not config.get('normalize_output', False):
        return configuration
    normalized = FolderConfiguration()
    normalized.set(configuration)
    normalized.normalize()
    return normalized


def run_parse(folder_names: list[str], config: ConfigLoader) -> int:
    """
    Print the parsed configuration of each folder name.

    Args:
        folder_names: Folder names to parse
        config: Configuration loader

    Returns:
        Exit code (1 if any name could not be parsed)
    """
    logger = get_output_logger('parse')
    failures = 0

    for folder_name in folder_names:
        configuration = FolderConfiguration.get_config_for_folder(folder_name)
        if configuration is None:
            print(f"{STATUS_FAIL} {folder_name}: not a valid resource folder name")
            logger.warning(f"Invalid folder name: {folder_name}")
            failures += 1
            continue

        shown = describe(configuration, config)
        print(f"{STATUS_OK} {folder_name}")
        print(f"  Display: {shown.to_display_string()}")
        print(f"  Folder:  {shown.get_folder_name(folder_type_of(folder_name, config))}")

    logger.info(f"Parsed {len(folder_names) - failures}/{len(folder_names)} folder names")
    return 1 if failures else 0


def resolve_reference(
    args: argparse.Namespace,
    config: ConfigLoader
) -> Optional[FolderConfiguration]:
    """
    Build the reference configuration from --reference or --device.

    Returns:
        FolderConfiguration, or None if it cannot be built
    """
    if args.reference is not None:
        reference = FolderConfiguration.get_config_for_folder(args.reference)
        if reference is None:
            print(f"{STATUS_FAIL} Invalid reference configuration: {args.reference}")
        return reference

    loader = DeviceLoader(config.get('devices_dir'))
    device = loader.get_device(args.device)
    if device is None:
        print(f"{STATUS_FAIL} Unknown device: {args.device}")
        return None
    return device.to_configuration()


def run_match(args: argparse.Namespace, config: ConfigLoader) -> int:
    """
    Print the candidates that best match the reference.

    Args:
        args: Parsed arguments (reference or device, candidates, flags)
        config: Configuration loader

    Returns:
        Exit code (1 if the reference is invalid or nothing matches)
    """
    logger = get_output_logger('match')

    reference = resolve_reference(args, config)
    if reference is None:
        return 1

    candidates = []
    for name in args.candidates:
        folder = ResourceFolder.from_name(name)
        if folder is None:
            print(f"{STATUS_INFO} Skipping invalid folder name: {name}")
            logger.warning(f"Skipping invalid candidate: {name}")
            continue
        candidates.append(folder)

    result = BestMatchResolver().resolve(reference, candidates)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0 if result.matches else 1

    print(f"{STATUS_INFO} Reference: {reference.to_display_string()}")

    if not result.matches:
        print(f"{STATUS_FAIL} No candidate matches the reference")
        return 1

    if args.all:
        for match in result.matches:
            print(f"{STATUS_OK} {match}")
    else:
        print(f"{STATUS_OK} {result.best_match}")
        if result.is_ambiguous:
            print(f"{STATUS_INFO} {len(result.matches)} candidates match equally well")

    logger.info(
        f"Resolved {result.candidate_count} candidates to {len(result.matches)} match(es)"
    )
    return 0


def run_devices(config: ConfigLoader) -> int:
    """
    List the available device profiles.

    Returns:
        Exit code (0 for success)
    """
    loader = DeviceLoader(config.get('devices_dir'))
    devices = loader.load_all()

    if not devices:
        print(f"{STATUS_INFO} No device profiles found in {loader.devices_path}")
        return 0

    print(f"{STATUS_OK} Found {len(devices)} device profiles:\n")
    print(f"  {'ID':<14} {'Name':<22} {'Configuration'}")
    print(f"  {MENU_SEPARATOR}")

    for device_id in sorted(devices):
        device = devices[device_id]
        print(
            f"  {device_id:<14} {device.name[:22]:<22} "
            f"{device.to_configuration().get_unique_key()}"
        )

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='resconfig',
        description='resconfig - Android resource configuration matcher',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  resconfig parse values-en-rUS drawable-land-hdpi
  resconfig match --reference values-en-rUS-xhdpi values values-en values-fr
  resconfig match --device nexus_5 --all drawable drawable-hdpi
  resconfig devices
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    parse_cmd = subparsers.add_parser('parse', help='Describe resource folder names')
    parse_cmd.add_argument('folders', nargs='+', help='Folder names to parse')

    match_cmd = subparsers.add_parser('match', help='Find the best matching folders')
    source = match_cmd.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--reference', '-r',
        type=str,
        help='Reference folder name, e.g. values-en-rUS-port-xhdpi-v21'
    )
    source.add_argument(
        '--device', '-d',
        type=str,
        help='Reference device profile ID'
    )
    match_cmd.add_argument(
        '--all', '-a',
        action='store_true',
        help='Print every equally good match'
    )
    match_cmd.add_argument(
        '--json',
        action='store_true',
        help='Print the full match report as JSON'
    )
    match_cmd.add_argument('candidates', nargs='+', help='Candidate folder names')

    subparsers.add_parser('devices', help='List device profiles')

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for resconfig.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for no match or invalid input)
    """
    args = build_parser().parse_args(argv)

    try:
        config = initialize_system()

        if args.command == 'parse':
            return run_parse(args.folders, config)
        elif args.command == 'match':
            return run_match(args, config)
        else:
            return run_devices(config)

    except ValueError as e:
        print(f"\n{STATUS_FAIL} Error: {e}")
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]")
        return 130


if __name__ == '__main__':
    sys.exit(main())
