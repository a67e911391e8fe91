#!/usr/bin/env python3
import sys
import argparse
import logging

from focus_mode.config import DOMAINS_FILE, HOSTS_PATH, LOG_FORMAT
from focus_mode.core.blocker import FocusBlocker
from focus_mode.file_handlers.block_list import BlockListHandler
from focus_mode.file_handlers.hosts_file import FileHostsStore, HostsFileHandler
from focus_mode.network.dns_handler import DNSHandler

COMMANDS = {
    "on": "Enable focus mode - block all configured domains",
    "off": "Disable focus mode - unblock all domains",
    "edit": "Edit the list of blocked domains",
    "status": "Show current status and blocked domains",
}


def parse_arguments(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(prog='focus', description='Block distracting websites while you work')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log more details (repeat for debug output)')
    parser.add_argument('--hosts-file', default=HOSTS_PATH, help='Hosts file to modify')
    parser.add_argument('--domains-file', default=DOMAINS_FILE, help='Domain list to read')
    sub = parser.add_subparsers(dest='command', required=True)
    for name, help_text in COMMANDS.items():
        sub.add_parser(name, help=help_text)
    return parser.parse_args(argv)


def configure_logging(verbosity):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()],
        force=True,
    )


def build_blocker(hosts_file, domains_file, dns_handler=None):
    dns_handler = dns_handler or DNSHandler()
    hosts_handler = HostsFileHandler(FileHostsStore(hosts_file), notifier=dns_handler.flush_dns_cache)
    return FocusBlocker(hosts_handler, BlockListHandler(domains_file))


def main(argv=None, blocker=None):
    """Main entry point, returns the process exit code"""
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    if blocker is None:
        blocker = build_blocker(args.hosts_file, args.domains_file)

    try:
        blocker.block_list_handler.ensure_block_list()
    except OSError as e:
        print(f"Error creating focus directory: {e}", file=sys.stderr)
        return 1

    try:
        getattr(blocker, args.command)()
    except PermissionError:
        print("Permission denied. Try running with sudo:", file=sys.stderr)
        print("  sudo focus on", file=sys.stderr)
        print("  sudo focus off", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logging.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
