#!/usr/bin/env python3
import logging
import platform
import subprocess

FLUSH_COMMANDS = {
    "darwin": [
        ["dscacheutil", "-flushcache"],
        ["killall", "-HUP", "mDNSResponder"],
    ],
    "linux": [
        ["resolvectl", "flush-caches"],
    ],
    "windows": [
        ["ipconfig", "/flushdns"],
    ],
}


class DNSHandler:
    """Asks the OS resolver to drop cached lookups after the hosts file changes.

    Flushing is best effort: exit codes are not inspected and a missing
    command is only logged.
    """

    def __init__(self, os_type=None, runner=subprocess.run):
        self.os_type = (os_type or platform.system()).lower()
        self.runner = runner

    def flush_commands(self):
        return FLUSH_COMMANDS.get(self.os_type, [])

    def flush_dns_cache(self):
        commands = self.flush_commands()
        if not commands:
            logging.debug(f"No DNS cache flush known for {self.os_type}")
            return

        for cmd in commands:
            try:
                self.runner(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
                logging.debug(f"Ran DNS flush command: {' '.join(cmd)}")
            except OSError as e:
                logging.debug(f"DNS flush command {cmd[0]} failed: {e}")
