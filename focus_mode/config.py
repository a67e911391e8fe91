#!/usr/bin/env python3
import platform
from pathlib import Path

SYSTEM = platform.system()

HOSTS_PATH = Path(r"C:\Windows\System32\drivers\etc\hosts") if SYSTEM == "Windows" else Path("/etc/hosts")

FOCUS_DIR = Path.home() / ".focus"
DOMAINS_FILE = FOCUS_DIR / "domains.txt"

# Markers must stay byte-identical, existing hosts files depend on them
BLOCK_MARKER_START = "# FOCUS-MODE-BLOCK START"
BLOCK_MARKER_END = "# FOCUS-MODE-BLOCK END"
REDIRECT_ADDRESS = "127.0.0.1"

DEFAULT_DOMAINS_HEADER = [
    "# Add one domain per line",
    "# Lines starting with # are comments",
    "# Example:",
    "# instagram.com",
    "# twitter.com",
]
DEFAULT_DOMAINS = [
    "instagram.com",
    "www.instagram.com",
    "x.com",
    "www.x.com",
    "twitter.com",
    "www.twitter.com",
]

DEFAULT_EDITOR = "vim"

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
