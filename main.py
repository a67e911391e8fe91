#!/usr/bin/env python3
"""
Focus - Block distracting websites while you work.

Blocking is done by appending a marked section of loopback entries to the
system hosts file; turning focus mode off removes exactly that section.
The domains come from ~/.focus/domains.txt, one per line.

Usage:
    sudo python main.py on      # Block every configured domain
    sudo python main.py off     # Unblock them again
    python main.py edit         # Edit the domain list in $EDITOR
    python main.py status       # Show whether focus mode is active
"""

from focus_mode.utils.cli import run

if __name__ == "__main__":
    run()
