#!/usr/bin/env python3
import os
import logging
import subprocess

from focus_mode.config import DEFAULT_EDITOR


class FocusBlocker:
    """Runs the focus commands on top of the hosts and block list handlers.

    The hosts handler performs no state checks of its own, so every guard
    (already active, nothing configured, not active) lives here.
    """

    def __init__(self, hosts_handler, block_list_handler, editor=None,
                 runner=subprocess.run, out=print):
        self.hosts_handler = hosts_handler
        self.block_list_handler = block_list_handler
        self.editor = editor
        self.runner = runner
        self.out = out

    def on(self):
        """Enable focus mode"""
        if self.hosts_handler.is_active():
            self.out("Focus mode is already active.")
            return

        domains = self.block_list_handler.read_block_list()
        if not domains:
            self.out("No domains configured. Run 'focus edit' to add domains.")
            return

        self.hosts_handler.apply_block(domains)

        self.out(f"Focus mode activated. Blocked {len(domains)} domains:")
        for domain in domains:
            self.out(f"  - {domain}")

    def off(self):
        """Disable focus mode"""
        if not self.hosts_handler.is_active():
            self.out("Focus mode is not active.")
            return

        self.hosts_handler.remove_block()
        self.out("Focus mode deactivated. All sites unblocked.")

    def edit(self):
        """Open the domain list in the user's editor"""
        editor = self.editor or os.environ.get("EDITOR") or DEFAULT_EDITOR
        domains_file = self.block_list_handler.block_list_path
        logging.info(f"Opening {domains_file} with {editor}")

        result = self.runner([editor, str(domains_file)])
        if result.returncode != 0:
            logging.warning(f"Editor {editor} exited with status {result.returncode}")
            return

        self.out("Domains file saved. Changes will apply next time you run 'focus on'.")
        if self.hosts_handler.is_active():
            self.out("Tip: Run 'focus off && focus on' to apply changes immediately.")

    def status(self):
        """Print whether focus mode is on and which domains are configured"""
        if self.hosts_handler.is_active():
            self.out("Focus mode: ACTIVE")
            self.out(f"Blocked in hosts file: {len(self.hosts_handler.blocked_domains())} domains")
        else:
            self.out("Focus mode: INACTIVE")

        self.out(f"\nConfigured domains ({self.block_list_handler.block_list_path}):")
        domains = self.block_list_handler.read_block_list()
        if not domains:
            self.out("  (none configured)")
        else:
            for domain in domains:
                self.out(f"  - {domain}")
