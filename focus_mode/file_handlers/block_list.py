#!/usr/bin/env python3
import os
import logging

from focus_mode.config import DEFAULT_DOMAINS, DEFAULT_DOMAINS_HEADER, DOMAINS_FILE


class BlockListHandler:
    def __init__(self, block_list_path=DOMAINS_FILE):
        self.block_list_path = block_list_path

    def ensure_block_list(self):
        """Create the focus directory and a default domain list if missing"""
        block_list_dir = os.path.dirname(self.block_list_path)
        if block_list_dir and not os.path.exists(block_list_dir):
            os.makedirs(block_list_dir, exist_ok=True)
            logging.info(f"Created focus directory: {block_list_dir}")

        if not os.path.exists(self.block_list_path):
            self.create_default_block_list()

    def create_default_block_list(self):
        """Write the starter domain list with a short usage header"""
        lines = DEFAULT_DOMAINS_HEADER + DEFAULT_DOMAINS
        with open(self.block_list_path, 'w', encoding='utf-8') as f:
            f.write('\n'.join(lines) + '\n')
        logging.info(f"Created default block list at {self.block_list_path}")

    def read_block_list(self):
        """Read the domains to block, in file order and without dedup"""
        with open(self.block_list_path, 'r', encoding='utf-8') as f:
            logging.debug(f"Reading block list from {self.block_list_path}")
            domains = [line.strip() for line in f]
        # Comment check runs on the trimmed line, so indented comments are skipped too
        domains = [domain for domain in domains if domain and not domain.startswith('#')]
        logging.info(f"Found {len(domains)} domains to block")
        return domains
