#!/usr/bin/env python3
import logging

from focus_mode.config import BLOCK_MARKER_END, BLOCK_MARKER_START, HOSTS_PATH, REDIRECT_ADDRESS


class FileHostsStore:
    """Whole-file access to a hosts file on disk"""

    def __init__(self, path=HOSTS_PATH, encoding="utf-8"):
        self.path = path
        self.encoding = encoding

    def read(self):
        # newline="" keeps line endings exactly as they are on disk
        with open(self.path, 'r', encoding=self.encoding, newline="") as f:
            content = f.read()
        logging.debug(f"Read {len(content)} characters from {self.path}")
        return content

    def write(self, content):
        with open(self.path, 'w', encoding=self.encoding, newline="") as f:
            f.write(content)
        logging.debug(f"Wrote {len(content)} characters to {self.path}")


class MemoryHostsStore:
    """In-memory hosts content, for tests"""

    def __init__(self, content="", read_error=None, write_error=None):
        self.content = content
        self.read_error = read_error
        self.write_error = write_error
        self.writes = 0
        self.path = "<memory>"

    def read(self):
        if self.read_error is not None:
            raise self.read_error
        return self.content

    def write(self, content):
        if self.write_error is not None:
            raise self.write_error
        self.content = content
        self.writes += 1


def render_block(domains, marker_start=BLOCK_MARKER_START, marker_end=BLOCK_MARKER_END):
    """Build the text appended to the hosts file for the given domains"""
    lines = [marker_start]
    lines.extend(f"{REDIRECT_ADDRESS} {domain}" for domain in domains)
    lines.append(marker_end)
    return "\n" + "\n".join(lines) + "\n"


def strip_block(content, marker_start=BLOCK_MARKER_START, marker_end=BLOCK_MARKER_END):
    """Drop every marker-delimited line from content.

    A second start marker seen while already inside a region is dropped like
    any other region line, so duplicate or nested markers collapse into one
    removed span. A start marker with no end marker after it drops the rest
    of the file.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    kept = []
    in_block = False
    for line in lines:
        if marker_start in line:
            in_block = True
            continue
        if marker_end in line:
            in_block = False
            continue
        if not in_block:
            kept.append(line + "\n")

    return "".join(kept).rstrip() + "\n"


class HostsFileHandler:
    """Toggles the focus block region inside a hosts file.

    The region's presence in the file is the only record of whether blocking
    is on. The handler does not guard its own preconditions: callers check
    is_active() before apply_block() or remove_block().
    """

    def __init__(self, store=None, notifier=None,
                 marker_start=BLOCK_MARKER_START, marker_end=BLOCK_MARKER_END):
        self.store = store if store is not None else FileHostsStore()
        self.notifier = notifier
        self.marker_start = marker_start
        self.marker_end = marker_end

    @property
    def hosts_path(self):
        return self.store.path

    def is_active(self):
        """Return True if the hosts file contains the start marker"""
        return self.marker_start in self.store.read()

    def apply_block(self, domains):
        """Append a block region redirecting each domain to loopback"""
        hosts_content = self.store.read()
        hosts_content += render_block(domains, self.marker_start, self.marker_end)
        self.store.write(hosts_content)
        logging.info(f"Blocked {len(domains)} domains in {self.hosts_path}")
        self._notify()

    def remove_block(self):
        """Remove the block region, keeping every other line untouched"""
        hosts_content = self.store.read()
        self.store.write(strip_block(hosts_content, self.marker_start, self.marker_end))
        logging.info(f"Removed focus block from {self.hosts_path}")
        self._notify()

    def blocked_domains(self):
        """Domains listed in the first block region, in file order"""
        domains = []
        in_block = False
        for line in self.store.read().split("\n"):
            if self.marker_start in line:
                if in_block:
                    continue
                in_block = True
                continue
            if self.marker_end in line:
                if in_block:
                    break
                continue
            if in_block:
                parts = line.split()
                if len(parts) >= 2 and not parts[0].startswith('#'):
                    domains.append(parts[1])
        return domains

    def _notify(self):
        if self.notifier is not None:
            self.notifier()
