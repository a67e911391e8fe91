"""Tests for the domain list handler."""

from pathlib import Path

import pytest

from focus_mode.config import DEFAULT_DOMAINS
from focus_mode.file_handlers.block_list import BlockListHandler


def test_ensure_creates_default_list(tmp_path: Path) -> None:
    domains_file = tmp_path / ".focus" / "domains.txt"
    handler = BlockListHandler(domains_file)

    handler.ensure_block_list()

    assert domains_file.exists()
    content = domains_file.read_text(encoding="utf-8")
    assert content.startswith("# Add one domain per line\n")
    assert handler.read_block_list() == DEFAULT_DOMAINS


def test_ensure_keeps_existing_list(tmp_path: Path) -> None:
    domains_file = tmp_path / "domains.txt"
    domains_file.write_text("mine.com\n", encoding="utf-8")

    BlockListHandler(domains_file).ensure_block_list()

    assert domains_file.read_text(encoding="utf-8") == "mine.com\n"


def test_read_skips_comments_and_blanks(tmp_path: Path) -> None:
    domains_file = tmp_path / "domains.txt"
    domains_file.write_text(
        "# heading\n\n  reddit.com  \n   # indented comment\nnews.ycombinator.com\n\t\n",
        encoding="utf-8",
    )

    assert BlockListHandler(domains_file).read_block_list() == ["reddit.com", "news.ycombinator.com"]


def test_read_keeps_order_and_duplicates(tmp_path: Path) -> None:
    domains_file = tmp_path / "domains.txt"
    domains_file.write_text("b.com\na.com\nb.com\n", encoding="utf-8")

    assert BlockListHandler(domains_file).read_block_list() == ["b.com", "a.com", "b.com"]


def test_read_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        BlockListHandler(tmp_path / "nope.txt").read_block_list()
