"""Command-line interface for zenreport."""

from __future__ import annotations

from zenreport.cli.app import main as main
from zenreport.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
