"""Adapters connecting domain ports to remote services."""

from __future__ import annotations
