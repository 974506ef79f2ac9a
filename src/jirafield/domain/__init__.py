"""Domain model and services for issue field updates."""

from __future__ import annotations
