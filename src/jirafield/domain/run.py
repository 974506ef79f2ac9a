"""Build run context handed to the field update step by its host."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

from jirafield.common.logging import BUILD_LOGGER_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping


class RunResult(IntEnum):
    """Terminal result of a build run, ordered from best to worst."""

    SUCCESS = 0
    UNSTABLE = 1
    FAILURE = 2


def _default_build_log() -> logging.Logger:
    return logging.getLogger(BUILD_LOGGER_NAME)


@dataclass(slots=True)
class BuildRun:
    """Environment, log stream and result of the run executing the step."""

    environment: Mapping[str, str] = field(default_factory=dict)
    log: logging.Logger = field(default_factory=_default_build_log)
    result: RunResult = RunResult.SUCCESS

    def set_result(self, result: RunResult) -> None:
        # A run result can only get worse.
        if result > self.result:
            self.result = result

    @property
    def failed(self) -> bool:
        return self.result is RunResult.FAILURE
