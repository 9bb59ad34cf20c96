"""Timeline configuration loaded from YAML."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from steptrace.models.enums import MissingCellPolicy

logger = logging.getLogger(__name__)


class TimelineConfig(BaseModel):
    """Options controlling how a Timeline is constructed."""

    start_label: str = Field("START", description="Label seeding the instruction-address register")
    missing_cell_policy: MissingCellPolicy = MissingCellPolicy.ZERO
    validate_log: bool = Field(False, description="Check the log replays consistently on load")

    @classmethod
    def load(cls, path: Path | str | None = None) -> TimelineConfig:
        """Load configuration from ``path`` or from the packaged defaults.

        Only the ``timeline`` section of the file is read; missing keys
        keep their defaults.
        """
        if path is None:
            with resources.files("steptrace").joinpath("config.yaml").open() as f:
                data = yaml.safe_load(f)
        else:
            logger.info("Loading timeline config from %s", path)
            with open(path) as f:
                data = yaml.safe_load(f)

        section = (data or {}).get("timeline", {}) or {}
        return cls.model_validate(section)
