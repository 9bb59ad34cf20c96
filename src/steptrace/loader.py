"""Trace loader — reads trace files and builds timelines from them."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from steptrace.config import TimelineConfig
from steptrace.core.timeline import Timeline
from steptrace.errors import TraceLoadError
from steptrace.models.trace import TraceDocument

logger = logging.getLogger(__name__)


def load_trace(path: Path | str) -> TraceDocument:
    """Read a trace document from a JSON or YAML file.

    Files ending in ``.json`` are parsed as JSON, everything else as YAML.

    Raises:
        TraceLoadError: If the file is missing, unparsable or fails validation
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise TraceLoadError(f"Cannot read trace file {path}: {e}") from e

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise TraceLoadError(f"Cannot parse trace file {path}: {e}") from e

    if not isinstance(data, dict):
        raise TraceLoadError(f"Trace file {path} must contain a mapping at top level")

    try:
        document = TraceDocument.model_validate(data)
    except ValidationError as e:
        raise TraceLoadError(f"Invalid trace file {path}: {e}") from e

    logger.info(
        "Loaded trace %s: %d steps, %d commands", path, document.step_count, len(document.commands)
    )
    return document


def build_timeline(document: TraceDocument, config: TimelineConfig | None = None) -> Timeline:
    """Construct a Timeline positioned at step 0 from a trace document."""
    return Timeline(
        updates=document.updates,
        source_text=document.source,
        labels=document.labels,
        commands=document.commands,
        initial_values=document.initial_values,
        config=config,
    )


def open_timeline(path: Path | str, config: TimelineConfig | None = None) -> Timeline:
    """Load a trace file and build its Timeline in one call."""
    return build_timeline(load_trace(path), config)
