"""Rendered command models."""

from pydantic import BaseModel, ConfigDict

from db_dumper.adapters.base import AdapterKind


class CommandSpec(BaseModel):
    """Dump command text and, when requested, the matching restore text."""

    model_config = ConfigDict(frozen=True)

    kind: AdapterKind
    dump: str
    restore: str | None = None
