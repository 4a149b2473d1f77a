"""Run configuration loaded through Hydra/OmegaConf."""

import logging
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Mapping, Union
from omegaconf import DictConfig, OmegaConf

from tagcheck.models.options import ValidationOptions
from tagcheck.models.schema import RecordSchema

logger = logging.getLogger(__name__)


class RunConfig(BaseModel):
    """Everything one CLI run needs: options, a schema and the records to check."""
    model_config = ConfigDict(populate_by_name=True)

    options: ValidationOptions = Field(default_factory=ValidationOptions, description="Validation options")
    record_schema: RecordSchema = Field(..., alias="schema", description="Field declarations of the records")
    records: List[Dict[str, Any]] = Field(default_factory=list, description="Records to validate")


def load_run_config(cfg: Union[DictConfig, Mapping[str, Any]]) -> RunConfig:
    """Build a RunConfig from the composed Hydra config."""
    if isinstance(cfg, DictConfig):
        cfg = OmegaConf.to_container(cfg, resolve=True)
    run_config = RunConfig.model_validate(dict(cfg))
    logger.debug(
        f"Loaded schema '{run_config.record_schema.name}' with "
        f"{len(run_config.record_schema.fields)} fields and {len(run_config.records)} records"
    )
    return run_config
