"""
Hydra-based script that validates the records listed in the run configuration
against the field constraints declared by its schema.
"""

import sys
import hydra
from omegaconf import DictConfig

from tagcheck import load_run_config, format_failures

# Set up logging
import logging
logger = logging.getLogger(__name__)


@hydra.main(
    version_base="1.2",
    config_path="./config/",
    config_name="validation_config.yaml"
)
def main(cfg: DictConfig):

    # Options, schema and records all come from the composed config
    run_config = load_run_config(cfg)
    schema = run_config.record_schema

    print(f"Validating {len(run_config.records)} '{schema.name}' records...")
    results = schema.validate_records(run_config.records, run_config.options)

    all_valid = True
    for i, (is_valid, failures) in enumerate(results):
        if is_valid:
            print(f"✅ Record {i} valid")
            continue

        all_valid = False
        print(f"❌ Record {i} errors:")
        for line in format_failures(failures):
            print(f"  - {line}")

    if not all_valid:
        logger.info("Validation finished with failures")
        sys.exit(1)


if __name__ == "__main__":
    main()
