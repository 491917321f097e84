"""
Scoring Config Resolution

Loads optional YAML overrides for penalty weights and detector thresholds and
applies them on top of the defaults. Keys mirror the ScoringConfig fields.

Examples:
    # scoring.yaml
    #   warning_penalty: 10
    #   max_bullet_length: 200

    >>> config = load_scoring_config(Path("scoring.yaml"))
    >>> config.warning_penalty
    10

    # No path and no ATSCHECK_SCORING_CONFIG set -> defaults
    >>> load_scoring_config() == DEFAULT_SCORING_CONFIG
    True
"""

import os
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf

from atscheck.contexts.analysis.defaults import DEFAULT_SCORING_CONFIG, ScoringConfig
from atscheck.contexts.analysis.exceptions import InvalidScoringConfigError

load_dotenv()

SCORING_CONFIG_ENV_VAR = "ATSCHECK_SCORING_CONFIG"


def apply_overrides(config: ScoringConfig, overrides: Dict[str, Any]) -> ScoringConfig:
    """
    Return a copy of config with overrides applied.

    Args:
        config: Base config
        overrides: Mapping of ScoringConfig field name -> non-negative integer

    Returns:
        New ScoringConfig

    Raises:
        InvalidScoringConfigError: If a key is unknown or a value is not a non-negative integer
    """
    known = {f.name for f in fields(ScoringConfig)}

    for key, value in overrides.items():
        if key not in known:
            raise InvalidScoringConfigError(
                f"Unknown scoring config key. Available keys: {sorted(known)}", key=key
            )
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidScoringConfigError(
                f"Value must be a non-negative integer, got {value!r}", key=key
            )

    return replace(config, **overrides)


def load_scoring_config(config_path: Path = None) -> ScoringConfig:
    """
    Load scoring config overrides from YAML and merge them onto the defaults.

    Args:
        config_path: Optional path to a YAML file (defaults to ATSCHECK_SCORING_CONFIG env variable)

    Returns:
        ScoringConfig (the defaults when no file is configured)

    Raises:
        InvalidScoringConfigError: If the YAML is not a flat mapping of known keys
    """
    if config_path is None:
        env_path = os.getenv(SCORING_CONFIG_ENV_VAR)
        if not env_path:
            return DEFAULT_SCORING_CONFIG
        config_path = Path(env_path)

    overrides = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    if not isinstance(overrides, dict):
        raise InvalidScoringConfigError("Scoring config must be a mapping", config_path=config_path)

    try:
        return apply_overrides(DEFAULT_SCORING_CONFIG, overrides)
    except InvalidScoringConfigError as e:
        raise InvalidScoringConfigError(e.message, config_path=config_path, key=e.key) from e
