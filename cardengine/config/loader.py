"""Hydra-based config loading with Pydantic validation.

Flow: Hydra composes YAML (defaults, overrides) → DictConfig → plain dict → Pydantic model.

Usage:
    config = load_config(MatchConfig, "configs", "match/tricks_3p", overrides=["games=50"])
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def split_config_path(config_arg: str) -> tuple[str, str]:
    """Split a CLI config argument into (config_dir, config_name) for Hydra.

    Handles 'configs/match/tricks_3p.yaml', 'configs/match/tricks_3p' and
    plain file paths like 'my_match.yaml'.

    Returns:
        (config_dir, config_name), e.g. ("configs", "match/tricks_3p").
    """
    config_path = Path(config_arg)
    config_name = str(config_path.with_suffix(""))
    if config_name.startswith("configs/"):
        return "configs", config_name[len("configs/") :]
    config_dir = str(config_path.parent) if config_path.parent.name else "."
    return config_dir, config_path.stem


def _compose(config_path: str | Path, config_name: str, overrides: list[str] | None) -> Any:
    """Compose a config with Hydra and return it as a plain container.

    Clears global Hydra state before and after, so it is not thread-safe.
    """
    config_dir = Path(config_path).resolve()

    GlobalHydra.instance().clear()
    try:
        initialize_config_dir(config_dir=str(config_dir), version_base=None)
        cfg: DictConfig = compose(config_name=config_name, overrides=overrides or [])
        return OmegaConf.to_container(cfg, resolve=True)
    finally:
        GlobalHydra.instance().clear()


def load_config(
    model_class: type[T],
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> T:
    """Load and validate a config using Hydra and Pydantic.

    Args:
        model_class: Pydantic model class to validate against.
        config_path: Configs directory (relative to cwd or absolute).
        config_name: Config file name without .yaml, may include subdirs ("match/tricks_3p").
        overrides: Hydra-style overrides, e.g. ["games=50", "game.players=4"].

    Returns:
        Validated config instance.

    Raises:
        pydantic.ValidationError: If the composed config does not match the model.
    """
    return model_class.model_validate(_compose(config_path, config_name, overrides))


def load_raw_config(
    config_path: str | Path,
    config_name: str,
    overrides: list[str] | None = None,
) -> dict:
    """Load a config as a raw dict, without Pydantic validation."""
    return _compose(config_path, config_name, overrides)  # type: ignore[no-any-return]
