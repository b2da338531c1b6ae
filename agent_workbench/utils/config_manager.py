"""Configuration management utilities."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..core.constants import CONFIG_FILE_NAME
from ..models.config import ContainerSpec, WorkbenchConfig
from ..models.container import AgentKind, ResourceQuota

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages workbench configuration for a project."""

    def __init__(self, data_dir: Path):
        """Initialize config manager."""
        self.data_dir = data_dir
        self.config_file = data_dir / CONFIG_FILE_NAME

    def load_config(self) -> WorkbenchConfig:
        """Load configuration, falling back to defaults when none is saved."""
        if not self.config_file.exists():
            return WorkbenchConfig()

        try:
            data = json.loads(self.config_file.read_text())
            return WorkbenchConfig.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise ValueError(f"Invalid workbench config file: {e}")

    def save_config(self, config: WorkbenchConfig) -> None:
        """Save configuration to disk."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(config.model_dump_json(indent=2))
        logger.debug(f"Saved workbench config to {self.config_file}")

    def set_boot_delay(self, seconds: float) -> WorkbenchConfig:
        """Update the simulated boot delay."""
        data = self.load_config().model_dump()
        data["boot_delay"] = seconds
        config = WorkbenchConfig.model_validate(data)
        self.save_config(config)
        return config

    def add_container(
        self,
        container_id: str,
        name: str,
        agent_kind: Optional[AgentKind] = None,
        resources: Optional[ResourceQuota] = None,
    ) -> WorkbenchConfig:
        """Add or replace a container declaration."""
        config = self.load_config()
        spec = ContainerSpec(
            id=container_id,
            name=name,
            agent_kind=agent_kind,
            resources=resources or ResourceQuota(),
        )
        # Replace an existing declaration in place to keep registration order
        for i, existing in enumerate(config.containers):
            if existing.id == container_id:
                config.containers[i] = spec
                break
        else:
            config.containers.append(spec)
        self.save_config(config)
        return config

    def remove_container(self, container_id: str) -> bool:
        """Remove a container declaration. Returns True if removed."""
        config = self.load_config()
        if container_id not in config.container_ids():
            return False
        config.containers = [spec for spec in config.containers if spec.id != container_id]
        self.save_config(config)
        return True

    def reset(self) -> WorkbenchConfig:
        """Reset configuration to defaults."""
        config = WorkbenchConfig()
        self.save_config(config)
        return config
