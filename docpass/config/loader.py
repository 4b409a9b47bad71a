"""YAML config loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from docpass.paths import hooks_dir

from .models import DocpassConfig

CONFIG_FILENAME = "docpass.yaml"


def load_config(cli_path: str | None = None, root: Path | None = None) -> DocpassConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        hooks_dir(root) / CONFIG_FILENAME if root is not None else None,
        Path.home() / ".config" / "docpass" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                return DocpassConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    return DocpassConfig()


# Default YAML template for .cursor/hooks/docs/docpass.yaml
DEFAULT_CONFIG_TEMPLATE = """\
# docpass.yaml

# Documentation agent
agent:
  binaries: ["cursor", "cursor-agent"]   # searched on PATH, first match wins
  model: "auto"                          # "auto" lets the agent pick its default
  output_format: "text"                  # text | json | stream-json
  log_output: false                      # append agent output to agent.log
  # prompt: "..."                        # override the documentation prompt

# Hook logging (stderr)
log_level: "warn"              # debug | info | warn | error
"""
