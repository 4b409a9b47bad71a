from .loader import load_config
from .models import (
    DOC_PROMPT,
    AgentConfig,
    DocpassConfig,
)

__all__ = [
    "DOC_PROMPT",
    "AgentConfig",
    "DocpassConfig",
    "load_config",
]
