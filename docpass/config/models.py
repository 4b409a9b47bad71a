from pydantic import BaseModel, Field
from typing import Literal

DOC_PROMPT = (
    "Documentation pass (stop hook): Keep project docs consistent. "
    "(1) Update docs/DOCS.md so it describes the project and links to module-level DOCS.md files. "
    "(2) In every important folder (functional unit root: e.g. src/main, src/main/agent, "
    "src/main/app, src/renderer, scripts), ensure there is an DOCS.md describing what the "
    "module does, what is in it, and what can be used. "
    "(3) In subfolders that have substantial content (e.g. src/main/agent/core, src/renderer/src), "
    "add or update their own DOCS.md. "
    "Create or update only what is missing or outdated; leave accurate content as is."
)


class AgentConfig(BaseModel):
    binaries: list[str] = Field(default_factory=lambda: ["cursor", "cursor-agent"], min_length=1)
    model: str = "auto"
    output_format: Literal["text", "json", "stream-json"] = "text"
    prompt: str = Field(default=DOC_PROMPT, min_length=1)
    log_output: bool = False


class DocpassConfig(BaseModel):
    agent: AgentConfig = Field(default_factory=AgentConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "warn"
