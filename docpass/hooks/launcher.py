"""Background launch of the Cursor Agent CLI for a documentation pass.

The agent is fire-and-forget: it runs detached in the project root with the
hook's environment, and the hook never waits for it or looks at its exit
status. Its output is discarded unless agent logging is on, in which case
stdout and stderr are appended to .cursor/hooks/docs/agent.log.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from docpass.config.models import AgentConfig
from docpass.paths import agent_log_file, project_root

logger = logging.getLogger(__name__)

# Model value that leaves the choice to the agent
AUTO_MODEL = "auto"


def find_agent_binary(
    path_env: str | None = None,
    names: Sequence[str] = ("cursor", "cursor-agent"),
) -> Path | None:
    """Search PATH for the first of names, directory by directory.

    Within each directory the names are tried in order, so an earlier
    directory holding only the fallback name beats a later one holding the
    primary name.
    """
    if path_env is None:
        path_env = os.environ.get("PATH", "")
    for directory in path_env.split(os.pathsep):
        if not directory:
            continue
        for name in names:
            candidate = Path(directory) / name
            if candidate.is_file():
                return candidate
    return None


def build_agent_args(binary: str | Path, options: AgentConfig) -> list[str]:
    """Full argv for `<bin> agent -p <prompt> --output-format <fmt> [--model <id>]`."""
    args = [str(binary), "agent", "-p", options.prompt, "--output-format", options.output_format]
    if options.model and options.model != AUTO_MODEL:
        args.extend(["--model", options.model])
    return args


def _detach_kwargs() -> dict:
    if sys.platform == "win32":
        flags = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        return {"creationflags": flags}
    return {"start_new_session": True}


def launch_doc_agent(options: AgentConfig, root: Path | None = None) -> subprocess.Popen | None:
    """Start the documentation agent in the background.

    Returns the Popen handle (already released; callers must not wait on
    it) or None when no binary was found or the spawn itself failed.
    """
    cwd = root or project_root()

    binary = find_agent_binary(names=options.binaries)
    if binary is None:
        logger.debug("No agent binary (%s) on PATH, skipping doc pass", ", ".join(options.binaries))
        return None

    args = build_agent_args(binary, options)

    if not options.log_output:
        return _spawn(args, cwd, subprocess.DEVNULL)

    log_path = agent_log_file(cwd)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_fh = open(log_path, "ab")
    except OSError as e:
        logger.warning("Cannot open %s (%s), discarding doc agent output", log_path, e)
        return _spawn(args, cwd, subprocess.DEVNULL)
    # The child keeps its own copy of the descriptor
    with log_fh:
        return _spawn(args, cwd, log_fh)


def _spawn(args: list[str], cwd: Path, output) -> subprocess.Popen | None:
    try:
        proc = subprocess.Popen(
            args,
            cwd=str(cwd),
            env=dict(os.environ),
            stdin=subprocess.DEVNULL,
            stdout=output,
            stderr=output,
            **_detach_kwargs(),
        )
    except OSError as e:
        logger.warning("Failed to launch doc agent %s: %s", args[0], e)
        return None
    logger.info("Launched doc agent %s (pid %s)", args[0], proc.pid)
    return proc
