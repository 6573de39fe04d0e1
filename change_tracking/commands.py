"""
Command runner - spawns an external program and collects its output.

A command is considered failed as soon as it writes anything to stderr,
whatever its exit status.
"""

import asyncio
from typing import List, Mapping, Optional, Sequence

from loguru import logger

from .errors import ExternalCommandError, ExternalProcessLaunchError


async def run(
    program: str,
    args: Sequence[str],
    cwd: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None
) -> List[str]:
    """
    Run a program to completion and return its stdout split into lines.

    Args:
        program: Executable name or path
        args: Arguments passed to the program
        cwd: Working directory for the process
        env: Environment for the process (inherits ours when None)

    Returns:
        stdout split on newlines; a trailing newline yields a final empty item

    Raises:
        ExternalProcessLaunchError: program missing or not executable
        ExternalCommandError: program wrote to stderr
    """
    logger.debug(f"Running {program} {' '.join(args)} (cwd={cwd})")
    try:
        proc = await asyncio.create_subprocess_exec(
            program,
            *args,
            cwd=cwd,
            env=dict(env) if env is not None else None,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE
        )
    except OSError as e:
        logger.warning(f"Failed to start {program}: {e}")
        raise ExternalProcessLaunchError(program, str(e)) from e

    stdout, stderr = await proc.communicate()

    if stderr:
        text = stderr.decode('utf-8', errors='replace')
        logger.warning(f"{program} reported errors (exit {proc.returncode}): {text.strip()}")
        raise ExternalCommandError(program, args, text, proc.returncode)

    return stdout.decode('utf-8', errors='surrogateescape').split('\n')
