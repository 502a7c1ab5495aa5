"""Subprocess execution for git and package manager commands."""

import logging
import shutil
import subprocess
from pathlib import Path

from create_stylish.errors import CommandError

logger = logging.getLogger(__name__)


def run_command(args: list[str], cwd: Path, silent: bool = False) -> None:
    """Run a command in cwd and raise CommandError on a non-zero exit.

    The executable is resolved on PATH first so that Windows shims such as
    npm.cmd are found. Silent commands have their output captured and only
    logged at debug level; otherwise stdout and stderr are inherited from
    this process so the user sees the child's output as it happens.
    """
    command = args[0]
    executable = shutil.which(command)
    if executable is None:
        raise CommandError(command, None, "executable not found")
    argv = [executable, *args[1:]]
    logger.debug("Running %s in %s", " ".join(argv), cwd)

    try:
        if silent:
            result = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                text=True,
            )
        else:
            result = subprocess.run(argv, cwd=cwd)
    except FileNotFoundError:
        raise CommandError(command, None, "executable not found") from None
    except OSError as e:
        raise CommandError(command, None, str(e)) from e

    if result.returncode != 0:
        if silent and result.stderr:
            logger.debug("%s stderr: %s", command, result.stderr.strip())
        raise CommandError(command, result.returncode)
