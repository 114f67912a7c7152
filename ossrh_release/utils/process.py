"""External process execution"""

import logging
import shlex
import subprocess
from typing import Iterable, Sequence

from ..api.exceptions import ProcessError
from ..constants import MASK, CREDENTIAL_OPTIONS, SECRET_OPTIONS

logger = logging.getLogger(__name__)


def mask(args: Sequence[str], secrets: Iterable[str] = ()) -> str:
    """
    Render a command line for display with secrets replaced

    The value after -u is shown as **:**, the value after --passphrase as
    **. Any other argument equal to a secret is masked as a whole.

    Args:
        args: Command arguments
        secrets: Values to hide

    Returns:
        Shell-quoted command string safe to print
    """
    secrets = {s for s in secrets if s}
    rendered = []
    previous = None
    for arg in args:
        if previous in CREDENTIAL_OPTIONS:
            shown = f"{MASK}:{MASK}" if ":" in arg else MASK
        elif previous in SECRET_OPTIONS or arg in secrets:
            shown = MASK
        else:
            shown = arg
        rendered.append(shlex.quote(shown))
        previous = arg
    return " ".join(rendered)


class ProcessGateway:
    """Runs external tools synchronously and returns their output"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def run(self, args: Sequence[str], secrets: Iterable[str] = ()) -> str:
        """
        Run a command and capture its combined output

        Args:
            args: Command and arguments, executed without a shell
            secrets: Values masked in logs and errors

        Returns:
            Standard output and standard error as text

        Raises:
            ProcessError: If the command cannot be started or exits non-zero
        """
        args = [str(a) for a in args]
        display = mask(args, secrets)
        logger.info(display)

        try:
            result = subprocess.run(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding=self.encoding,
                errors="replace",
            )
        except (FileNotFoundError, PermissionError, OSError) as e:
            raise ProcessError(f"Failed to start {args[0]}: {e}", command=display) from e

        output = result.stdout or ""
        logger.debug(output)

        if result.returncode != 0:
            raise ProcessError(
                f"{args[0]} exited with status {result.returncode}",
                command=display,
                output=output,
                returncode=result.returncode,
            )

        return output
