"""Discovery of the local game client's port and auth token.

The client exposes its credentials differently per platform:

- Windows: as command-line flags of the running ``LeagueClientUx.exe``
  process (``--app-port=...`` and ``--remoting-auth-token=...``).
- Elsewhere: in a lockfile of the form ``name:pid:port:password:protocol``.

Both are modeled as a ``CredentialSource``; ``get_credential_source`` picks
one for the host platform at startup.
"""

import logging
import subprocess
import sys
from pathlib import Path
from typing import Optional, Protocol

from matchup_notes.errors import ClientNotRunningError, ParseError
from matchup_notes.models.client import ClientCredentials

logger = logging.getLogger(__name__)

PORT_FLAG = "--app-port="
TOKEN_FLAG = "--remoting-auth-token="


class CredentialSource(Protocol):
    """Anything that can discover credentials for the running client."""

    def discover(self) -> ClientCredentials:
        """Return fresh credentials.

        Raises:
            ClientNotRunningError: If the client is not running
            ParseError: If the credentials are present but malformed
        """
        ...


def extract_flag_value(text: str, prefix: str) -> Optional[str]:
    """Get the text after ``prefix`` up to the next whitespace or quote.

    Examples:
        >>> extract_flag_value('"--app-port=5555" --x', "--app-port=")
        '5555'
        >>> extract_flag_value("--other", "--app-port=") is None
        True
    """
    start = text.find(prefix)
    if start == -1:
        return None
    value_start = start + len(prefix)
    end = value_start
    while end < len(text) and not (text[end].isspace() or text[end] == '"'):
        end += 1
    return text[value_start:end]


def parse_port(value: Optional[str]) -> int:
    """Parse a 16-bit port number or raise ParseError."""
    if value is None or not value.strip().isdigit():
        raise ParseError("Invalid port")
    port = int(value.strip())
    if port > 65535:
        raise ParseError("Invalid port")
    return port


class ProcessCommandLineSource:
    """Reads credentials from the client process command line (Windows)."""

    def __init__(self, process_name: str = "LeagueClientUx.exe"):
        self.process_name = process_name

    def read_command_line(self) -> str:
        """Command line(s) of the client process, empty if not running."""
        try:
            output = subprocess.run(
                [
                    "wmic",
                    "process",
                    "where",
                    f"name='{self.process_name}'",
                    "get",
                    "commandline",
                ],
                capture_output=True,
                check=False,
            )
        except OSError as e:
            logger.warning(f"Could not query process list: {e}")
            return ""
        return output.stdout.decode("utf-8", errors="replace")

    def discover(self) -> ClientCredentials:
        stdout = self.read_command_line()
        process_stem = self.process_name.rsplit(".", 1)[0]
        if not stdout or process_stem not in stdout:
            raise ClientNotRunningError()

        port_value = extract_flag_value(stdout, PORT_FLAG)
        if port_value is None:
            raise ParseError("Could not find port")
        port = parse_port(port_value)

        token = extract_flag_value(stdout, TOKEN_FLAG)
        if not token:
            raise ParseError("Could not find auth token")

        return ClientCredentials(port=port, token=token)


class LockfileSource:
    """Reads credentials from the client's lockfile (macOS / Linux)."""

    def __init__(self, lockfile_path: Path):
        self.lockfile_path = lockfile_path

    def discover(self) -> ClientCredentials:
        if not self.lockfile_path.exists():
            raise ClientNotRunningError()

        try:
            contents = self.lockfile_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError as e:
            # Client exited between the exists() check and the read
            raise ClientNotRunningError() from e
        except OSError as e:
            raise ParseError(f"Cannot read lockfile: {e}") from e

        parts = contents.split(":")
        if len(parts) < 4:
            raise ParseError("Invalid lockfile format")

        port = parse_port(parts[2])
        token = parts[3]
        if not token:
            raise ParseError("Invalid lockfile format")

        return ClientCredentials(port=port, token=token)


def get_credential_source(
    lockfile_path: Path,
    process_name: str = "LeagueClientUx.exe",
    platform: Optional[str] = None,
) -> CredentialSource:
    """Factory function to get the credential source for this platform.

    Args:
        lockfile_path: Lockfile location used outside Windows
        process_name: Client executable name used on Windows
        platform: Override for ``sys.platform`` (tests)

    Returns:
        ProcessCommandLineSource on Windows, LockfileSource elsewhere
    """
    platform = platform or sys.platform
    if platform == "win32":
        logger.info(f"Using process command line of {process_name} for client credentials")
        return ProcessCommandLineSource(process_name)
    logger.info(f"Using lockfile {lockfile_path} for client credentials")
    return LockfileSource(lockfile_path)
