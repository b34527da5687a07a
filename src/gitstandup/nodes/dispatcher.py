"""
git-standup dispatcher: prints the digest and optionally forwards it to the
notification sink.
"""

import subprocess
from typing import List, Optional

from loguru import logger

from gitstandup.config import DEFAULT_NOTIFY_BIN
from gitstandup.models.state import DigestState

DELIVERY_MODE = "now"


class OpenClawNotifier:
    """Sends text through `openclaw system event`."""

    def __init__(self, binary: str = DEFAULT_NOTIFY_BIN):
        self.binary = binary

    def command(self, text: str) -> List[str]:
        return [self.binary, "system", "event", "--text", text, "--mode", DELIVERY_MODE]

    def send(self, text: str) -> bool:
        """Deliver text; failures are logged at debug level and never raised."""
        try:
            proc = subprocess.run(self.command(text), capture_output=True, text=True)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug(f"Notification via {self.binary} failed: {e}")
            return False

        if proc.returncode != 0:
            logger.debug(f"Notification via {self.binary} exited with {proc.returncode}: {proc.stderr.strip()}")
            return False
        return True


def dispatch(payload: str, notifier: Optional[OpenClawNotifier] = None) -> Optional[bool]:
    """Print the payload, then forward it verbatim if a notifier is given.

    Returns the delivery outcome, or None when no notification was requested.
    """
    print(payload)
    if notifier is None:
        return None
    return notifier.send(payload)


def dispatch_node(state: DigestState) -> DigestState:
    """Emit the rendered digest and update state with the delivery outcome."""
    logger.debug("Executing Dispatch Node")

    config = state["digest_config"]
    notifier = OpenClawNotifier(config.notify_bin) if config.notify else None
    notified = dispatch(state["rendered"], notifier)
    return {**state, "notified": notified}
