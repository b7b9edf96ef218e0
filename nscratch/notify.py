"""Desktop notifications via notify-send."""

import subprocess

# Values of the `notify` config key, least to most verbose
NOTIFY_LEVELS = ("none", "error", "all")


class Notifier:
    """Popups for one run, filtered by the configured `notify` level."""

    def __init__(self, level: str = "all"):
        self.level = level

    def error(self, message: str) -> None:
        if self.level != "none":
            send(message, urgency="critical")

    def info(self, message: str) -> None:
        # The scratchpad list is long, leave it up a little longer
        if self.level == "all":
            send(message, urgency="low", timeout_ms=5000)


def send(
    message: str,
    *,
    title: str = "nscratch",
    urgency: str = "normal",
    timeout_ms: int | None = None,
) -> None:
    """Send a notification via notify-send. A missing binary is ignored."""
    cmd = ["notify-send", "-a", "nscratch", "-u", urgency]
    if timeout_ms:
        cmd.extend(["-t", str(timeout_ms)])
    cmd.extend([title, message])
    try:
        subprocess.run(cmd, check=False)
    except OSError:
        pass
