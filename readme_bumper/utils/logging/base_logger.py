import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def _configure_root():
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("readme_bumper")
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the readme_bumper hierarchy, configuring it on first use."""
    _configure_root()
    if not name.startswith("readme_bumper"):
        name = f"readme_bumper.{name}"
    return logging.getLogger(name)


logger = get_logger("readme_bumper.app")
