"""Allow ``python -m speedtest_logger``."""

from speedtest_logger.cli import app

app()
