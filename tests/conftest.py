"""Root conftest — shared test configuration."""

import os

# Human-readable logs in test output; never pick up a developer .env override
os.environ.setdefault("DAPPBOT_LOG_FORMAT", "text")
os.environ.setdefault("DAPPBOT_LOG_LEVEL", "WARNING")
