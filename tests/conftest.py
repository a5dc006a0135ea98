from __future__ import annotations

import os

# Keep telemetry quiet unless a developer asks for it.
os.environ.setdefault("VI_INPUT_DISABLE_CONSOLE", "1")
os.environ.setdefault("VI_INPUT_LOG_LEVEL", "ERROR")
