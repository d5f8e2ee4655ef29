"""Demo application entry point."""

from __future__ import annotations

import os
from dataclasses import replace

from paprika.demo.pages import CounterPage
from paprika.runtime.config import RuntimeNavigatorConfig, load_runtime_config
from paprika.runtime.entrypoint import run_app

DEMO_HISTORY_LIMIT = 15


def main() -> int:
    """Run the counter demo."""
    config = load_runtime_config()
    if os.getenv("PAPRIKA_HISTORY_LIMIT") is None:
        config = replace(config, navigator=RuntimeNavigatorConfig(history_limit=DEMO_HISTORY_LIMIT))
    return run_app(default_page=CounterPage(1), config=config)


if __name__ == "__main__":
    main()
