import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(level=logging.INFO, log_dir: Optional[str] = "logs"):
    """Setup basic logging configuration

    Logs go to stderr and, when log_dir is set, to a dated file in log_dir.
    """
    handlers = [logging.StreamHandler()]

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.FileHandler(
                f"{log_dir}/pipeline_{datetime.now().strftime('%Y-%m-%d')}.log",
                delay=True,
            )
        )

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=handlers,
    )
    return logging.getLogger("nba_draft")
