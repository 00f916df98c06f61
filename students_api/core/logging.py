# students_api/core/logging.py
import logging
import sys

DEBUG_ENVS = ("local", "dev")


# Configure standard Python logging
def setup_logging(env: str = "production") -> logging.Logger:
    level = logging.DEBUG if env in DEBUG_ENVS else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)  # Print logs to console
        ],
        force=True,
    )
    return logging.getLogger("students_api")
