from wanderplan.configs.logger import file_logger
from wanderplan.configs.settings import settings

__all__ = [
    "file_logger",
    "settings",
]
