"""Debug logging for a database client's completed requests."""
from .models import RequestResult  # noqa: F401
from .client_logger import logger, show_request_result  # noqa: F401
from .json_utils import to_json_pretty  # noqa: F401
from .logging_utils import LineSink, logging_sink, setup_logging_from_env  # noqa: F401
from .config import ConfigError, LoggerConfig, build_sink, load_config  # noqa: F401
