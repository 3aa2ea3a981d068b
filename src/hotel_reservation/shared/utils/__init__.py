from .http_response import api_response as api_response
from .logger import get_logger as get_logger
from .settings import Settings as Settings
from .validators import to_decimal as to_decimal
