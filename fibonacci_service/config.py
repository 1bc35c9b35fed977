import logging

LOGGER_NAME = "fibonacci_service"
LOG_LEVEL = logging.INFO

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
