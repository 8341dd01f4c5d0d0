import os
import logging

EXPENSE_API_URL = os.getenv("EXPENSE_API_URL", "http://localhost:5000/api/expenses")

API_CONNECT_TIMEOUT = int(os.getenv("API_CONNECT_TIMEOUT", "5"))
API_READ_TIMEOUT = int(os.getenv("API_READ_TIMEOUT", "30"))

EXPENSES_PER_PAGE = int(os.getenv("EXPENSES_PER_PAGE", "3"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configure_logging():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
