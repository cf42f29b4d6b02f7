# core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

APP_NAME = os.getenv("APP_NAME", "Food Delivery Admin")
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///admin_audit.db")

# Session lifetime (seconds of inactivity) and monitor polling interval
SESSION_TIMEOUT = int(os.getenv("SESSION_TIMEOUT", "1800"))
SESSION_CHECK_INTERVAL = int(os.getenv("SESSION_CHECK_INTERVAL", "10"))

SUCCESS_MESSAGE_SECONDS = float(os.getenv("SUCCESS_MESSAGE_SECONDS", "3"))
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")
