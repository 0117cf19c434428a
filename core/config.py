# core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///little_lemon.db")

MENU_API_URL = os.getenv(
    "MENU_API_URL",
    "https://raw.githubusercontent.com/Meta-Mobile-Developer-PC/Working-With-Data-API/main/capstone.json",
)
MENU_IMAGE_BASE_URL = os.getenv(
    "MENU_IMAGE_BASE_URL",
    "https://raw.githubusercontent.com/Meta-Mobile-Developer-PC/Working-With-Data-API/main/images/",
)
MENU_FETCH_TIMEOUT = float(os.getenv("MENU_FETCH_TIMEOUT", "10"))

SEARCH_DEBOUNCE_MS = int(os.getenv("SEARCH_DEBOUNCE_MS", "500"))

# "false" keeps cached rows across restarts (schema rebuilt only on version change)
MENU_RESET_ON_START = os.getenv("MENU_RESET_ON_START", "true").lower() == "true"
MENU_SCHEMA_VERSION = os.getenv("MENU_SCHEMA_VERSION", "1")
