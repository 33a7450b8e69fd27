import os

from dotenv import load_dotenv

load_dotenv()

HOST = os.environ.get("INVENTORY_HOST", "0.0.0.0")
PORT = int(os.environ.get("INVENTORY_PORT", "4455"))
LOG_LEVEL = os.environ.get("INVENTORY_LOG_LEVEL", "INFO").upper()
