import os
from pathlib import Path

from .env import load_env

load_env()

USERS_FILE = Path(os.getenv("USERS_FILE", "data/users.json"))
