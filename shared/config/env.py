from dotenv import find_dotenv, load_dotenv


def load_env() -> bool:
    """Loads `.env` from the working directory (or its parents) into os.environ."""
    return load_dotenv(find_dotenv(usecwd=True))
