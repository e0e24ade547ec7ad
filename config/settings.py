from dotenv import load_dotenv
import os

load_dotenv()


def get_env_int(var_name, default=0):
    value = os.getenv(var_name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


VERSION = "0.1.0"

# Upper bound on hrp + data + checksum characters; 1023 is where the bech32m checksum stops guaranteeing detection.
MAX_CODE_LENGTH = get_env_int("MAX_CODE_LENGTH", 1023)

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
