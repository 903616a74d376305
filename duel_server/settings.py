import os
from dotenv import load_dotenv

load_dotenv()

host = os.getenv("DUEL_HOST", "0.0.0.0")
port = int(os.getenv("DUEL_PORT", "8080"))
log_level = os.getenv("DUEL_LOG_LEVEL", "INFO").upper()

if __name__ == "__main__":
    print(host, port, log_level)
