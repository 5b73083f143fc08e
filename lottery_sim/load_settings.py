import os
from dotenv import load_dotenv

load_dotenv()

stats_file_path = os.getenv("LOTTERY_STATS_FILE", "lottery_stats.csv")
host = os.getenv("LOTTERY_HOST", "127.0.0.1")
port = int(os.getenv("LOTTERY_PORT", "8080"))
log_level = os.getenv("LOTTERY_LOG_LEVEL", "INFO").upper()

if __name__ == "__main__":
    print(stats_file_path, host, port, log_level)
