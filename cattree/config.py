import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent

class Config:
    """Configuration settings for the benchmark"""

    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("No DATABASE_URL set in environment")

    DB_POOL_MIN_SIZE: int = int(os.getenv("DB_POOL_MIN_SIZE", "1"))
    DB_POOL_MAX_SIZE: int = int(os.getenv("DB_POOL_MAX_SIZE", "5"))
    COMMAND_TIMEOUT: float = float(os.getenv("COMMAND_TIMEOUT", "30"))
    CURSOR_PREFETCH: int = int(os.getenv("CURSOR_PREFETCH", "500"))

    # Benchmark settings
    BENCHMARK_ITERATIONS: int = int(os.getenv("BENCHMARK_ITERATIONS", "5"))

    # Other settings
    TIMEZONE: str = os.getenv("TZ", "UTC")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Paths
    SEED_FILE = Path(os.getenv(
        "SEED_FILE",
        str(Path(__file__).resolve().parent / "database" / "seed" / "categories.json")
    ))
    LOG_DIR = BASE_DIR / "logs"

def setup_logging():
    """Configure logging settings"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    Config.LOG_DIR.mkdir(exist_ok=True)
    log_file = Config.LOG_DIR / "cattree.log"

    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper()),
        format=log_format,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
