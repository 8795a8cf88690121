from pydantic_settings import BaseSettings, SettingsConfigDict
import multiprocessing
from pathlib import Path
import os

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Processing
    BATCH_SIZE: int = 500
    NUM_WORKERS: int = max(1, min(4, multiprocessing.cpu_count() - 1))
    MAX_MEMORY_PERCENT: int = 80

    # Paths
    BASE_DIR: Path = Path(__file__).parent.parent
    RESOURCES_DIR: Path = BASE_DIR / "resources"
    SKILLS_FILE: Path = RESOURCES_DIR / "skills.txt"
    QUALIFICATIONS_FILE: Path = RESOURCES_DIR / "qualification.txt"
    INPUT_DIR: Path = BASE_DIR / "data" / "input"
    OUTPUT_DIR: Path = BASE_DIR / "data" / "output"
    LOG_DIR: Path = BASE_DIR / "data" / "logs"

    # Extraction
    NAME_SEARCH_LINES: int = 14

    # OCR Settings
    ENABLE_OCR: bool = True
    OCR_LANGUAGE: str = "eng"
    OCR_DPI: int = 300
    OCR_CONFIG: str = "--oem 3 --psm 6"
    OCR_TIMEOUT: int = 30
    TESSERACT_PATH: str = os.environ.get('TESSERACT_PATH', 'tesseract')
    OCR_PREPROCESSING: bool = True

    # Document Processing
    MAX_DOCUMENT_SIZE: int = 10 * 1024 * 1024  # 10MB
    SUPPORTED_FORMATS: list = ["pdf", "png", "jpg", "jpeg", "tif", "tiff", "bmp", "txt"]

settings = Settings()
