"""
Centralized logging configuration for the extraction core.

This module provides a standardized logging setup for all docextract modules.
Logs are formatted consistently and can be configured via environment variables.
"""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .config import ENABLE_FILE_LOGGING, LOG_FILE, LOG_LEVEL


def setup_logging(
    log_level: str = LOG_LEVEL,
    log_file: Optional[Union[str, Path]] = None,
    enable_file_logging: bool = ENABLE_FILE_LOGGING
) -> None:
    """
    Configure logging for the extraction core.
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file (defaults to LOG_FILE from config)
        enable_file_logging: Whether to enable file logging
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    
    detailed_formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    
    simple_formatter = logging.Formatter(
        fmt='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    
    # Only the package logger is configured; host applications own the root logger
    package_logger = logging.getLogger("docextract")
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(simple_formatter)
    package_logger.addHandler(console_handler)
    
    if enable_file_logging:
        log_path = Path(log_file) if log_file is not None else LOG_FILE
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # File gets all logs
        file_handler.setFormatter(detailed_formatter)
        package_logger.addHandler(file_handler)
    
    # Parsing libraries are chatty about recoverable quirks in real-world files
    logging.getLogger("pypdf").setLevel(logging.ERROR)
    logging.getLogger("docx").setLevel(logging.WARNING)
    logging.getLogger("pptx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.
    
    Args:
        name: Logger name (typically __name__)
    
    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


# Initialize logging on module import
setup_logging()
