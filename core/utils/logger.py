"""Logging utility."""
import logging
import sys
from typing import Optional, Union


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Set up and return a logger instance."""
    logger = logging.getLogger(name)
    
    if level is None:
        level = logging.INFO
    
    logger.setLevel(level)
    
    # Create console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    
    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    handler.setFormatter(formatter)
    
    # Add handler to logger
    if not logger.handlers:
        logger.addHandler(handler)
    
    return logger


def set_log_level(level: Union[int, str], target: Optional[logging.Logger] = None) -> int:
    """
    Apply a level such as "DEBUG" or logging.DEBUG to a logger and its handlers.
    
    Unknown level names fall back to INFO. Returns the numeric level applied.
    """
    target = target or logger
    
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    
    target.setLevel(level)
    for handler in target.handlers:
        handler.setLevel(level)
    
    return level


# Default logger instance
logger = setup_logger("portfolio_qa")
