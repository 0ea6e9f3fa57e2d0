"""Utility functions shared across the importer."""

import logging.config
import structlog
import yaml
from pathlib import Path
from typing import Iterable, Optional, Union


def setup_logging(config_path: Optional[Union[str, Path]] = None, log_level: str = "INFO") -> None:
    """Setup structured logging configuration."""
    if config_path and Path(config_path).exists():
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(
            level=getattr(logging, log_level.upper()),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if config_path else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def _is_ascii_alnum(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or ('0' <= char <= '9')


def sanitize_name(name: str) -> str:
    """Turn an arbitrary remote name into a valid local identifier.
    
    Every character outside ``[A-Za-z0-9]`` becomes ``_``, and a leading
    digit gets an ``_`` prefix.
    """
    result = ''.join(char if _is_ascii_alnum(char) else '_' for char in name)
    
    if result and '0' <= result[0] <= '9':
        result = '_' + result
    
    return result


def join_name_parts(parts: Iterable[Optional[str]], separator: str = "_") -> str:
    """Sanitize and join the non-empty parts of a name."""
    return separator.join(sanitize_name(part) for part in parts if part)
