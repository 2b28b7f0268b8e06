"""Centralized logging configuration for Sepolia Quick Wallet.

This module provides:
- Log level, destination and format taken from the environment
- Redaction of private keys before anything reaches a handler
- Mapping from raw node/library errors to short user-facing text
- A ``ContextAdapter`` so services can attach fields such as the address
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any

ENV_PREFIX = "SEPOLIA_WALLET"


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LoggingConfig:
    log_level: LogLevel = LogLevel.INFO
    log_to_file: bool = True
    log_to_stdout: bool = False
    log_format: str = "human"
    log_dir: Path | None = None
    log_filename: str = "wallet.log"
    sanitize_sensitive: bool = True
    include_context: bool = True

    @classmethod
    def from_environment(cls) -> "LoggingConfig":
        env_level = os.getenv(f"{ENV_PREFIX}_LOG_LEVEL", "INFO").upper()
        try:
            log_level = LogLevel(env_level)
        except ValueError:
            log_level = LogLevel.INFO

        log_to_stdout = os.getenv(f"{ENV_PREFIX}_LOG_STDOUT", "").lower() in (
            "1",
            "true",
            "yes",
        )
        log_format = (
            "json"
            if os.getenv(f"{ENV_PREFIX}_LOG_FORMAT", "human").lower() == "json"
            else "human"
        )
        env_dir = os.getenv(f"{ENV_PREFIX}_LOG_DIR")

        return cls(
            log_level=log_level,
            log_to_stdout=log_to_stdout,
            log_format=log_format,
            log_dir=Path(env_dir).expanduser() if env_dir else None,
        )


SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (
        re.compile(
            r"(private[_-]?key['\"]?\s*[:=]\s*['\"]?)((?:0x)?[A-Fa-f0-9]{64})",
            re.IGNORECASE,
        ),
        r"\1[REDACTED]",
    ),
    # Bare 32-byte hex values, except transaction hashes inside explorer links.
    (
        re.compile(r"(?<!tx/)\b(?:0x)?[A-Fa-f0-9]{64}\b"),
        "[KEY_REDACTED]",
    ),
]

ADDRESS_PATTERN = re.compile(r"\b0x[A-Fa-f0-9]{40}\b")


def sanitize_message(message: str, preserve_addresses: bool = True) -> str:
    if not message:
        return message

    sanitized = message
    for pattern, replacement in SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)

    if not preserve_addresses:
        sanitized = ADDRESS_PATTERN.sub("[ADDRESS_REDACTED]", sanitized)

    return sanitized


def sanitize_dict(
    data: dict[str, Any], preserve_addresses: bool = True
) -> dict[str, Any]:
    result = {}
    for key, value in data.items():
        key_lower = key.lower()
        if any(
            sensitive in key_lower
            for sensitive in ["private_key", "privatekey", "secret"]
        ):
            result[key] = "[REDACTED]"
        elif isinstance(value, str):
            result[key] = sanitize_message(value, preserve_addresses)
        elif isinstance(value, dict):
            result[key] = sanitize_dict(value, preserve_addresses)
        elif isinstance(value, list):
            result[key] = [
                sanitize_dict(item, preserve_addresses)
                if isinstance(item, dict)
                else sanitize_message(item, preserve_addresses)
                if isinstance(item, str)
                else item
                for item in value
            ]
        else:
            result[key] = value
    return result


@dataclass
class ErrorMapping:
    error_pattern: str
    user_message: str
    suggest_action: str | None = None


ERROR_MAPPINGS: list[ErrorMapping] = [
    ErrorMapping(
        error_pattern="timeout|timed out",
        user_message="Connection timed out. The RPC endpoint may be slow or unavailable.",
        suggest_action="Try again later or check your network connection.",
    ),
    ErrorMapping(
        error_pattern="connection refused|cannot connect|connection error|no rpc endpoint",
        user_message="Unable to connect to the Sepolia network.",
        suggest_action="Check your internet connection and try again.",
    ),
    ErrorMapping(
        error_pattern="insufficient funds",
        user_message="Insufficient funds for this transaction.",
        suggest_action="Top up the account from a Sepolia faucet.",
    ),
    ErrorMapping(
        error_pattern="invalid.*address|address.*invalid",
        user_message="The address provided is not valid.",
        suggest_action="Please check the recipient address format.",
    ),
    ErrorMapping(
        error_pattern="invalid.*key|key.*invalid|invalid.*private",
        user_message="The provided key is not valid.",
        suggest_action="A private key is 64 hexadecimal characters.",
    ),
    ErrorMapping(
        error_pattern="nonce too low|already known|replacement transaction underpriced",
        user_message="A transaction with this nonce is already pending.",
        suggest_action="Wait for the pending transaction to confirm.",
    ),
    ErrorMapping(
        error_pattern="rate limit|too many requests|429",
        user_message="Too many requests. Please slow down.",
        suggest_action="Wait a moment and try again.",
    ),
    ErrorMapping(
        error_pattern="network.*error|networkerror",
        user_message="A network error occurred.",
        suggest_action="Check your internet connection.",
    ),
]


def get_user_friendly_error(error: Exception | str) -> tuple[str, str | None]:
    error_message = str(error) if isinstance(error, Exception) else error
    error_lower = error_message.lower()

    for mapping in ERROR_MAPPINGS:
        if re.search(mapping.error_pattern, error_lower):
            return mapping.user_message, mapping.suggest_action

    return "An unexpected error occurred.", None


def format_error_for_user(error: Exception | str) -> str:
    user_message, suggestion = get_user_friendly_error(error)
    if suggestion:
        return f"{user_message} {suggestion}"
    return user_message


class StructuredFormatter(logging.Formatter):
    def __init__(
        self,
        sanitize: bool = True,
        include_context: bool = True,
        preserve_addresses: bool = True,
    ):
        super().__init__()
        self.sanitize = sanitize
        self.include_context = include_context
        self.preserve_addresses = preserve_addresses

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.include_context:
            log_data["module"] = record.module
            log_data["function"] = record.funcName
            log_data["line"] = record.lineno

        extra_data = getattr(record, "context", None)
        if extra_data and isinstance(extra_data, dict):
            if self.sanitize:
                extra_data = sanitize_dict(extra_data, self.preserve_addresses)
            log_data["context"] = extra_data

        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            if self.sanitize:
                exc_text = sanitize_message(exc_text, self.preserve_addresses)
            log_data["exception"] = exc_text

        if self.sanitize:
            log_data["message"] = sanitize_message(
                log_data["message"], self.preserve_addresses
            )

        try:
            return json.dumps(log_data)
        except (TypeError, ValueError):
            return f"{log_data['timestamp']} - {log_data['logger']} - {log_data['level']} - {log_data['message']}"


class HumanReadableFormatter(logging.Formatter):
    def __init__(
        self,
        sanitize: bool = True,
        preserve_addresses: bool = True,
    ):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.sanitize = sanitize
        self.preserve_addresses = preserve_addresses

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        context = getattr(record, "context", None)
        if context and isinstance(context, dict):
            fields = " ".join(f"{key}={value}" for key, value in context.items())
            formatted = f"{formatted} [{fields}]"
        if self.sanitize:
            formatted = sanitize_message(formatted, self.preserve_addresses)
        return formatted


class ContextAdapter(logging.LoggerAdapter):
    """Logger adapter that carries a ``context`` dict onto every record."""

    def __init__(
        self,
        logger: logging.Logger,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(logger, context or {})

    def process(
        self,
        msg: str,
        kwargs: dict[str, Any],
    ) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        context = {**(self.extra or {}), **extra.get("context", {})}
        if context:
            extra = {**extra, "context": context}
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **kwargs: Any) -> "ContextAdapter":
        new_context = {**(self.extra or {}), **kwargs}
        return ContextAdapter(self.logger, new_context)


_logging_initialized = False


def _build_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.log_format == "json":
        return StructuredFormatter(
            sanitize=config.sanitize_sensitive,
            include_context=config.include_context,
        )
    return HumanReadableFormatter(sanitize=config.sanitize_sensitive)


def setup_logging(config: LoggingConfig | None = None, force: bool = False) -> None:
    global _logging_initialized

    if _logging_initialized and not force:
        return

    if config is None:
        config = LoggingConfig.from_environment()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.log_level.value))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers: list[logging.Handler] = []

    if config.log_to_file:
        log_dir = config.log_dir or Path.home() / ".sepolia-quick-wallet"
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            log_dir / config.log_filename, mode="a", encoding="utf-8"
        )
        handlers.append(file_handler)

    if config.log_to_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    formatter = _build_formatter(config)
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _logging_initialized = True


def get_logger(
    name: str,
    context: dict[str, Any] | None = None,
) -> ContextAdapter:
    return ContextAdapter(logging.getLogger(name), context)


__all__ = [
    "LogLevel",
    "LoggingConfig",
    "ContextAdapter",
    "StructuredFormatter",
    "HumanReadableFormatter",
    "sanitize_message",
    "get_user_friendly_error",
    "setup_logging",
    "get_logger",
    "format_error_for_user",
]
