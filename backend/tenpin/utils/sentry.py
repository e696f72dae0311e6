import logging
import os
from importlib import metadata

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

logger = logging.getLogger(__name__)

SERVICE_NAME = "tenpin-scoring"


def _sample_rate(env_var: str, default: float = 0.0) -> float:
    raw_value = os.getenv(env_var)
    if raw_value is None:
        return default

    try:
        value = float(raw_value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %.2f", env_var, raw_value, default)
        return default

    if not 0.0 <= value <= 1.0:
        logger.warning("Ignoring %s=%r: outside 0..1, using %.2f", env_var, raw_value, default)
        return default

    return value


def _release() -> str:
    """``SENTRY_RELEASE`` if set, else ``tenpin-scoring@<installed version>``."""
    release = (os.getenv("SENTRY_RELEASE") or "").strip()
    if release:
        return release
    try:
        version = metadata.version(SERVICE_NAME)
    except metadata.PackageNotFoundError:
        version = "dev"
    return f"{SERVICE_NAME}@{version}"


def init_sentry() -> bool:
    """Report errors to Sentry when ``SENTRY_DSN`` is set; return whether it was."""
    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        logger.info("SENTRY_DSN not provided; skipping Sentry initialization.")
        return False

    environment = (os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None
    release = _release()
    sentry_sdk.init(
        dsn=dsn,
        integrations=[FastApiIntegration()],
        environment=environment,
        release=release,
        traces_sample_rate=_sample_rate("SENTRY_TRACES_SAMPLE_RATE"),
        profiles_sample_rate=_sample_rate("SENTRY_PROFILES_SAMPLE_RATE"),
    )
    sentry_sdk.set_tag("service", SERVICE_NAME)
    logger.info("Initialized Sentry release=%s environment=%s", release, environment)
    return True
