"""Setup Sentry."""

import logging
import os

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration


def init_sentry() -> None:
    """Initialise Sentry when SENTRY_DSN is configured."""
    dsn = os.environ.get("SENTRY_DSN")
    if not dsn:
        return

    # ERROR logs become events, INFO+ are kept as breadcrumbs
    logging_integration = LoggingIntegration(
        level=logging.INFO,
        event_level=logging.ERROR,
    )

    sentry_sdk.init(
        dsn=dsn,
        integrations=[
            FastApiIntegration(),
            logging_integration,
        ],
        environment=os.environ.get("APP_ENVIRONMENT", "local"),
        send_default_pii=False,
        traces_sample_rate=float(os.environ.get("SENTRY_TRACES_SAMPLE_RATE", "0.1")),
    )
