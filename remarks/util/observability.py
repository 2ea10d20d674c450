"""Logfire setup for the comment subsystem.

Services log directly through ``logfire``:

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("cascade_deleter.delete_with_descendants", comment_id=...):
        ...

Commenter emails and addresses are personal data; the scrubber masks
attributes named after them before anything leaves the process.
"""

import logfire
from sqlalchemy.ext.asyncio import AsyncEngine

from remarks.config import Settings

# Attribute names masked in spans and logs, on top of Logfire's defaults
SCRUBBED_ATTRIBUTES = ["author_email", "ip_address", "user_agent"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud export follows ``OBSERVABILITY__SEND_TO_LOGFIRE`` when set, and
    otherwise is on exactly when ``OBSERVABILITY__LOGFIRE_TOKEN`` is present.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    logfire.configure(
        service_name="remarks",
        service_version="1.0.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_ATTRIBUTES),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run by the comment repositories.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Span context in SQL comments
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_redis() -> None:
    """Trace rate-limit counter commands."""
    logfire.instrument_redis()
    logfire.info("Redis instrumented")
