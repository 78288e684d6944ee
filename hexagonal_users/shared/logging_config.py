# hexagonal_users/shared/logging_config.py
import logging
import sys

import structlog
from opentelemetry import trace

from hexagonal_users.shared.config import LogFormat, settings


def add_open_telemetry_spans(_, __, event_dict):
    """
    Processor to inject the current TraceID and SpanID into the log entry.
    Log lines emitted inside a request span can then be matched to the trace.
    """
    span = trace.get_current_span()
    if not span.is_recording():
        event_dict["trace_id"] = None
        event_dict["span_id"] = None
        return event_dict

    ctx = span.get_span_context()
    event_dict["trace_id"] = format(ctx.trace_id, "032x")
    event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def configure_logging(stream=None) -> None:
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).

    Logs are diagnostics, so they go to stderr unless another stream is given.
    """
    stream = stream if stream is not None else sys.stderr

    # 1. Processor chain: request context, trace ids, level, time, tracebacks
    processors = [
        structlog.contextvars.merge_contextvars,
        add_open_telemetry_spans,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Renderer picked by LOG_FORMAT
    if settings.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # LOG_LEVEL is an enum of stdlib level names, so this is always an int
    level = logging.getLevelName(settings.LOG_LEVEL.value)

    # 3. structlog drops events below LOG_LEVEL before rendering them
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )

    # 4. Uvicorn logs through the standard library; send it to the same stream
    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=level,
    )
