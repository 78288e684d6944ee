# hexagonal_users/shared/telemetry.py
import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from hexagonal_users import __version__
from hexagonal_users.shared.config import settings

logger = structlog.get_logger()


def setup_telemetry(service_name: str = settings.OTEL_SERVICE_NAME) -> bool:
    """
    Initializes the OpenTelemetry SDK with OTLP export.
    Should be called once at process startup.

    Returns False (and leaves the default no-op provider in place) when no
    OTLP endpoint is configured.
    """
    if not settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT configured")
        return False

    logger.info("telemetry_enabled", service=service_name)

    # 1. Resource: who is emitting the spans
    resource = Resource.create(attributes={
        "service.name": service_name,
        "deployment.environment": settings.APP_ENV.value,
        "service.version": __version__,
    })

    # 2. Tracer Provider
    trace_provider = TracerProvider(resource=resource)

    # 3. OTLP/HTTP exporter, batched off the request path
    otlp_exporter = OTLPSpanExporter(endpoint=f"{settings.OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces")
    trace_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    # 4. Optional: echo spans to the console while debugging
    if settings.DEBUG:
        trace_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    # 5. Make it the global provider used by get_tracer()
    trace.set_tracer_provider(trace_provider)
    return True


def instrument_fastapi(app) -> None:
    """
    Auto-instruments the FastAPI application to trace incoming HTTP requests.
    """
    if settings.OTEL_EXPORTER_OTLP_ENDPOINT:
        FastAPIInstrumentor.instrument_app(app)


def get_tracer(name: str):
    """
    Utility to get a tracer for manual instrumentation in specific modules.
    """
    return trace.get_tracer(name)
