"""Cross-cutting infrastructure: settings, logging, telemetry and the DI container."""
