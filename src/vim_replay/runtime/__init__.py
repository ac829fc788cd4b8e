"""Runtime services (telemetry) shared by every layer."""
