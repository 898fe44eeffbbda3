"""Infrastructure modules for the locale routing service.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging setup and request context
- operations: Operation results (OperationResult, OperationStatus)
- clients: External clients (MaxMind GeoIP2)
- i18n: Locale routing and translation loading
- services: Dependency injection providers and type aliases
"""
