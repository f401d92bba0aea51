"""Translatable messages with ICU formatting and locale fallback.

Packages:
- configuration: pydantic-settings based configuration
- logging: structlog setup and module loggers
- i18n: message sources, ICU formatting, translator and error carriers
"""
