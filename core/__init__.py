"""
Core Package

Exchange-agnostic building blocks shared by the connectors:
- config: Pydantic Settings loaded from environment / .env
- logging: Package-wide logging setup
- errors: Exception hierarchy (TransportError, DecodeError, UnknownSymbol, ...)
- schemas: Pydantic models for server time and exchange information
"""
