"""Persistence implementations for stockroom_auth.

This package contains database-specific implementations of the
repository interfaces defined in stockroom_auth.repositories.

Usage:
    from stockroom_auth.persistence.sqlalchemy import (
        UserCredentialRepositorySQLAlchemy,
        UserCredentialModel,
        AuthBase,
    )
"""
