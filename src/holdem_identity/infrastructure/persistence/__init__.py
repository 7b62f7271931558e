"""Persistence implementations for holdem_identity.

This package contains storage-specific implementations of the
UserRepository interface defined in holdem_identity.domain.user.

Structure:
    persistence/
    ├── sqlalchemy/     # SQLAlchemy/SQL database implementation
    └── memory/         # In-process dictionary implementation
"""
