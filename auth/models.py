"""This module re-exports the Credential record from the database package for use in authentication-related code.
"""

from database.models import Credential  # noqa: F401

__all__ = ["Credential"]
