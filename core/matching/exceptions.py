#!/usr/bin/env python3
"""
Custom exceptions for the team matching service layer.
"""

from typing import Any


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class UserNotFoundException(ServiceException):
    """Raised when a user is not found."""
    pass


class TeamNotFoundException(ServiceException):
    """Raised when a team is not found."""
    pass


class InvalidPreferencesException(ServiceException):
    """Raised when team preferences fail validation."""

    def __init__(self, message: str, errors: Any = None):
        super().__init__(message)
        self.errors = errors or []
