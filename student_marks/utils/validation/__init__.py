"""Validation utilities - Input validation, injection guards"""
from .validation_utils import ValidationUtils
