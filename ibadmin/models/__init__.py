#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the Infoblox administration toolkit.
"""

from .record import (
    FieldKind,
    FieldValue,
    Record,
    Schema,
    Parsed,
    Malformed,
    ParseOutcome,
)
from .ingest import IngestSettings, IngestResult
from .update import UpdatePlan

__all__ = [
    "FieldKind",
    "FieldValue",
    "Record",
    "Schema",
    "Parsed",
    "Malformed",
    "ParseOutcome",
    "IngestSettings",
    "IngestResult",
    "UpdatePlan",
]
