"""Package metadata, kept free of imports so setup.py can read it."""

__version__ = "1.0.0"
__author__ = "Infoblox Admin Tools"
__description__ = (
    "Infoblox grid administration toolkit: CSV ingestion, config handling and API distribution updates"
)
__license__ = "MIT"
