"""Core configuration for the record-keeping demos."""
