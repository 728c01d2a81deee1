"""Support utilities for folparse (structured logging)."""
