"""Infra - implementações concretas de IO (HTTP)."""
