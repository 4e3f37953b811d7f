"""Shared utilities: id generation."""

from tenantscope.shared.utils.generators import generate_cuid

__all__ = ["generate_cuid"]
