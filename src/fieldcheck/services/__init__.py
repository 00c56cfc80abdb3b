"""Service layer — host-facing helpers built on the domain validators."""

from fieldcheck.services.registry import ValidatorRegistry

__all__ = ["ValidatorRegistry"]
