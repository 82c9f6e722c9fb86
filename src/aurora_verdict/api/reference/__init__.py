"""Reference city dataset."""

from aurora_verdict.api.reference.cities import ReferenceCity, load_reference_cities


__all__ = ["ReferenceCity", "load_reference_cities"]
