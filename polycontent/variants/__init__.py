"""Variant identity, selection and core types."""

from .identity import (
    canonical_id_for,
    relative_content_path,
    resolve_identity,
    resolve_identity_from_id,
    split_language_suffix,
    variant_language_key,
)
from .selector import select_preferred_variant, sort_variants_in_group
from .types import Document, EmptyVariantSetError, VariantError, VariantGroup, VariantIdentity

__all__ = [
    "Document",
    "VariantGroup",
    "VariantIdentity",
    "VariantError",
    "EmptyVariantSetError",
    "canonical_id_for",
    "relative_content_path",
    "resolve_identity",
    "resolve_identity_from_id",
    "split_language_suffix",
    "variant_language_key",
    "select_preferred_variant",
    "sort_variants_in_group",
]
