"""Metadata lookup for HTML elements, scraped from the MDN element reference."""

from .models import ELEMENT_TYPES, VOID_TAGS, ElementRecord, ElementType
from .registry import (
    ElementRegistry,
    default_registry,
    get_all_categories,
    get_all_types,
    get_element,
    get_elements_by_category,
    get_elements_by_type,
    get_void_elements,
    is_block,
    is_element_type,
    is_form,
    is_inline,
    is_meta,
    is_multimedia,
    is_script,
    is_table,
    is_void,
)
from .storage import RegistryLoadError

__all__ = [
    "ELEMENT_TYPES",
    "VOID_TAGS",
    "ElementRecord",
    "ElementType",
    "ElementRegistry",
    "RegistryLoadError",
    "default_registry",
    "get_element",
    "is_element_type",
    "is_block",
    "is_inline",
    "is_meta",
    "is_table",
    "is_form",
    "is_multimedia",
    "is_script",
    "is_void",
    "get_elements_by_category",
    "get_elements_by_type",
    "get_void_elements",
    "get_all_categories",
    "get_all_types",
]
