"""Case-insensitive queries over the HTML element registry.

All lookups are total: an unknown tag, category or type gives ``None``,
``False`` or an empty list. Returned records are copies, so callers may
modify them freely.
"""

from collections.abc import Iterator, Mapping
from functools import cache
from pathlib import Path

from .models import ElementRecord, ElementType
from .storage import load_registry

DATA_PATH = Path(__file__).parent / "data" / "elements.json"


class ElementRegistry:
    """Read-only query layer over a tag -> record mapping."""

    def __init__(self, elements: Mapping[str, ElementRecord]):
        self._elements: dict[str, ElementRecord] = {tag: record.model_copy() for tag, record in elements.items()}

    @classmethod
    def from_file(cls, path: Path) -> "ElementRegistry":
        """Load a registry from a JSON file.

        Raises:
            RegistryLoadError: If the file is missing or malformed
        """
        return cls(load_registry(path))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, tag: object) -> bool:
        return isinstance(tag, str) and tag.lower() in self._elements

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._elements))

    # Element lookup

    def get_element(self, tag: str) -> ElementRecord | None:
        """Get a copy of the record for a tag (case-insensitive)."""
        element = self._elements.get(tag.lower())
        return element.model_copy() if element else None

    # Type checkers

    def is_element_type(self, tag: str, element_type: ElementType) -> bool:
        element = self._elements.get(tag.lower())
        return element is not None and element.type == element_type

    def is_block(self, tag: str) -> bool:
        return self.is_element_type(tag, "block")

    def is_inline(self, tag: str) -> bool:
        return self.is_element_type(tag, "inline")

    def is_meta(self, tag: str) -> bool:
        return self.is_element_type(tag, "meta")

    def is_table(self, tag: str) -> bool:
        return self.is_element_type(tag, "table")

    def is_form(self, tag: str) -> bool:
        return self.is_element_type(tag, "form")

    def is_multimedia(self, tag: str) -> bool:
        return self.is_element_type(tag, "multimedia")

    def is_script(self, tag: str) -> bool:
        return self.is_element_type(tag, "script")

    def is_void(self, tag: str) -> bool:
        """Check if a tag is a void (self-closing) element."""
        element = self._elements.get(tag.lower())
        return element is not None and element.is_void

    # Filters

    def get_elements_by_category(self, category: str) -> list[ElementRecord]:
        """Get copies of all elements in a category (case-insensitive)."""
        wanted = category.lower()
        return [e.model_copy() for e in self._elements.values() if e.category.lower() == wanted]

    def get_elements_by_type(self, element_type: ElementType) -> list[ElementRecord]:
        return [e.model_copy() for e in self._elements.values() if e.type == element_type]

    def get_void_elements(self) -> list[ElementRecord]:
        return [e.model_copy() for e in self._elements.values() if e.is_void]

    # Metadata

    def get_all_categories(self) -> list[str]:
        """Distinct category names, sorted."""
        return sorted({e.category for e in self._elements.values()})

    def get_all_types(self) -> list[str]:
        """Distinct element types present in the registry, sorted."""
        return sorted({e.type for e in self._elements.values()})


@cache
def default_registry() -> ElementRegistry:
    """Registry bundled with the package, loaded once per process."""
    return ElementRegistry.from_file(DATA_PATH)


def get_element(tag: str) -> ElementRecord | None:
    return default_registry().get_element(tag)


def is_element_type(tag: str, element_type: ElementType) -> bool:
    return default_registry().is_element_type(tag, element_type)


def is_block(tag: str) -> bool:
    return default_registry().is_block(tag)


def is_inline(tag: str) -> bool:
    return default_registry().is_inline(tag)


def is_meta(tag: str) -> bool:
    return default_registry().is_meta(tag)


def is_table(tag: str) -> bool:
    return default_registry().is_table(tag)


def is_form(tag: str) -> bool:
    return default_registry().is_form(tag)


def is_multimedia(tag: str) -> bool:
    return default_registry().is_multimedia(tag)


def is_script(tag: str) -> bool:
    return default_registry().is_script(tag)


def is_void(tag: str) -> bool:
    return default_registry().is_void(tag)


def get_elements_by_category(category: str) -> list[ElementRecord]:
    return default_registry().get_elements_by_category(category)


def get_elements_by_type(element_type: ElementType) -> list[ElementRecord]:
    return default_registry().get_elements_by_type(element_type)


def get_void_elements() -> list[ElementRecord]:
    return default_registry().get_void_elements()


def get_all_categories() -> list[str]:
    return default_registry().get_all_categories()


def get_all_types() -> list[str]:
    return default_registry().get_all_types()
