"""Pydantic models for the HTML element registry.

The JSON interchange format keeps the upstream field names, so
``is_void`` is written and read as ``isVoid``.
"""

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Type aliases
ElementType = Literal["block", "body", "form", "inline", "meta", "multimedia", "root", "script", "table"]

ELEMENT_TYPES: tuple[str, ...] = get_args(ElementType)

# Section heading prefix -> element type, checked in order
SECTION_TYPES: dict[str, ElementType] = {
    "Main root": "root",
    "Document metadata": "meta",
    "Sectioning root": "body",
    "Content sectioning": "block",
    "Text content": "block",
    "Inline text semantics": "inline",
    "Image and multimedia": "multimedia",
    "Embedded content": "block",
    "SVG and MathML": "block",
    "Scripting": "script",
    "Demarcating edits": "block",
    "Table content": "table",
    "Forms": "form",
    "Interactive elements": "block",
    "Web Components": "block",
    "Obsolete and deprecated elements": "block",
}

VOID_TAGS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


class ElementRecord(BaseModel):
    """One HTML element kind, keyed by its lowercase tag."""

    model_config = ConfigDict(populate_by_name=True)

    tag: str = Field(description="Lowercase tag name without angle brackets (e.g., 'div')")
    description: str = Field(default="", description="Summary text from the reference table")
    type: ElementType
    category: str = Field(description="Section title the tag was last seen under")
    url: str = Field(description="Absolute documentation URL")
    is_void: bool = Field(alias="isVoid", description="True for self-closing tags")

    @field_validator("tag")
    @classmethod
    def tag_must_be_normalized(cls, v: str) -> str:
        """Ensure tag is non-empty, lowercase and free of angle brackets."""
        if not v:
            raise ValueError("Tag cannot be empty")
        if v != v.lower() or "<" in v or ">" in v:
            raise ValueError(f"Tag must be lowercase without angle brackets, got: {v}")
        return v

    @field_validator("url")
    @classmethod
    def url_must_be_absolute(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL must start with http:// or https://, got: {v}")
        return v


Registry = dict[str, ElementRecord]
