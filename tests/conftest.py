import pytest

from html_elements.models import ElementRecord

ELEMENTS = "/en-US/docs/Web/HTML/Reference/Elements"

INDEX_HTML = f"""
<html><body>
<main class="reference-layout__body">
  <section class="content-section">
    <h2><a href="#main_root">Main root</a></h2>
    <figure class="table-container"><table>
      <thead><tr><th>Element</th><th>Description</th></tr></thead>
      <tbody>
        <tr><td><a href="{ELEMENTS}/html"><code>&lt;html&gt;</code></a></td><td>The root element.</td></tr>
      </tbody>
    </table></figure>
  </section>
  <section class="content-section">
    <h2><a href="#text_content">Text content</a></h2>
    <figure class="table-container"><table>
      <tbody>
        <tr><td><a href="{ELEMENTS}/div"><code>&lt;div&gt;</code></a></td><td>  Generic container.  </td></tr>
        <tr><td><a href="{ELEMENTS}/hr"><code>&lt;hr&gt;</code></a></td><td>Thematic break.</td></tr>
      </tbody>
    </table></figure>
  </section>
  <section class="content-section">
    <h2><a href="#inline_text_semantics">Inline text semantics</a></h2>
    <figure class="table-container"><table>
      <tbody>
        <tr><td><a href="{ELEMENTS}/a"><code>&lt;a&gt;</code></a></td><td>Creates a hyperlink.</td></tr>
        <tr><td><a href="{ELEMENTS}/span"><code>&lt;SPAN&gt;</code></a></td><td>Inline container.</td></tr>
        <tr><td><a href="{ELEMENTS}/wbr"></a><code>&lt;wbr&gt;</code></td><td>Word break opportunity.</td></tr>
        <tr><td><a href="/en-US/docs/Glossary/Inline"><code>&lt;fake&gt;</code></a></td><td>Not an element link.</td></tr>
        <tr><td><a href="{ELEMENTS}/empty"></a></td><td>No tag text anywhere.</td></tr>
        <tr><td><a href="{ELEMENTS}/lonely">&lt;lonely&gt;</a></td></tr>
      </tbody>
    </table></figure>
  </section>
  <section class="content-section">
    <h2><a href="#forms">Forms</a></h2>
    <figure class="table-container"><table>
      <tbody>
        <tr><td><a href="https://developer.mozilla.org{ELEMENTS}/input"><code>&lt;input&gt;</code></a></td>
            <td>An input field</td></tr>
        <tr><td><a href="{ELEMENTS}/button"><code>&lt;button&gt;</code></a></td><td>A button.</td></tr>
      </tbody>
    </table></figure>
  </section>
  <section class="content-section">
    <h2>Scripting</h2>
    <p>This section has no table.</p>
  </section>
  <section class="content-section">
    <h2><a href="#see_also">See also</a></h2>
    <figure class="table-container"><table>
      <tbody>
        <tr><td><a href="{ELEMENTS}/section"><code>&lt;section&gt;</code></a></td><td>Unmapped.</td></tr>
      </tbody>
    </table></figure>
  </section>
  <section class="content-section">
    <h2><a href="#interactive_elements">Interactive elements</a></h2>
    <figure class="table-container"><table>
      <tbody>
        <tr><td><a href="{ELEMENTS}/a"><code>&lt;a&gt;</code></a></td><td>Seen a second time.</td></tr>
        <tr><td><a href="{ELEMENTS}/details"><code>&lt;details&gt;</code></a></td><td>Disclosure widget.</td></tr>
      </tbody>
    </table></figure>
  </section>
</main>
</body></html>
"""


@pytest.fixture
def index_html() -> str:
    return INDEX_HTML


def make_record(tag: str, element_type: str, category: str, is_void: bool = False) -> ElementRecord:
    return ElementRecord(
        tag=tag,
        description=f"The {tag} element.",
        type=element_type,
        category=category,
        url=f"https://developer.mozilla.org{ELEMENTS}/{tag}",
        is_void=is_void,
    )


@pytest.fixture
def sample_elements() -> dict[str, ElementRecord]:
    records = [
        make_record("div", "block", "Text content"),
        make_record("p", "block", "Text content"),
        make_record("span", "inline", "Inline text semantics"),
        make_record("br", "inline", "Inline text semantics", is_void=True),
        make_record("input", "form", "Forms", is_void=True),
        make_record("table", "table", "Table content"),
    ]
    return {record.tag: record for record in records}
