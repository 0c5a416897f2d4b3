"""Tests for property and method extraction."""

from collections.abc import Callable

from tree_sitter import Node

from conftest import find_nodes
from lit_docs.member_parser import is_lifecycle_method, parse_method, parse_property
from lit_docs.models import ParameterDocs, PropertyDocs, ReturnDocs

ParseTs = Callable[[str], Node]


def _properties(parse_ts: ParseTs, body: str) -> list[PropertyDocs]:
    root = parse_ts(f"class A extends B {{\n{body}\n}}")
    fields = find_nodes(root, "public_field_definition")
    return [p for p in (parse_property(f) for f in fields) if p is not None]


def _methods(parse_ts: ParseTs, body: str) -> list:
    root = parse_ts(f"class A extends B {{\n{body}\n}}")
    return [m for m in (parse_method(n) for n in find_nodes(root, "method_definition")) if m is not None]


def test_property_fields(parse_ts: ParseTs) -> None:
    """Verify the recorded fields of a documented property."""
    body = """
  /**
   * Primary label.
   * @required
   * @deprecated Use heading
   */
  @property({ type: String, reflect: true })
  primaryLabel = 'Click me';
"""
    (prop,) = _properties(parse_ts, body)
    assert prop == PropertyDocs(
        name="primaryLabel",
        type="string",
        attribute="primary-label",
        description="Primary label.",
        default="'Click me'",
        reflects=True,
        state=False,
        required=True,
        deprecated="Use heading",
    )


def test_property_attribute_rules(parse_ts: ParseTs) -> None:
    """Verify explicit, disabled and state attribute handling."""
    body = """
  @property({ attribute: 'data-mode' }) mode = 'a';
  @property({ attribute: false }) options = {};
  @state() open = false;
  @internalProperty() legacy = 1;
"""
    props = {p.name: p for p in _properties(parse_ts, body)}
    assert props["mode"].attribute == "data-mode"
    assert props["options"].attribute is None
    assert props["open"].attribute is None
    assert props["open"].state is True
    assert props["legacy"].state is True


def test_property_exclusions(parse_ts: ParseTs) -> None:
    """Verify that private, static and undecorated fields are not documented."""
    body = """
  @property() private hidden = 1;
  @property() static shared = 2;
  @property() #secret = 3;
  plain = 4;
  @property() visible = 5;
"""
    assert [p.name for p in _properties(parse_ts, body)] == ["visible"]


def test_property_default_sanitization(parse_ts: ParseTs) -> None:
    """Verify whitespace collapsing, truncation and template placeholders."""
    body = """
  @property() items = [
    1,
    2,
  ];
  @property() long = 'abcdefghijklmnopqrstuvwxyzabcdefghijklmnopqrstuvwxyz';
  @property() styles = css`:host { display: block; }`;
"""
    props = {p.name: p for p in _properties(parse_ts, body)}
    assert props["items"].default == "[ 1, 2, ]"
    assert props["long"].default == "'abcdefghijklmnopqrstuvwxyzabcdefghijklmnopqrstuvw..."
    assert props["styles"].default == "(template)"


def test_method_fields(parse_ts: ParseTs) -> None:
    """Verify parameters, returns and flags of a documented method."""
    body = """
  /**
   * Loads items.
   * @param url - Where to fetch from
   * @param retries - Attempt count
   * @returns The loaded items
   */
  async load(url: string, retries = 3, label?: string, ...rest: number[]): Promise<string[]> {
    return [];
  }
"""
    (method,) = _methods(parse_ts, body)
    assert method.name == "load"
    assert method.description == "Loads items."
    assert method.is_async is True
    assert method.parameters == [
        ParameterDocs(name="url", type="string", description="Where to fetch from"),
        ParameterDocs(name="retries", type="any", description="Attempt count", optional=True, default="3"),
        ParameterDocs(name="label", type="string", optional=True),
        ParameterDocs(name="rest", type="number[]"),
    ]
    assert method.returns == ReturnDocs(type="Promise<string[]>", description="The loaded items")


def test_method_without_return_type(parse_ts: ParseTs) -> None:
    """Verify that methods without a return annotation have no return fact."""
    (method,) = _methods(parse_ts, "  open() {}")
    assert method.returns is None
    assert method.parameters == []
    assert method.is_async is False


def test_method_exclusions(parse_ts: ParseTs) -> None:
    """Verify private, underscored, lifecycle and accessor members are skipped."""
    body = """
  constructor() { super(); }
  connectedCallback() {}
  render() {}
  willUpdate() {}
  private secret() {}
  #hidden() {}
  _internal() {}
  get value() { return 1; }
  set value(v) {}
  protected refresh() {}
  public toggle() {}
"""
    assert [m.name for m in _methods(parse_ts, body)] == ["refresh", "toggle"]


def test_is_lifecycle_method() -> None:
    """Verify lifecycle name detection."""
    assert is_lifecycle_method("firstUpdated")
    assert is_lifecycle_method("createRenderRoot")
    assert not is_lifecycle_method("focus")
