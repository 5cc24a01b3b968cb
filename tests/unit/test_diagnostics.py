"""Tests for the diagnostic tree and the tree-wide queries."""

from __future__ import annotations

from podval.diagnostics import (
    NODE_VALUE,
    Custom,
    MissingAttribute,
    MissingChild,
    Namespace,
    Node,
    Object,
    TagName,
    Text,
    ValidationStatus,
    count_errors,
    descendants_have_errors,
    descendants_have_namespace_tags,
    iter_errors,
    summarize,
)

RSS = TagName.rss("rss")
CHANNEL = TagName.rss("channel")
FUNDING = TagName.podcast("funding")


class TestTagName:
    def test_plain_tag(self) -> None:
        assert str(TagName.rss("title")) == "title"
        assert TagName.rss("title") == TagName(None, "title")

    def test_namespaced_tag(self) -> None:
        assert str(FUNDING) == "podcast:funding"
        assert FUNDING.namespace is Namespace.PODCAST


class TestNode:
    def test_defaults_are_empty(self) -> None:
        node = Node(RSS)
        assert node.children == []
        assert node.attributes == []
        assert node.errors == []

    def test_attribute_lookup(self) -> None:
        node = Node(FUNDING, attributes=[(NODE_VALUE, Text("Tip jar"))])
        assert node.attribute(NODE_VALUE) == Text("Tip jar")
        assert node.attribute("url") is None

    def test_children_named(self) -> None:
        funding = Node(FUNDING)
        title = Node(TagName.rss("title"))
        channel = Node(CHANNEL, children=[title, funding])
        assert channel.children_named(FUNDING) == [funding]


class TestErrorRollup:
    def test_leaf_without_errors(self) -> None:
        assert descendants_have_errors(Node(FUNDING)) is False

    def test_leaf_with_errors(self) -> None:
        node = Node(FUNDING, errors=[MissingAttribute("url")])
        assert descendants_have_errors(node) is True

    def test_error_deep_in_tree(self) -> None:
        leaf = Node(FUNDING, errors=[MissingAttribute("url")])
        root = Node(RSS, children=[Node(CHANNEL, children=[leaf])])
        assert descendants_have_errors(root) is True

    def test_parent_errors_count_without_children(self) -> None:
        root = Node(RSS, errors=[MissingChild(CHANNEL)])
        assert descendants_have_errors(root) is True


class TestNamespaceRollup:
    def test_plain_tree(self) -> None:
        root = Node(RSS, children=[Node(CHANNEL, children=[Node(TagName.rss("title"))])])
        assert descendants_have_namespace_tags(root) is False

    def test_namespaced_descendant(self) -> None:
        root = Node(RSS, children=[Node(CHANNEL, children=[Node(FUNDING)])])
        assert descendants_have_namespace_tags(root) is True

    def test_namespaced_root(self) -> None:
        assert descendants_have_namespace_tags(Node(FUNDING)) is True


class TestIterErrors:
    def test_document_order_with_paths(self) -> None:
        first = Node(FUNDING, errors=[MissingAttribute("url")])
        second = Node(FUNDING, errors=[Custom("second")])
        channel = Node(CHANNEL, children=[first, second], errors=[Custom("channel")])
        root = Node(RSS, children=[channel])

        collected = list(iter_errors(root))

        assert collected == [
            ((RSS, CHANNEL), Custom("channel")),
            ((RSS, CHANNEL, FUNDING), MissingAttribute("url")),
            ((RSS, CHANNEL, FUNDING), Custom("second")),
        ]
        assert count_errors(root) == 3


class TestSummarize:
    def test_no_namespace_tags(self) -> None:
        summary = summarize(Node(RSS, children=[Node(CHANNEL)]))
        assert summary.status is ValidationStatus.NO_NAMESPACE_TAGS
        assert summary.error_count == 0
        assert summary.has_namespace_tags is False

    def test_valid(self) -> None:
        funding = Node(FUNDING, attributes=[("url", Object("x"))])
        summary = summarize(Node(RSS, children=[Node(CHANNEL, children=[funding])]))
        assert summary.status is ValidationStatus.VALID

    def test_errors_win_over_missing_namespace_tags(self) -> None:
        summary = summarize(Node(RSS, errors=[MissingChild(CHANNEL)]))
        assert summary.status is ValidationStatus.INVALID
        assert summary.error_count == 1
        assert summary.has_namespace_tags is False
