"""
Tests for MessageCatalogue merge and access semantics.
"""

import pytest

from translationloader.domain.catalogue import MessageCatalogue
from translationloader.domain.errors import LocaleMismatchError


class TestMessageCatalogue:
    """Test cases for MessageCatalogue."""

    def test_add_and_entries(self):
        catalogue = MessageCatalogue("en")
        catalogue.add({"greeting": "Hi", "farewell": "Bye"}, "messages")

        assert catalogue.entries("messages") == {"greeting": "Hi", "farewell": "Bye"}
        assert catalogue.domains() == ["messages"]
        assert len(catalogue) == 2

    def test_entries_unknown_domain_is_empty(self):
        assert MessageCatalogue("en").entries("validators") == {}

    def test_entries_returns_copy(self):
        catalogue = MessageCatalogue("en", {"messages": {"a": "1"}})
        catalogue.entries("messages")["a"] = "changed"
        assert catalogue.get("a") == "1"

    def test_default_domain_is_messages(self):
        catalogue = MessageCatalogue("en")
        catalogue.set("greeting", "Hi")
        assert catalogue.has("greeting", "messages")
        assert catalogue.get("greeting") == "Hi"
        assert catalogue.get("missing") is None

    def test_merge_last_wins(self):
        """Keys only in A keep A, keys only in B get B, shared keys end with B."""
        a = MessageCatalogue("en", {"messages": {"only_a": "A", "shared": "from A"}})
        b = MessageCatalogue("en", {"messages": {"only_b": "B", "shared": "from B"}})

        a.merge(b)

        assert a.entries("messages") == {
            "only_a": "A",
            "only_b": "B",
            "shared": "from B",
        }

    def test_merge_keeps_domains_apart(self):
        a = MessageCatalogue("en", {"messages": {"title": "Home"}})
        b = MessageCatalogue("en", {"validators": {"title": "Required"}})

        a.merge(b)

        assert sorted(a.domains()) == ["messages", "validators"]
        assert a.get("title", "messages") == "Home"
        assert a.get("title", "validators") == "Required"

    def test_merge_does_not_modify_incoming(self):
        a = MessageCatalogue("en", {"messages": {"x": "1"}})
        b = MessageCatalogue("en", {"messages": {"y": "2"}})
        a.merge(b)
        assert b.entries("messages") == {"y": "2"}

    def test_merge_other_locale_raises(self):
        with pytest.raises(LocaleMismatchError):
            MessageCatalogue("en").merge(MessageCatalogue("de"))

    def test_iteration_yields_triples(self):
        catalogue = MessageCatalogue("en", {"messages": {"a": "1"}, "errors": {"b": "2"}})
        assert sorted(catalogue) == [("errors", "b", "2"), ("messages", "a", "1")]

    def test_all_returns_copy(self):
        catalogue = MessageCatalogue("fr", {"messages": {"a": "1"}})
        snapshot = catalogue.all()
        snapshot["messages"]["a"] = "changed"
        assert catalogue.get("a") == "1"
