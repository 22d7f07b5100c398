"""Tests for selection-set resolution."""

import pytest

from gql_opgen.core.errors import UnknownKindError
from gql_opgen.core.ir import ListType, NamedType, NonNullType, TypeCatalog, TypeKind
from gql_opgen.core.selection import MAX_SELECTION_DEPTH, resolve_selection


def nesting_depth(nodes):
    """Number of nested groups along the deepest branch."""
    depth = 0
    for node in nodes:
        if isinstance(node, dict):
            for children in node.values():
                depth = max(depth, 1 + nesting_depth(children))
    return depth


def root_field(catalog, name):
    return next(op.field for op in catalog.all_operations if op.field.name == name)


class TestResolveSelection:
    """Tests for resolve_selection."""

    def test_token_selection(self, token_catalog):
        token = root_field(token_catalog, "token")
        assert resolve_selection(token.type, token_catalog) == [
            "id",
            "name",
            {"network": ["id", "name"]},
        ]

    def test_wrappers_do_not_change_result(self, token_catalog):
        token = NamedType(TypeKind.OBJECT, "Token")
        wrapped = NonNullType(ListType(NonNullType(token)))
        assert resolve_selection(wrapped, token_catalog) == resolve_selection(token, token_catalog)

    def test_root_scalar_has_empty_name(self, token_catalog):
        api_version = root_field(token_catalog, "apiVersion")
        assert resolve_selection(api_version.type, token_catalog) == [""]

    def test_union_contributes_nothing(self, token_catalog):
        search = root_field(token_catalog, "search")
        assert resolve_selection(search.type, token_catalog) == []

    def test_wrapped_union_contributes_nothing(self, token_catalog):
        union = NonNullType(ListType(NamedType(TypeKind.UNION, "SearchResult")))
        assert resolve_selection(union, token_catalog, "results", level=1) == []

    def test_nested_object_is_grouped(self, token_catalog):
        network = NamedType(TypeKind.OBJECT, "Network")
        assert resolve_selection(network, token_catalog, "network", level=1) == [
            {"network": ["id", "name"]},
        ]

    def test_keeps_accumulated_result(self, token_catalog):
        enum = NamedType(TypeKind.ENUM, "Duration")
        result = resolve_selection(enum, token_catalog, "duration", level=1, result=["id"])
        assert result == ["id", "duration"]

    def test_beyond_depth_returns_result_unchanged(self, token_catalog):
        scalar = NamedType(TypeKind.SCALAR, "String")
        result = resolve_selection(
            scalar, token_catalog, "name", level=MAX_SELECTION_DEPTH + 1, result=["id"]
        )
        assert result == ["id"]

    def test_unknown_object_has_no_children(self, token_catalog):
        missing = NamedType(TypeKind.OBJECT, "Missing")
        assert resolve_selection(missing, token_catalog, "missing", level=1) == [{"missing": []}]

    def test_input_object_is_not_selectable(self, token_catalog):
        with pytest.raises(UnknownKindError):
            resolve_selection(NamedType(TypeKind.INPUT_OBJECT, "TokenInput"), token_catalog)


class TestSelfReferentialSchema:
    """A type pointing back at itself must terminate at the depth cutoff."""

    def test_terminates_at_depth_cutoff(self, self_referential_schema):
        catalog = TypeCatalog.from_dict(self_referential_schema)
        node = root_field(catalog, "node")

        selection = resolve_selection(node.type, catalog)

        assert selection[0] == "id"
        assert nesting_depth(selection) == MAX_SELECTION_DEPTH

    def test_deepest_group_is_empty(self, self_referential_schema):
        catalog = TypeCatalog.from_dict(self_referential_schema)
        node = root_field(catalog, "node")

        branch = resolve_selection(node.type, catalog)
        for _ in range(MAX_SELECTION_DEPTH - 1):
            branch = branch[-1]["parent"]
        assert branch == ["id", {"parent": []}]
