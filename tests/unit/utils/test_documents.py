"""Tests for GraphQL document helpers."""

import pytest
from graphql import GraphQLError, OperationType, parse

from fullquerycache.utils.documents import operation_type, print_document


class TestPrintDocument:
    def test_normalizes_formatting(self):
        compact = print_document("query{user(id:1){id name}}")
        spaced = print_document(
            """
            # fetch a user
            query {
                user(id: 1) { id   name }
            }
            """
        )

        assert compact == spaced

    def test_accepts_parsed_document(self):
        assert print_document(parse("{ a }")) == print_document("{ a }")

    def test_anonymous_shorthand(self):
        assert print_document("{a}") == "{\n  a\n}"

    def test_invalid_query(self):
        with pytest.raises(GraphQLError):
            print_document("query {")


class TestOperationType:
    def test_query(self):
        assert operation_type(parse("{ a }")) is OperationType.QUERY

    def test_mutation(self):
        assert operation_type(parse("mutation { a }")) is OperationType.MUTATION

    def test_selects_named_operation(self):
        document = parse("query A { a } mutation B { b }")

        assert operation_type(document, "A") is OperationType.QUERY
        assert operation_type(document, "B") is OperationType.MUTATION

    def test_ambiguous_without_name(self):
        document = parse("query A { a } query B { b }")

        assert operation_type(document) is None

    def test_unknown_name(self):
        assert operation_type(parse("query A { a }"), "Missing") is None
