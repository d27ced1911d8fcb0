"""GraphQL document helpers."""

from graphql import DocumentNode, OperationType, get_operation_ast, parse, print_ast


def print_document(document: DocumentNode | str) -> str:
    """Return the canonical printed form of a GraphQL document.

    Whitespace, comments and formatting differences disappear, so
    equivalent query texts produce the same cache key.

    Args:
        document: A parsed document or raw query text.

    Returns:
        The printed document.

    Raises:
        GraphQLError: If the query text does not parse.
    """
    if isinstance(document, str):
        document = parse(document)
    return print_ast(document)


def operation_type(
    document: DocumentNode,
    operation_name: str | None = None,
) -> OperationType | None:
    """Return the type of the operation a request selects.

    Args:
        document: The parsed document.
        operation_name: The operation to select, if the document has several.

    Returns:
        The operation type, or None if no single operation matches.
    """
    operation = get_operation_ast(document, operation_name)
    return operation.operation if operation is not None else None
