"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold comment rules that span the comment and its
    owning post, or that need a repository to decide.
    """

    pass
