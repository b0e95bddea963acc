class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class StoreUnavailableError(RepositoryError):
    pass


class ConfigurationError(DomainError):
    pass
