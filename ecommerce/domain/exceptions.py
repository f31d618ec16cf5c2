# ecommerce/domain/exceptions.py


class DomainError(Exception):
    """Base class for errors raised by the domain layer."""


class DomainValidationError(DomainError):
    pass


class NotFoundError(DomainError):
    pass
