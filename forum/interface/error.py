"""Errors raised by the HTTP interface itself."""


class InterfaceError(Exception):
    pass


class AuthenticationRequiredError(InterfaceError):
    """An endpoint that needs a caller got no bearer token.

    Answered with 401, like a rejected token.
    """
